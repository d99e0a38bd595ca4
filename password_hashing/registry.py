"""Parse and verify hash strings of any registered family.

Families are keyed by the prefix token of their hash id (the text before the
first ``-``). The family parser then validates the full string, including any
algorithm suffix.
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from password_hashing.errors import HashFormatError, MissingHashError, MissingPasswordError
from password_hashing.mcf import ModularCryptFormat, PasswordHash
from password_hashing.pbkdf2_hash import HASH_ID_PREFIX, PBKDF2Hash

logger = logging.getLogger(__name__)

HashParser = Callable[[str], Optional[PasswordHash]]


def _prefix_of(hash_id: str) -> str:
    return hash_id.split("-", 1)[0]


class PasswordHashRegistry:
    """Read-only mapping of hash id prefix to family parser."""

    def __init__(self, parsers: Optional[Mapping[str, HashParser]] = None) -> None:
        checked: Dict[str, HashParser] = {}
        for prefix, parser in (parsers or {}).items():
            if not prefix or "$" in prefix or "-" in prefix:
                raise ValueError(f"invalid hash id prefix: {prefix!r}")
            if not callable(parser):
                raise TypeError(f"parser for {prefix!r} is not callable")
            checked[prefix] = parser
        self._parsers = MappingProxyType(checked)

    @property
    def parsers(self) -> Mapping[str, HashParser]:
        return self._parsers

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._parsers

    def with_parser(self, prefix: str, parser: HashParser) -> "PasswordHashRegistry":
        """Return a new registry that also (or instead) maps ``prefix`` to ``parser``."""
        merged = dict(self._parsers)
        merged[prefix] = parser
        return PasswordHashRegistry(merged)

    def try_parse(self, text: str) -> Optional[PasswordHash]:
        mcf = ModularCryptFormat.try_parse(text)
        if mcf is None:
            return None
        prefix = _prefix_of(mcf.hash_id)
        parser = self._parsers.get(prefix)
        if parser is None:
            logger.debug("No hash family registered for prefix %r", prefix)
            return None
        return parser(text)

    def verify(self, password: str, text: str) -> bool:
        if password is None:
            raise MissingPasswordError("password must not be None")
        if text is None:
            raise MissingHashError("hash string must not be None")
        parsed = self.try_parse(text)
        if parsed is None:
            raise HashFormatError("unrecognised password hash string")
        return parsed.verify(password)


DEFAULT_REGISTRY = PasswordHashRegistry({HASH_ID_PREFIX: PBKDF2Hash.try_parse})


def try_parse(text: str) -> Optional[PasswordHash]:
    return DEFAULT_REGISTRY.try_parse(text)


def verify(password: str, text: str) -> bool:
    """Check ``password`` against a stored hash string.

    Raises HashFormatError when ``text`` is not a hash any registered family
    understands, rather than reporting a mismatch.
    """
    return DEFAULT_REGISTRY.verify(password, text)
