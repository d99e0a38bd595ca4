import binascii
import logging
from dataclasses import dataclass
from typing import Optional

from password_hashing.ab64 import ab64_decode, ab64_encode

logger = logging.getLogger(__name__)

# Largest iteration count the stored format has ever accepted (signed 32-bit).
MAX_ITERATION_COUNT = 2**31 - 1


def _parse_iteration_count(raw: str) -> Optional[int]:
    """Leading zeros are accepted, so "0002" parses as 2 and re-serializes as "2"."""
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if not (1 <= value <= MAX_ITERATION_COUNT):
        return None
    return value


@dataclass(frozen=True)
class PBKDF2HashContent:
    """The ``iterations$salt$derived_key`` part of a PBKDF2 hash string."""

    iteration_count: int
    salt: bytes
    derived_key: bytes

    def __post_init__(self) -> None:
        if self.salt is None:
            raise TypeError("salt must not be None")
        if self.derived_key is None:
            raise TypeError("derived_key must not be None")
        if isinstance(self.iteration_count, bool) or not isinstance(self.iteration_count, int):
            raise TypeError("iteration_count must be an int")
        if not (1 <= self.iteration_count <= MAX_ITERATION_COUNT):
            raise ValueError(f"iteration_count out of range: {self.iteration_count}")
        object.__setattr__(self, "salt", bytes(self.salt))
        object.__setattr__(self, "derived_key", bytes(self.derived_key))

    def __str__(self) -> str:
        return f"{self.iteration_count}${ab64_encode(self.salt)}${ab64_encode(self.derived_key)}"

    @classmethod
    def try_parse(cls, content: str) -> Optional["PBKDF2HashContent"]:
        if not isinstance(content, str):
            return None
        parts = content.split("$")
        if len(parts) != 3:
            logger.debug("Rejected PBKDF2 content with %d fields", len(parts))
            return None
        iterations_raw, salt_b64, key_b64 = parts
        iteration_count = _parse_iteration_count(iterations_raw)
        if iteration_count is None:
            logger.debug("Rejected PBKDF2 content with invalid iteration count")
            return None
        try:
            salt = ab64_decode(salt_b64)
            derived_key = ab64_decode(key_b64)
        except (ValueError, binascii.Error):
            logger.debug("Rejected PBKDF2 content with malformed base64")
            return None
        return cls(iteration_count, salt, derived_key)
