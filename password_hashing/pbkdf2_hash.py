import hmac
import logging
from typing import Optional

from password_hashing.errors import MissingPasswordError
from password_hashing.kdf import HashAlgorithm, KeyDerivation, pbkdf2_hmac
from password_hashing.mcf import ModularCryptFormat, PasswordHash
from password_hashing.pbkdf2_content import PBKDF2HashContent

logger = logging.getLogger(__name__)

HASH_ID_PREFIX = "pbkdf2"

# Exact-match suffix table; None is the unsuffixed historical SHA1 form.
_SUFFIX_ALGORITHMS = {
    None: HashAlgorithm.SHA1,
    "sha256": HashAlgorithm.SHA256,
    "sha384": HashAlgorithm.SHA384,
    "sha512": HashAlgorithm.SHA512,
    "md5": HashAlgorithm.MD5,
}


def hash_id_for(algorithm: HashAlgorithm) -> str:
    if algorithm == HashAlgorithm.SHA1:
        return HASH_ID_PREFIX
    return f"{HASH_ID_PREFIX}-{algorithm.value.lower()}"


def algorithm_for(hash_id: str) -> Optional[HashAlgorithm]:
    prefix, sep, suffix = hash_id.partition("-")
    if prefix != HASH_ID_PREFIX:
        return None
    return _SUFFIX_ALGORITHMS.get(suffix if sep else None)


class PBKDF2Hash(ModularCryptFormat, PasswordHash):
    """A PBKDF2 password hash, e.g. ``$pbkdf2-sha256$29000$<salt>$<key>``."""

    def __init__(
        self,
        algorithm: HashAlgorithm,
        content: PBKDF2HashContent,
        kdf: Optional[KeyDerivation] = None,
    ) -> None:
        if algorithm is None:
            raise TypeError("algorithm must not be None")
        if content is None:
            raise TypeError("content must not be None")
        if not isinstance(content, PBKDF2HashContent):
            raise TypeError("content must be a PBKDF2HashContent")
        algorithm = HashAlgorithm(algorithm)
        super().__init__(hash_id_for(algorithm), content)
        self._algorithm = algorithm
        self._kdf = kdf or pbkdf2_hmac

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def content(self) -> PBKDF2HashContent:
        return self._content

    @property
    def iteration_count(self) -> int:
        return self._content.iteration_count

    @property
    def salt(self) -> bytes:
        return self._content.salt

    @property
    def derived_key(self) -> bytes:
        return self._content.derived_key

    def __repr__(self) -> str:
        return f"PBKDF2Hash({self._algorithm!r}, {self._content!r})"

    def verify(self, password: str) -> bool:
        """Re-derive a key from ``password`` and compare it to the stored one.

        The derivation length follows the stored key rather than the
        algorithm's natural output, so keys produced with a non-default
        length still verify.
        """
        if password is None:
            raise MissingPasswordError("password must not be None")
        expected = self._content.derived_key
        derived = self._kdf(
            password,
            self._content.salt,
            self._content.iteration_count,
            self._algorithm,
            len(expected),
        )
        return hmac.compare_digest(derived, expected)

    @classmethod
    def try_parse(cls, text: str, kdf: Optional[KeyDerivation] = None) -> Optional["PBKDF2Hash"]:
        mcf = ModularCryptFormat.try_parse(text)
        if mcf is None:
            return None
        algorithm = algorithm_for(mcf.hash_id)
        if algorithm is None:
            logger.debug("Rejected hash id %r: not a supported PBKDF2 variant", mcf.hash_id)
            return None
        content = PBKDF2HashContent.try_parse(mcf.content)
        if content is None:
            return None
        return cls(algorithm, content, kdf=kdf)
