import logging
from typing import Optional, Union

from password_hashing.config import Config
from password_hashing.errors import ConfigurationError, MissingPasswordError
from password_hashing.kdf import (
    DERIVED_KEY_LENGTHS,
    HashAlgorithm,
    KeyDerivation,
    RandomSource,
    pbkdf2_hmac,
    random_bytes,
)
from password_hashing.pbkdf2_content import MAX_ITERATION_COUNT, PBKDF2HashContent
from password_hashing.pbkdf2_hash import PBKDF2Hash

logger = logging.getLogger(__name__)

DEFAULT_SALT_SIZE = 16
DEFAULT_ITERATION_COUNT = 10_000
DEFAULT_ALGORITHM = HashAlgorithm.SHA1
MIN_SALT_SIZE = 8


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _resolve_algorithm(algorithm: Union[HashAlgorithm, str]) -> HashAlgorithm:
    try:
        resolved = HashAlgorithm(algorithm)
    except ValueError:
        raise ConfigurationError(f"unsupported hash algorithm: {algorithm!r}") from None
    if resolved not in DERIVED_KEY_LENGTHS:
        raise ConfigurationError(f"no derived key length for {resolved.value}")
    return resolved


class PBKDF2Hasher:
    """Produces new PBKDF2 hashes with a fixed salt size, cost and digest."""

    def __init__(
        self,
        salt_size: int = DEFAULT_SALT_SIZE,
        iteration_count: int = DEFAULT_ITERATION_COUNT,
        algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
        kdf: Optional[KeyDerivation] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        if not _is_int(salt_size) or salt_size < MIN_SALT_SIZE:
            raise ConfigurationError(f"salt_size must be an int >= {MIN_SALT_SIZE}, got {salt_size!r}")
        if not _is_int(iteration_count) or not (1 <= iteration_count <= MAX_ITERATION_COUNT):
            raise ConfigurationError(
                f"iteration_count must be an int in [1, {MAX_ITERATION_COUNT}], got {iteration_count!r}"
            )
        self._salt_size = salt_size
        self._iteration_count = iteration_count
        self._algorithm = _resolve_algorithm(algorithm)
        self._derived_key_length = DERIVED_KEY_LENGTHS[self._algorithm]
        self._kdf = kdf or pbkdf2_hmac
        self._random_source = random_source or random_bytes
        logger.info(
            "PBKDF2 hasher configured: algorithm=%s iterations=%d salt_size=%d",
            self._algorithm.value,
            self._iteration_count,
            self._salt_size,
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        kdf: Optional[KeyDerivation] = None,
        random_source: Optional[RandomSource] = None,
    ) -> "PBKDF2Hasher":
        return cls(
            salt_size=config.salt_size,
            iteration_count=config.iteration_count,
            algorithm=config.algorithm,
            kdf=kdf,
            random_source=random_source,
        )

    @property
    def salt_size(self) -> int:
        return self._salt_size

    @property
    def iteration_count(self) -> int:
        return self._iteration_count

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def derived_key_length(self) -> int:
        return self._derived_key_length

    def __repr__(self) -> str:
        return (
            f"PBKDF2Hasher(salt_size={self._salt_size}, "
            f"iteration_count={self._iteration_count}, algorithm={self._algorithm.value!r})"
        )

    def hash(self, password: str) -> PBKDF2Hash:
        if password is None:
            raise MissingPasswordError("password must not be None")
        salt = self._random_source(self._salt_size)
        derived_key = self._kdf(
            password,
            salt,
            self._iteration_count,
            self._algorithm,
            self._derived_key_length,
        )
        content = PBKDF2HashContent(self._iteration_count, salt, derived_key)
        return PBKDF2Hash(self._algorithm, content, kdf=self._kdf)

    def needs_update(self, hash_value: PBKDF2Hash) -> bool:
        """Return True when ``hash_value`` is weaker than what this hasher makes now.

        Callers typically re-hash the password after a successful verify when
        this returns True.
        """
        return (
            hash_value.algorithm != self._algorithm
            or hash_value.iteration_count < self._iteration_count
            or len(hash_value.salt) < self._salt_size
            or len(hash_value.derived_key) != self._derived_key_length
        )
