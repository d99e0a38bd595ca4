import hashlib
import os
from enum import Enum
from typing import Callable, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


class HashAlgorithm(str, Enum):
    """HMAC digests usable as the PBKDF2 pseudo-random function."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    MD5 = "md5"


# Natural PRF output length per digest, used as the derived key length.
DERIVED_KEY_LENGTHS = {
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
    HashAlgorithm.MD5: 16,
}

_CRYPTOGRAPHY_HASHES = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
    HashAlgorithm.MD5: hashes.MD5,
}

Password = Union[str, bytes]
KeyDerivation = Callable[[Password, bytes, int, HashAlgorithm, int], bytes]
RandomSource = Callable[[int], bytes]


def _password_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def pbkdf2_hmac(
    password: Password,
    salt: bytes,
    iterations: int,
    algorithm: HashAlgorithm,
    length: int,
) -> bytes:
    """Derive ``length`` bytes with hashlib's PBKDF2-HMAC."""
    if length == 0:
        return b""
    return hashlib.pbkdf2_hmac(
        HashAlgorithm(algorithm).value,
        _password_bytes(password),
        salt,
        iterations,
        dklen=length,
    )


def pbkdf2_cryptography(
    password: Password,
    salt: bytes,
    iterations: int,
    algorithm: HashAlgorithm,
    length: int,
) -> bytes:
    """Derive ``length`` bytes with the cryptography package's PBKDF2HMAC.

    Produces the same output as pbkdf2_hmac.
    """
    if length == 0:
        return b""
    kdf = PBKDF2HMAC(
        algorithm=_CRYPTOGRAPHY_HASHES[HashAlgorithm(algorithm)](),
        length=length,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(_password_bytes(password))


def random_bytes(size: int) -> bytes:
    return os.urandom(size)
