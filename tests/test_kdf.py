from password_hashing.kdf import HashAlgorithm, pbkdf2_cryptography, pbkdf2_hmac, random_bytes


def test_pbkdf2_hmac_matches_rfc6070_vectors():
    one = pbkdf2_hmac("password", b"salt", 1, HashAlgorithm.SHA1, 20)
    two = pbkdf2_hmac(b"password", b"salt", 2, HashAlgorithm.SHA1, 20)
    assert one.hex() == "0c60c80f961f0e71f3a9b524af6012062fe037a6"
    assert two.hex() == "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957"


def test_backends_agree():
    for algorithm in (HashAlgorithm.SHA1, HashAlgorithm.SHA256, HashAlgorithm.SHA384, HashAlgorithm.SHA512):
        for length in (1, 20, 64, 100):
            expected = pbkdf2_hmac("pässword", b"\x00" * 8, 3, algorithm, length)
            assert pbkdf2_cryptography("pässword", b"\x00" * 8, 3, algorithm, length) == expected


def test_zero_length_derivation_is_empty():
    assert pbkdf2_hmac("foo", b"salt", 2, HashAlgorithm.SHA1, 0) == b""
    assert pbkdf2_cryptography("foo", b"salt", 2, HashAlgorithm.SHA1, 0) == b""


def test_str_passwords_are_utf8_encoded():
    assert pbkdf2_hmac("é", b"salt", 2, HashAlgorithm.SHA256, 32) == pbkdf2_hmac(
        "é".encode("utf-8"), b"salt", 2, HashAlgorithm.SHA256, 32
    )


def test_random_bytes_length():
    assert len(random_bytes(16)) == 16
    assert random_bytes(16) != random_bytes(16)
