import pytest

from password_hashing import registry
from password_hashing.errors import HashFormatError, MissingHashError, MissingPasswordError
from password_hashing.hasher import PBKDF2Hasher
from password_hashing.kdf import HashAlgorithm
from password_hashing.mcf import ModularCryptFormat, PasswordHash
from password_hashing.pbkdf2_hash import PBKDF2Hash
from password_hashing.registry import DEFAULT_REGISTRY, PasswordHashRegistry

SHA1_HASH = "$pbkdf2$2$AAAAAAAAAAA$ev5EySepVq1cQ/aiG5axjtiH.s4"
SHA256_HASH = "$pbkdf2-sha256$2$AAAAAAAAAAA$GsyZFvH1KkJzOCU3pHFuMArmlXdON1uJo8VheAB3BSo"


class PlainHash(PasswordHash):
    def __init__(self, secret):
        self.secret = secret

    def verify(self, password):
        return password == self.secret


def _parse_plain(text):
    mcf = ModularCryptFormat.try_parse(text)
    if mcf is None or mcf.hash_id != "plain":
        return None
    return PlainHash(mcf.content)


def test_default_registry_knows_pbkdf2():
    assert "pbkdf2" in DEFAULT_REGISTRY
    assert list(DEFAULT_REGISTRY.parsers) == ["pbkdf2"]


def test_try_parse_dispatches_on_prefix():
    sha1 = registry.try_parse(SHA1_HASH)
    sha256 = registry.try_parse(SHA256_HASH)

    assert isinstance(sha1, PBKDF2Hash)
    assert sha1.algorithm is HashAlgorithm.SHA1
    assert isinstance(sha256, PBKDF2Hash)
    assert sha256.algorithm is HashAlgorithm.SHA256


def test_try_parse_returns_none_for_unknown_or_malformed():
    for text in (None, "", "pbkdf2$2$AA$AA", "$bcrypt$2$AA$AA", "$pbkdf2-sha3$2$AA$AA", "$pbkdf2$0$AA$AA"):
        assert registry.try_parse(text) is None, text


def test_verify_round_trip():
    text = str(PBKDF2Hasher(8, 2, HashAlgorithm.SHA256).hash("hunter2"))
    assert registry.verify("hunter2", text)
    assert not registry.verify("hunter3", text)


def test_verify_known_hash():
    assert registry.verify("foo", SHA1_HASH) is True
    assert registry.verify("bar", SHA1_HASH) is False


def test_verify_requires_arguments():
    with pytest.raises(MissingPasswordError):
        registry.verify(None, SHA1_HASH)
    with pytest.raises(MissingHashError):
        registry.verify("foo", None)


def test_verify_raises_for_unparseable_hash():
    for text in ("", "plain-text-password", "$pbkdf2$2$AAAAAAAAAAA", "$pbkdf2-sha1$2$AA$AA", "$unknown$x"):
        with pytest.raises(HashFormatError):
            registry.verify("foo", text)


def test_parsers_mapping_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.parsers["plain"] = _parse_plain


def test_with_parser_returns_new_registry():
    extended = DEFAULT_REGISTRY.with_parser("plain", _parse_plain)

    assert extended is not DEFAULT_REGISTRY
    assert "plain" in extended
    assert "plain" not in DEFAULT_REGISTRY
    assert extended.verify("secret", "$plain$secret")
    assert not extended.verify("other", "$plain$secret")
    assert extended.verify("foo", SHA1_HASH)
    with pytest.raises(HashFormatError):
        DEFAULT_REGISTRY.verify("secret", "$plain$secret")


def test_registry_copies_input_mapping():
    parsers = {"plain": _parse_plain}
    custom = PasswordHashRegistry(parsers)
    parsers["pbkdf2"] = PBKDF2Hash.try_parse
    assert "pbkdf2" not in custom


def test_registry_rejects_invalid_prefixes():
    for prefix in ("", "pbkdf2-sha256", "a$b"):
        with pytest.raises(ValueError):
            PasswordHashRegistry({prefix: _parse_plain})
    with pytest.raises(TypeError):
        PasswordHashRegistry({"plain": "not callable"})


def test_family_parser_revalidates_suffix():
    seen = []

    def recording_parser(text):
        seen.append(text)
        return PBKDF2Hash.try_parse(text)

    custom = PasswordHashRegistry({"pbkdf2": recording_parser})
    assert custom.try_parse("$pbkdf2-sha999$2$AA$AA") is None
    assert seen == ["$pbkdf2-sha999$2$AA$AA"]
