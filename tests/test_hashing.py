import pytest

from merkleledger.hashing import sha256_hex


def test_known_digest_of_hello():
    assert sha256_hex("hello") == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


def test_known_digest_of_world():
    assert sha256_hex("world") == "486ea46224d1bb4fb680f34f7c9ad96a8f24ec88be73ea8e5a6c65260e9cb8a7"


def test_empty_input_digest():
    assert sha256_hex("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.mark.parametrize("text", ["", "a", "Alice sends 10 to Bob", "x" * 55, "y" * 56, "z" * 64, "w" * 1000])
def test_digest_is_64_lower_hex_characters(text):
    digest = sha256_hex(text)
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")


def test_str_and_bytes_agree():
    assert sha256_hex("Alice sends 10 to Bob") == sha256_hex(b"Alice sends 10 to Bob")


def test_text_is_utf8_encoded():
    assert sha256_hex("héllo") == sha256_hex("héllo".encode("utf-8"))


def test_different_inputs_give_different_digests():
    assert sha256_hex("hello") != sha256_hex("hello!")
    assert len({sha256_hex(str(i)) for i in range(100)}) == 100


def test_rejects_other_types():
    with pytest.raises(TypeError):
        sha256_hex(42)