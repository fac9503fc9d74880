import pytest

from doubleentry.crypto import password_hash, xor_cipher


def test_sha256_of_abc():
    assert password_hash("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha256_of_empty():
    assert password_hash("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_accepts_bytes_and_str_alike():
    assert password_hash(b"password") == password_hash("password")
    assert len(password_hash("password")) == 64


@pytest.mark.parametrize("data", [b"", b"hello world", "Main", "C:\\data\\user\\Main.dat"])
def test_xor_round_trip(data):
    key = "secret"
    encoded = xor_cipher(data, key)
    expected = data.encode() if isinstance(data, str) else data
    assert len(encoded) == len(expected)
    assert xor_cipher(encoded, key) == expected


def test_xor_with_itself_is_zero():
    assert xor_cipher("secret", "secret") == bytes(len("secret"))


def test_xor_key_repeats():
    assert xor_cipher(b"\x00\x00\x00", b"ab") == b"aba"


def test_xor_empty_key_rejected():
    with pytest.raises(ValueError):
        xor_cipher(b"data", b"")