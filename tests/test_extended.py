import pytest

from classicipher.cipher_core import ExtendedVigenereCipher, extended_decrypt, extended_encrypt
from classicipher.errors import InvalidKey
from classicipher.keys import ByteKey


def test_single_byte_addition():
    assert extended_encrypt(b"A", b"B") == bytes([131])
    assert extended_decrypt(bytes([131]), b"B") == b"A"


def test_wraps_modulo_256():
    assert extended_encrypt(b"\xff", b"\x02") == b"\x01"
    assert extended_decrypt(b"\x01", b"\x02") == b"\xff"


def test_binary_round_trip_all_byte_values():
    data = bytes(range(256)) * 3 + b"\x00\xff\x00"
    key = b"\x00\xff\x10K\x80"
    ciphertext = extended_encrypt(data, key)
    assert isinstance(ciphertext, bytes)
    assert len(ciphertext) == len(data)
    assert ciphertext != data
    assert extended_decrypt(ciphertext, key) == data


def test_bytearray_input_returns_bytes():
    result = extended_encrypt(bytearray(b"abc"), b"\x01")
    assert result == b"bcd"
    assert isinstance(result, bytes)


def test_key_is_not_normalized():
    # Lowercase and punctuation bytes in the key all count
    assert extended_encrypt(b"\x00\x00\x00", "a-!") == b"a-!"


def test_text_mode_renders_one_character_per_byte():
    ciphertext = extended_encrypt("Hi", "B")
    assert ciphertext == "\x8a\xab"
    assert extended_decrypt(ciphertext, "B") == "Hi"


@pytest.mark.parametrize("plaintext", [
    "Hello, World!",
    "mixed Case with spaces\nand newlines\r\n",
    "héllo wörld ✓",
    "",
])
def test_text_round_trip(plaintext):
    key = "s3cr3t K3y!"
    assert extended_decrypt(extended_encrypt(plaintext, key), key) == plaintext


def test_empty_key_is_identity():
    assert extended_encrypt(b"abc", b"") == b"abc"
    assert extended_decrypt(b"abc", b"") == b"abc"
    assert extended_encrypt("abc", "") == "abc"


def test_text_ciphertext_outside_byte_range():
    with pytest.raises(ValueError):
        extended_decrypt("€uro", "key")


def test_byte_key_requires_bytes():
    with pytest.raises(InvalidKey):
        ByteKey("not bytes")


def test_strategy_rejects_letter_key():
    with pytest.raises(InvalidKey):
        ExtendedVigenereCipher().encrypt(b"data", "key")
