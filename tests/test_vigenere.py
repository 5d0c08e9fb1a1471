import pytest

from classicipher.cipher_core import VigenereCipher, vigenere_decrypt, vigenere_encrypt
from classicipher.errors import InvalidKey
from classicipher.keys import LetterKey


def test_known_vector():
    assert vigenere_encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
    assert vigenere_decrypt("LXFOPVEFRNHR", "LEMON") == "ATTACKATDAWN"


def test_input_and_key_are_normalized():
    assert vigenere_encrypt("attack at dawn!", "le-mon") == "LXFOPVEFRNHR"
    assert vigenere_decrypt("lxfop vefrn hr", "Lemon") == "ATTACKATDAWN"


@pytest.mark.parametrize("key", ["", "123", "!!"])
def test_key_without_letters_is_identity(key):
    assert vigenere_encrypt("attack at dawn", key) == "ATTACKATDAWN"
    assert vigenere_decrypt("ATTACKATDAWN", key) == "ATTACKATDAWN"


@pytest.mark.parametrize("plaintext, key", [
    ("THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG", "KEY"),
    ("A", "LONGERTHANTHETEXT"),
    ("ZZZZZZ", "Z"),
])
def test_round_trip(plaintext, key):
    assert vigenere_decrypt(vigenere_encrypt(plaintext, key), key) == plaintext


def test_empty_text():
    assert vigenere_encrypt("", "KEY") == ""


def test_strategy_rejects_raw_key():
    with pytest.raises(InvalidKey):
        VigenereCipher().encrypt("HELLO", "KEY")


def test_strategy_with_key_object():
    assert VigenereCipher().encrypt("ATTACKATDAWN", LetterKey("LEMON")) == "LXFOPVEFRNHR"
