import pytest

from classicipher.alphabet import normalize
from classicipher.cipher_core import autokey_decrypt, autokey_encrypt


def reference_autokey_decrypt(ciphertext, key):
    """Straightforward letter-by-letter reference implementation."""
    key = normalize(key)
    plaintext = ""
    for i, c in enumerate(normalize(ciphertext)):
        k = key[i] if i < len(key) else plaintext[i - len(key)]
        plaintext += chr((ord(c) - ord(k)) % 26 + ord('A'))
    return plaintext


def test_known_vector():
    assert autokey_encrypt("ATTACKATDAWN", "QUEENLY") == "QNXEPVYTWTWP"
    assert autokey_decrypt("QNXEPVYTWTWP", "QUEENLY") == "ATTACKATDAWN"


@pytest.mark.parametrize("plaintext, key", [
    ("THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG", "K"),
    ("Meet me at the usual place at ten", "KILT"),
    ("HI", "LONGERTHANTHETEXT"),
    ("AAAAAAAAAAAA", "B"),
])
def test_round_trip(plaintext, key):
    assert autokey_decrypt(autokey_encrypt(plaintext, key), key) == normalize(plaintext)


@pytest.mark.parametrize("ciphertext, key", [
    ("QNXEPVYTWTWP", "QUEENLY"),
    ("ZYXWVUTSRQPONMLKJIHGFEDCBA", "AB"),
    ("HELLOWORLD", "LONGERTHANTHETEXT"),
])
def test_decrypt_matches_sequential_reference(ciphertext, key):
    assert autokey_decrypt(ciphertext, key) == reference_autokey_decrypt(ciphertext, key)


def test_running_key_differs_from_repeating_key():
    # With a one-letter primer, autokey is not a Caesar shift
    assert autokey_encrypt("AAAA", "B") == "BAAA"


def test_empty_key_and_text_are_identity():
    assert autokey_encrypt("attack", "") == "ATTACK"
    assert autokey_decrypt("ATTACK", "") == "ATTACK"
    assert autokey_encrypt("", "KEY") == ""
    assert autokey_decrypt("", "KEY") == ""
