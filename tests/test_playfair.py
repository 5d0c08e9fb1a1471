import pytest

from classicipher.cipher_core import (
    generate_key_square,
    playfair_decrypt,
    playfair_encrypt,
    prepare_text,
)
from classicipher.errors import InvalidKey
from classicipher.keys import LetterKey


def test_key_square_from_monarchy():
    assert generate_key_square(LetterKey("MONARCHY")) == (
        "MONAR",
        "CHYBD",
        "EFGIK",
        "LPQST",
        "UVWXZ",
    )


def test_key_square_merges_j_and_holds_25_unique_letters():
    square = generate_key_square(LetterKey("jujitsu"))
    letters = "".join(square)
    assert len(letters) == 25
    assert len(set(letters)) == 25
    assert "J" not in letters
    assert square[0].startswith("IUTS")


def test_prepare_text_instruments():
    digraphs = prepare_text("INSTRUMENTS")
    assert digraphs == ["IN", "ST", "RU", "ME", "NT", "SX"]
    assert all(d[0] != d[1] for d in digraphs)


def test_prepare_text_splits_repeated_letters():
    assert prepare_text("balloon") == ["BA", "LX", "LO", "ON"]
    assert prepare_text("jam") == ["IA", "MX"]
    assert prepare_text("") == []


def test_known_vector_monarchy():
    assert playfair_encrypt("INSTRUMENTS", "MONARCHY") == "GATLMZCLRQXA"
    assert playfair_decrypt("GATLMZCLRQXA", "MONARCHY") == "INSTRUMENTSX"


def test_known_vector_playfair_example():
    ciphertext = playfair_encrypt("Hide the gold in the tree stump", "playfair example")
    assert ciphertext == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert playfair_decrypt(ciphertext, "playfair example") == "HIDETHEGOLDINTHETREXESTUMP"


@pytest.mark.parametrize("plaintext, key", [
    ("INSTRUMENTS", "MONARCHY"),
    ("we are discovered save yourself", "zebras"),
    ("balloon", "KEYWORD"),
    ("XX", "A"),
])
def test_round_trip_reproduces_digraph_text(plaintext, key):
    expanded = "".join(prepare_text(plaintext))
    assert playfair_decrypt(playfair_encrypt(plaintext, key), key) == expanded


def test_ciphertext_is_even_length_without_repeated_pairs():
    ciphertext = playfair_encrypt("the quick brown fox", "KEYWORD")
    assert len(ciphertext) % 2 == 0
    pairs = [ciphertext[i:i + 2] for i in range(0, len(ciphertext), 2)]
    assert all(p[0] != p[1] for p in pairs)


def test_odd_ciphertext_is_padded_before_decryption():
    assert len(playfair_decrypt("GAT", "MONARCHY")) == 4


@pytest.mark.parametrize("key", ["", "1234", "  "])
def test_key_without_letters_is_invalid(key):
    with pytest.raises(InvalidKey):
        playfair_encrypt("HELLO", key)
    with pytest.raises(InvalidKey):
        playfair_decrypt("HELLO", key)
