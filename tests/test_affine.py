import pytest

from classicipher.cipher_core import affine_decrypt, affine_encrypt, affine_mapping
from classicipher.errors import InvalidKey
from classicipher.keys import AFFINE_MULTIPLIERS, AffineKey


def test_known_vector():
    assert affine_encrypt("AFFINECIPHER", 5, 8) == "IHHWVCSWFRCP"
    assert affine_decrypt("IHHWVCSWFRCP", 5, 8) == "AFFINECIPHER"


@pytest.mark.parametrize("a", AFFINE_MULTIPLIERS)
@pytest.mark.parametrize("b", [0, 7, 25, -3, 100])
def test_round_trip_for_every_valid_multiplier(a, b):
    plaintext = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
    assert affine_decrypt(affine_encrypt(plaintext, a, b), a, b) == plaintext


@pytest.mark.parametrize("a", [0, 2, 4, 13, 26, -2])
def test_non_coprime_multiplier_fails_both_ways(a):
    with pytest.raises(InvalidKey):
        affine_encrypt("HELLO", a, 3)
    with pytest.raises(InvalidKey):
        affine_decrypt("HELLO", a, 3)


def test_shift_and_multiplier_reduced_modulo_26():
    assert affine_encrypt("AFFINECIPHER", 5, -18) == "IHHWVCSWFRCP"
    assert affine_encrypt("AFFINECIPHER", -21, 8) == "IHHWVCSWFRCP"


def test_key_rejects_non_integers():
    with pytest.raises(InvalidKey):
        AffineKey(5.0, 8)
    with pytest.raises(InvalidKey):
        AffineKey(True, 8)


def test_key_exposes_inverse():
    key = AffineKey(7, 3)
    assert key.a_inverse == 15
    assert key.shift == 3


def test_mapping_table():
    plain, cipher = affine_mapping(AffineKey(1, 0))
    assert plain == cipher == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    plain, cipher = affine_mapping(AffineKey(5, 8))
    assert cipher[0] == "I"
    assert sorted(cipher) == list(plain)


def test_cipher_uses_reduced_shift():
    assert affine_encrypt("AFFINECIPHER", 5, 8 + 26 * 3) == "IHHWVCSWFRCP"
    assert affine_decrypt("IHHWVCSWFRCP", 5, 8 - 26) == "AFFINECIPHER"


def test_cipher_reads_key_shift(monkeypatch):
    monkeypatch.setattr(AffineKey, "shift", property(lambda self: 0))
    assert affine_encrypt("HELLO", 1, 8) == "HELLO"
    assert affine_decrypt("HELLO", 1, 8) == "HELLO"
