import pytest

from classicipher.alphabet import (
    PAD_CHAR,
    byte_string,
    decode_residue,
    encode_char,
    format_in_groups,
    normalize,
    residues_to_text,
    string_bytes,
    text_to_bytes,
    text_to_residues,
)


def test_encode_char_both_cases():
    assert encode_char('A') == 0
    assert encode_char('a') == 0
    assert encode_char('z') == 25
    assert encode_char(PAD_CHAR) == 23


@pytest.mark.parametrize("char", ['1', ' ', 'é', 'ß', '', 'AB'])
def test_encode_char_rejects_non_letters(char):
    with pytest.raises(ValueError):
        encode_char(char)


def test_decode_residue_wraps():
    assert decode_residue(0) == 'A'
    assert decode_residue(25) == 'Z'
    assert decode_residue(26) == 'A'
    assert decode_residue(-1) == 'Z'


def test_normalize_strips_case_and_punctuation():
    assert normalize("Hello, World! 123") == "HELLOWORLD"
    assert normalize("") == ""
    assert normalize("1234 !?") == ""


def test_residue_conversion():
    assert text_to_residues("Hi!") == [7, 8]
    assert residues_to_text([7, 8]) == "HI"


def test_text_to_bytes_uses_utf8_by_default():
    assert text_to_bytes("é") == b"\xc3\xa9"
    assert text_to_bytes("é", "latin-1") == b"\xe9"


def test_byte_string_one_character_per_byte():
    data = bytes(range(256))
    text = byte_string(data)
    assert len(text) == 256
    assert string_bytes(text) == data


def test_string_bytes_rejects_wide_characters():
    with pytest.raises(ValueError):
        string_bytes("price: €5")


def test_format_in_groups():
    assert format_in_groups("LXFOPVEFRNHR") == "LXFOP VEFRN HR"
    assert format_in_groups("ABCDEF", 3) == "ABC DEF"
    assert format_in_groups("") == ""


def test_format_in_groups_rejects_bad_size():
    with pytest.raises(ValueError):
        format_in_groups("ABC", 0)
