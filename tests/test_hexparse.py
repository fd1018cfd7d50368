from hypothesis import given, strategies as st

from modbuscrc.hexparse import parse_hex_string


def test_empty_string():
    assert parse_hex_string("") == []


def test_space_separated():
    assert parse_hex_string("01 03 00 00 00 01") == [1, 3, 0, 0, 0, 1]


def test_contiguous_pairs():
    assert parse_hex_string("010300000001") == [1, 3, 0, 0, 0, 1]


def test_trailing_single_digit_is_own_byte():
    assert parse_hex_string("abc") == [0xAB, 0x0C]


def test_repeated_spaces_are_ignored():
    assert parse_hex_string("  01   02 ") == [1, 2]


def test_invalid_tokens_are_skipped():
    assert parse_hex_string("zz 01 g5 02") == [1, 2]


def test_invalid_pairs_are_skipped():
    assert parse_hex_string("01zz02") == [1, 2]


def test_wide_value_is_truncated_to_byte():
    assert parse_hex_string("1FF 02") == [0xFF, 0x02]


def test_prefixed_token():
    assert parse_hex_string("0x1A 02") == [0x1A, 0x02]


def test_mixed_case():
    assert parse_hex_string("aB Cd") == [0xAB, 0xCD]


@given(st.binary(min_size=1, max_size=64))
def test_round_trip_spaced(data):
    text = " ".join(f"{b:02X}" for b in data)
    assert parse_hex_string(text) == list(data)


@given(st.binary(min_size=1, max_size=64))
def test_round_trip_contiguous(data):
    text = data.hex()
    assert parse_hex_string(text) == list(data)