import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    InputError,
    atoi,
    is_valid_token,
    parse_arguments,
    parse_number,
    split_words,
)


def test_split_words_drops_empty():
    assert split_words("  12  45 89 ", " ") == ["12", "45", "89"]
    assert split_words("   ", " ") == []


def test_split_words_other_separator():
    assert split_words(",a,,b,", ",") == ["a", "b"]


@given(st.lists(st.text(alphabet="abc123", min_size=1), max_size=8))
def test_split_join_round_trip(words):
    assert split_words(" ".join(words), " ") == words


def test_atoi_skips_whitespace_and_sign():
    assert atoi("  -42") == -42
    assert atoi("\t\n+7abc") == 7
    assert atoi("abc") == 0
    assert atoi("--5") == 0


@given(st.integers(min_value=-10**12, max_value=10**12))
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


@pytest.mark.parametrize("token", ["0", "42", "-7", "+13"])
def test_valid_tokens(token):
    assert is_valid_token(token)


@pytest.mark.parametrize("token", ["", "-", "+", "1a", "a1", "--1", "1-", " 1", "1.5"])
def test_invalid_tokens(token):
    assert not is_valid_token(token)


def test_parse_number_limits():
    assert parse_number("2147483647") == 2147483647
    assert parse_number("-2147483648") == -2147483648
    with pytest.raises(InputError):
        parse_number("2147483648")
    with pytest.raises(InputError):
        parse_number("-2147483649")


def test_parse_number_syntax_error():
    with pytest.raises(InputError):
        parse_number("12x")


def test_parse_arguments_keeps_order():
    args = ["3", "-1", "+8", "0"]
    assert parse_arguments(args) == [int(arg) for arg in args]


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1", "2", "+1"])


def test_parse_arguments_rejects_bad_token():
    with pytest.raises(InputError):
        parse_arguments(["1", "two"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments([""])


@given(st.lists(st.integers(min_value=-2**31, max_value=2**31 - 1), unique=True, max_size=20))
def test_parse_arguments_round_trip(values):
    assert parse_arguments([str(v) for v in values]) == values