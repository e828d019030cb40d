import pytest

from pushswap.parsing import ParseError, is_integer, parse_args


@pytest.mark.parametrize(
    "text",
    ["42", "-7", "+3", "0", "2147483647", "-2147483648"],
)
def test_is_integer_accepts(text):
    assert is_integer(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "abc", "1a", " 1", "-", "+", "2147483648", "-2147483649", "1 2"],
)
def test_is_integer_rejects(text):
    assert is_integer(text) is False


def test_parse_args_builds_stack_in_order():
    assert parse_args(["3", "-1", "+2"]).values() == [3, -1, 2]


def test_parse_args_empty():
    assert len(parse_args([])) == 0


def test_parse_args_rejects_non_integer():
    with pytest.raises(ParseError):
        parse_args(["1", "x"])


def test_parse_args_rejects_duplicates():
    with pytest.raises(ParseError):
        parse_args(["5", "2", "5"])


def test_parse_args_zero_and_minus_zero_are_duplicates():
    with pytest.raises(ParseError):
        parse_args(["0", "-0"])


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["99999999999"])