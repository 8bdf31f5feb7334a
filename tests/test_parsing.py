import pytest

from philosophers.parsing import (
    INT_MAX,
    ArgumentError,
    parse_arguments,
    parse_int,
    split_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  +7", 7), ("-3", -3), ("\t\n5", 5), ("2147483647", INT_MAX)],
)
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected


def test_parse_int_empty_is_zero():
    assert parse_int("") == 0


@pytest.mark.parametrize("text", ["12a", "2147483648", "+-5", "5 ", "abc"])
def test_parse_int_invalid(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_split_words_drops_empty_pieces():
    assert split_words("a b  c ", " ") == ["a", "b", "c"]


@pytest.mark.parametrize("text", ["", "   ", ",,,"])
def test_split_words_no_words(text):
    assert split_words(text, text[:1] or " ") == []


@pytest.mark.parametrize("text", ["x,,yy,z", ",lead,trail,", "single"])
def test_split_words_invariants(text):
    words = split_words(text, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == text.replace(",", "")


def test_parse_arguments_four_and_five():
    assert parse_arguments(["5", "800", "200", "200"]) == [5, 800, 200, 200]
    assert parse_arguments(["5", "800", "200", "200", "7"]) == [5, 800, 200, 200, 7]


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1"] * 6])
def test_parse_arguments_wrong_count(args):
    with pytest.raises(ArgumentError, match="Wrong number of arguments"):
        parse_arguments(args)


@pytest.mark.parametrize("bad", ["-1", "abc", "99999999999"])
def test_parse_arguments_invalid_value(bad):
    with pytest.raises(ArgumentError, match=f"Invalid argument {bad}"):
        parse_arguments(["5", bad, "200", "200"])