import pytest

from cubray.textutil import atoi, is_blank, is_space, split_words


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42abc", -42),
        ("+17", 17),
        ("\t\n\v\r\f 8", 8),
        (" 12 34", 12),
        ("255", 255),
    ],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["abc", "--5", "+-3", "", "   ", "- 4"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("n", [0, 1, 9, 10, 99, 1234, -7, -2147483648, 2147483647])
def test_atoi_round_trips_str(n):
    assert atoi(str(n)) == n


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_words_example_from_source():
    assert split_words("     lu b ldsjñ l  ", " ") == ["lu", "b", "ldsjñ", "l"]


def test_split_words_colors():
    assert split_words("255,0,10", ",") == ["255", "0", "10"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_words_only_separators(text):
    assert split_words(text, ",") == []


@pytest.mark.parametrize("text", ["a,,b,", ",x,y,,z", "one", "a, b ,c"])
def test_split_words_invariants(text):
    words = split_words(text, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == text.replace(",", "")


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a--b", "--")


@pytest.mark.parametrize("char", ["\t", "\n", "\v", "\f", "\r", " "])
def test_is_space_true(char):
    assert is_space(char) is True


@pytest.mark.parametrize("char", ["a", "\b", "\x0e", "0", "", "  "])
def test_is_space_false(char):
    assert is_space(char) is False


@pytest.mark.parametrize("text", [None, "", " ", " \t\n", "\r\f\v"])
def test_is_blank_true(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", [" x ", "1", "NO ./a.png\n"])
def test_is_blank_false(text):
    assert is_blank(text) is False