import pytest

from fdfview.textutil import atoi, itoa, split, strncmp, strnstr, strtrim, substr

NUMBERS = [0, 7, -7, 42, 1000, -99999, 2147483647, -2147483648]


@pytest.mark.parametrize("number", NUMBERS)
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


@pytest.mark.parametrize("number", NUMBERS)
def test_atoi_skips_leading_whitespace(number):
    assert atoi(" \t\n\v\f\r" + itoa(number)) == number


@pytest.mark.parametrize("number", NUMBERS)
def test_atoi_stops_at_non_digit(number):
    assert atoi(itoa(number) + ",0xFF00FF") == number


def test_atoi_plus_sign():
    assert atoi("+15") == atoi("15")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0


def test_atoi_double_sign_is_zero():
    assert atoi("+-5") == atoi("")


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize(
    "text",
    ["0 1 2 3", "  10   20 ", "single", "", "   ", "a  b   c    d"],
)
def test_split_drops_separators_and_keeps_order(text):
    pieces = split(text, " ")
    assert "".join(pieces) == text.replace(" ", "")
    assert all(piece and " " not in piece for piece in pieces)


def test_split_leading_and_trailing_separators():
    assert split("  a  b ", " ") == ["a", "b"]


def test_split_empty_text_gives_no_pieces():
    assert not split("", ",")


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a b", sep)


@pytest.mark.parametrize("text", ["  hello  ", "\n\tx y\n", "xxabcxx", "plain"])
def test_strtrim_removes_only_edge_characters(text):
    charset = " \n\tx"
    result = strtrim(text, charset)
    assert result in text
    assert not result or (result[0] not in charset and result[-1] not in charset)


def test_strtrim_with_no_charset_keeps_text():
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_all_removed():
    assert not strtrim("xxxx", "x")


@pytest.mark.parametrize("cut", [0, 1, 3, 5, 9])
def test_substr_pieces_rejoin(cut):
    text = "isometric"
    assert substr(text, 0, cut) + substr(text, cut, len(text)) == text


def test_substr_whole_text():
    assert substr("grid", 0, 4) == "grid"


def test_substr_start_past_end_is_empty():
    assert not substr("grid", 10, 3)


def test_substr_length_is_bounded():
    assert len(substr("grid", 1, 100)) == len("grid") - 1


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -1)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr("grid", start, length)


def test_strnstr_finds_suffix():
    haystack = "wire frame model"
    result = strnstr(haystack, "frame", len(haystack))
    assert result is not None
    assert haystack.endswith(result)
    assert result.startswith("frame")


def test_strnstr_missing_needle():
    assert strnstr("wire frame", "mesh", 10) is None


def test_strnstr_window_must_contain_whole_needle():
    assert strnstr("abcdef", "def", 5) is None
    assert strnstr("abcdef", "def", 6) == "def"


def test_strnstr_empty_needle_returns_haystack():
    assert strnstr("abc", "", 0) == "abc"


def test_strncmp_equal_strings():
    assert strncmp("fdf", "fdf", 10) == 0


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_difference_beyond_count_ignored():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_reports_code_point_difference():
    assert strncmp("a", "b", 1) == ord("a") - ord("b")


@pytest.mark.parametrize("first,second", [("abc", "abd"), ("abc", "ab"), ("", "z")])
def test_strncmp_antisymmetric(first, second):
    forward = strncmp(first, second, 5)
    assert forward == -strncmp(second, first, 5)
    assert forward < 0 or forward > 0


def test_strncmp_longer_string_is_greater():
    assert strncmp("abc", "ab", 3) > 0