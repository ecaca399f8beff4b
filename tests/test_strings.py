import pytest

from pushswap.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42", -42),
        ("+17abc", 17),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("abc", 0),
        ("", 0),
        ("- 5", 0),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


def test_atoi_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("number", [0, 1, -1, 123, -2147483648, 2147483647])
def test_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_split():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split(None, ",") is None


def test_split_join_invariant():
    words = split("a,b,,c", ",")
    assert ",".join(words) == "a,b,c"


def test_strchr_and_strrchr():
    text = "abcabc"
    assert strchr(text, "b") == 1
    assert strrchr(text, "b") == 4
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, "\0") == len(text)


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("x", "y", 0) == 0
    assert strncmp("ab", "abc", 5) < 0


def test_strnstr():
    haystack = "hello world"
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")
    assert strnstr(haystack, "world", 8) is None
    assert strnstr(haystack, "xyz", len(haystack)) is None
    assert strnstr("", "a", 5) is None
    assert strnstr(None, "a", 5) is None


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", 5)
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy("hello", 100) == ("hello", 5)


def test_strlcat():
    assert strlcat("ab", "cde", 10) == ("abcde", 5)
    assert strlcat("ab", "cde", 4) == ("abc", 5)
    assert strlcat("abcd", "xy", 2) == ("abcd", 4)
    assert strlcat(None, "xy", 2) == (None, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 3, 100) == "lo"
    assert substr("hello", 10, 2) == ""
    assert substr(None, 0, 1) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("hello", "") == "hello"
    assert strtrim(None, "x") is None


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) is None


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == ["x", "y", "z"]