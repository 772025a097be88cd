import pytest

from konosubash.strops import (
    join,
    split,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)
from konosubash.textutils import to_upper


def test_split_drops_empty_pieces():
    assert split("::a::bb:c:", ":") == ["a", "bb", "c"]


@pytest.mark.parametrize("text", ["", ":::", ":"])
def test_split_only_separators_gives_nothing(text):
    assert split(text, ":") == []


def test_split_without_separator_keeps_whole():
    assert split("/usr/bin", ":") == ["/usr/bin"]


def test_split_pieces_contain_no_separator():
    words = split("/bin:/usr/bin::/sbin", ":")
    assert all(":" not in word and word for word in words)
    assert "".join(words) == "/bin:/usr/bin::/sbin".replace(":", "")


@pytest.mark.parametrize("a,b", [("ab", "cd"), ("", "x"), ("y", ""), ("", "")])
def test_join_concatenates(a, b):
    result = join(a, b)
    assert result.startswith(a)
    assert result[len(a):] == b


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_truncates_to_size_minus_one():
    copied, total = strlcpy("hello", 3)
    assert copied == "hello"[:2]
    assert total == len("hello")


def test_strlcpy_fits_whole():
    assert strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcat_full_destination_left_alone():
    assert strlcat("abc", "de", 2) == ("abc", 2 + len("de"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "ab" + "cdef"[:2]
    assert total == len("ab") + len("cdef")


def test_strlcat_fits_whole():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("abcd"))


def test_strmapi_uses_function():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "abc".upper()


def test_strmapi_passes_indices():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "z") == ""


def test_striteri_modifies_in_place():
    chars = list("hello")
    striteri(chars, lambda i, c: to_upper(c) if i % 2 == 0 else c)
    assert chars == ["H", "e", "L", "l", "O"]


def test_strtrim_both_ends():
    assert strtrim("  xx hi xx ", " x") == "hi"


def test_strtrim_empty_charset_keeps_string():
    assert strtrim("abc", "") == "abc"


def test_strtrim_everything():
    assert strtrim("xxx", "x") == ""


def test_substr_middle():
    assert substr("hello", 1, 3) == "hello"[1:4]


@pytest.mark.parametrize("start", [5, 10])
def test_substr_start_past_end(start):
    assert substr("hello", start, 2) == ""


def test_substr_empty_string():
    assert substr("", 0, 3) == ""


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "hello"[2:]


def test_substr_tail_found_earlier():
    assert substr("abab", 2, 10) == "abab"


def test_substr_unique_characters_matches_slice():
    text = "abcdefg"
    for start in range(len(text)):
        for length in range(len(text) + 1):
            assert substr(text, start, length) == text[start : start + length]