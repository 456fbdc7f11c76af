import pytest

from pushswap.textops import (
    count_words,
    split,
    strdup,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_strdup_stops_at_terminator():
    assert strdup("abc\0def") == "abc"


def test_substr_middle():
    assert substr("hello", 1, 3) == "hello"[1:4]


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "hello"[2:]


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foo" + "bar"


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "bar")


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


@pytest.mark.parametrize(
    "text",
    ["  hello  world  ", "one", "", "   ", "a b c d"],
)
def test_split_matches_words_and_count(text):
    words = split(text, " ")
    assert words == text.split()
    assert count_words(text, " ") == len(words)


def test_split_joined_back_has_no_separators_left():
    text = ",,a,,bc,d,"
    words = split(text, ",")
    assert ",".join(words).replace(",", "") == text.replace(",", "")
    assert all(word and "," not in word for word in words)


def test_split_stops_at_terminator():
    assert split("a b\0c d", " ") == ["a", "b"]


def test_split_bad_separator_raises():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_uses_index_and_char():
    text = "abcd"
    result = strmapi(text, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert len(result) == len(text)
    assert result[0] == text[0].upper()
    assert result[1] == text[1]


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(index, char):
        seen.append(index)
        return char.upper()

    assert striteri(chars, visit) is None
    assert chars == list("abc".upper())
    assert seen == list(range(len(chars)))


def test_striteri_stops_at_terminator():
    chars = ["a", "\0", "b"]
    striteri(chars, lambda i, c: c.upper())
    assert chars == ["A", "\0", "b"]