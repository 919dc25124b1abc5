import pytest

from ftkit.chars import to_upper
from ftkit.transform import (
    rotate_letter,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_substr_middle():
    s = "hello, world!"
    part = substr(s, 5, 7)
    assert len(part) == 7
    assert s.find(part) == 5


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_length_clipped():
    s = "hello, world!"
    part = substr(s, 7, 100)
    assert len(part) == len(s) - 7
    assert s.endswith(part)


def test_substr_at_end_is_empty():
    assert substr("abc", 3, 5) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    s1, s2 = "hello,", " world!"
    joined = strjoin(s1, s2)
    assert joined.startswith(s1)
    assert joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_strjoin_empty():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"


def test_strtrim_example():
    s, charset = "ABChello!AB", "ABCD"
    trimmed = strtrim(s, charset)
    assert trimmed == "hello!"
    assert trimmed[0] not in charset
    assert trimmed[-1] not in charset
    assert trimmed in s


def test_strtrim_everything():
    assert strtrim("ABBA", "AB") == ""


def test_strtrim_empty_set_unchanged():
    assert strtrim("  text  ", "") == "  text  "


def test_split_example():
    assert split("  tripouille  42  ", " ") == ["tripouille", "42"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_without_separator():
    assert split("tripouille", " ") == ["tripouille"]


def test_split_round_trip_single_spaces():
    s = "ala ma kota"
    assert " ".join(split(s, " ")) == s


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_rotate_letter_identity_and_wrap():
    assert rotate_letter(0, "a") == "a"
    assert rotate_letter(26, "q") == "q"
    assert rotate_letter(1, "z") == "a"


def test_rotate_letter_keeps_case():
    assert rotate_letter(3, "A").isupper()
    assert rotate_letter(3, "a").islower()


def test_rotate_letter_non_letter_unchanged():
    assert rotate_letter(5, "0") == "0"
    assert rotate_letter(5, " ") == " "


def test_strmapi_with_rotate():
    assert strmapi("aaaaaaa", rotate_letter) == "abcdefg"
    assert strmapi("000", rotate_letter) == "000"


def test_strmapi_identity():
    s = "ABCDEFG"
    assert strmapi(s, lambda i, c: c) == s


def test_striteri_uppercases_in_place():
    chars = list("ala ma kota")
    striteri(chars, lambda i, c: to_upper(c))
    assert "".join(chars) == "ala ma kota".upper()


def test_striteri_passes_indices_and_none_keeps():
    chars = list("abc")
    seen = []
    striteri(chars, lambda i, c: seen.append(i))
    assert seen == [0, 1, 2]
    assert chars == list("abc")


def test_striteri_bytearray():
    data = bytearray(b"000")
    striteri(data, lambda i, b: b + i)
    assert data == bytearray([48, 49, 50])