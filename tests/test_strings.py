import pytest

from solong.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_matches_length():
    text = "ciao cane ciao"
    assert strlen(text) == len(text)
    assert strlen("") == 0


def test_strchr_first_occurrence():
    text = "ciao io mi chziamo kristian"
    index = strchr(text, "z")
    assert text[index] == "z"
    assert "z" not in text[:index]


def test_strchr_integer_code_wraps_to_byte():
    text = "tripouille"
    assert strchr(text, ord("t") + 256) == 0


def test_strchr_nul_points_past_end():
    text = "abc"
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, 0) == len(text)


def test_strchr_missing_is_none():
    assert strchr("abc", "q") is None
    assert strrchr("abc", "q") is None


def test_strrchr_last_occurrence():
    text = "ciao io mi chziamo kristian"
    index = strrchr(text, "i")
    assert text[index] == "i"
    assert "i" not in text[index + 1:]
    assert index >= strchr(text, "i")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_against_empty():
    assert strncmp("test", "", 1) == ord("t")


def test_strncmp_equal_prefix_is_zero():
    assert strncmp("apple", "apricot", 2) == 0
    assert strncmp("same", "same", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0


def test_strnstr_outside_limit_not_found():
    assert strnstr("ciao allora mela", "allora mela", 5) is None


def test_strnstr_within_limit():
    haystack = "ciao allora mela"
    needle = "allora"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle
    assert strnstr(haystack, needle, index + len(needle)) == index
    assert strnstr(haystack, needle, index + len(needle) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strlcpy_fits():
    src = "ciao allora mela"
    copied, length = strlcpy(src, 20)
    assert copied == src
    assert length == len(src)


def test_strlcpy_truncates():
    src = "ciao allora mela"
    copied, length = strlcpy(src, 5)
    assert copied == src[:4]
    assert length == len(src)
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_zero_size_leaves_dest():
    dest, wanted = strlcat("ciao io", "sono lollo", 0)
    assert dest == "ciao io"
    assert wanted == len("sono lollo")


def test_strlcat_room_enough():
    dest, wanted = strlcat("ciao ", "io", 50)
    assert dest == "ciao io"
    assert wanted == len("ciao io")


def test_strlcat_truncates():
    dest, wanted = strlcat("ab", "cdef", 5)
    assert dest == "abcd"
    assert wanted == len("abcdef")
    assert len(dest) == 5 - 1


def test_strdup_equal_copy():
    assert strdup("hello") == "hello"


def test_substr_regular_and_clamped():
    text = "ciao mi chiamo kristian"
    assert substr(text, 1, 1) == text[1]
    assert substr(text, 5, 1000) == text[5:]
    assert substr(text, len(text), 3) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("ciao ", "allora mele") == "ciao allora mele"
    assert strjoin("", "") == ""


def test_strtrim_both_ends():
    assert strtrim("xx hello xx", "x ") == "hello"
    assert strtrim("ciao ", "allora mele") == "ci"


def test_strtrim_empty_set_and_all_trimmed():
    assert strtrim("abc", "") == "abc"
    assert strtrim("aaaa", "a") == ""


def test_strtrim_requires_strings():
    with pytest.raises(TypeError):
        strtrim("abc", None)


def test_split_skips_empty_pieces():
    assert split("   ciao  mi chi   kri", " ") == ["ciao", "mi", "chi", "kri"]


def test_split_no_separator_and_empty():
    assert split("word", " ") == ["word"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_rejoin_roundtrip():
    pieces = split("a,b,,c", ",")
    assert ",".join(pieces) == "a,b,c"
    assert all(pieces)


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbC"


def test_strmapi_preserves_length():
    text = "hello world"
    assert len(strmapi(text, lambda i, ch: ch)) == len(text)


def test_striteri_replaces_in_place():
    chars = list("abcd")
    result = striteri(chars, lambda i, ch: ch.upper() if i < 2 else None)
    assert result is chars
    assert chars == ["A", "B", "c", "d"]


def test_striteri_sees_every_index():
    seen = []
    striteri(list("xyz"), lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]