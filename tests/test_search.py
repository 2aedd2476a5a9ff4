import pytest

from wireframe.search import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
    substr,
)

TEXT = "hello world"


@pytest.mark.parametrize("text", ["", "a", TEXT, "Bonjour tout le monde"])
def test_strlen_matches_length(text):
    assert strlen(text) == len(text)


def test_strlen_none_is_empty():
    assert strlen(None) == strlen("")


def test_strchr_finds_first():
    idx = strchr(TEXT, "o")
    assert TEXT[idx] == "o"
    assert "o" not in TEXT[:idx]


def test_strchr_nul_points_past_end():
    assert strchr(TEXT, "\0") == len(TEXT)
    assert strchr(TEXT, 0) == len(TEXT)


def test_strchr_int_code_and_missing():
    assert strchr(TEXT, ord("w")) == TEXT.index("w")
    assert strchr(TEXT, "z") is None
    assert strchr(None, "a") is None


def test_strchr_rejects_long_target():
    with pytest.raises(ValueError):
        strchr(TEXT, "lo")


def test_strrchr_finds_last():
    idx = strrchr(TEXT, "o")
    assert TEXT[idx] == "o"
    assert "o" not in TEXT[idx + 1:]
    assert strrchr(TEXT, "\0") == len(TEXT)
    assert strrchr(TEXT, "q") is None


def test_strncmp_difference_of_first_mismatch():
    assert strncmp("Hello", "Hella", 10) == ord("o") - ord("a")
    assert strncmp("Hella", "Hello", 10) == ord("a") - ord("o")


def test_strncmp_limited_and_equal():
    assert strncmp("Hello", "Hella", 4) == 0
    assert strncmp(TEXT, TEXT, 100) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_prefix_uses_terminator():
    assert strncmp("Hell", "Hello", 10) == -ord("o")
    assert strncmp("Hello", "Hell", 10) == ord("o")


def test_strncmp_missing_strings():
    assert strncmp(None, None, 5) == 0
    assert strncmp(None, "Hella", 5) == -ord("H")
    assert strncmp("Hello", None, 5) == ord("H")


def test_strnstr_source_example():
    big = "hello world hhow are you"
    idx = strnstr(big, "hhow", 30)
    assert idx == big.index("hhow")
    assert strnstr(big, "hhow", idx + 3) is None
    assert strnstr(big, "hhow", idx + 4) == idx


def test_strnstr_empty_and_missing():
    assert strnstr(TEXT, "", 0) == 0
    assert strnstr(TEXT, "xyz", 50) is None


def test_strlcpy_zero_size_source_example():
    src = "Bonjour tout le monde"
    copied, total = strlcpy(src, 0)
    assert copied == ""
    assert total == len(src)


def test_strlcpy_truncates():
    src = "Bonjour tout le monde"
    copied, total = strlcpy(src, 8)
    assert copied == src[:7]
    assert total == len(src)
    assert strlcpy(src, 100) == (src, len(src))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_source_example():
    result, total = strlcat("Hello", "World", 10)
    assert result == ("Hello" + "World")[:9]
    assert total == len("Hello") + len("World")


def test_strlcat_small_size():
    assert strlcat("Hello", "World", 3) == ("Hello", len("World") + 3)
    assert strlcat("Hello", "World", 0) == ("Hello", len("World"))


def test_strlcat_fits():
    result, total = strlcat("Hello", "World", 50)
    assert result == "HelloWorld"
    assert total == len(result)


def test_strdup():
    assert strdup(TEXT) == TEXT
    assert strdup(None) is None


def test_substr():
    assert substr(TEXT, 6, 5) == "world"
    assert substr(TEXT, 6, 100) == TEXT[6:]
    assert substr(TEXT, len(TEXT) + 1, 3) == ""
    assert substr(None, 0, 1) is None


def test_substr_negative():
    with pytest.raises(ValueError):
        substr(TEXT, -1, 2)