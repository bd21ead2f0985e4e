import pytest

from solong.wordtab import find, find_outside_quotes, split_words


def test_find_returns_position_of_first_match():
    text = "abc*/def*/"
    pos = find(text, "*/", len(text))
    assert text[pos:pos + 2] == "*/"
    assert "*/" not in text[:pos + 1]


def test_find_missing_needle():
    assert find("abcdef", "xy", 6) == -1


def test_find_limit_shorter_than_needle():
    assert find("abc*/", "*/", 1) == -1


def test_find_empty_needle_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_outside_quotes_skips_quoted_match():
    text = 'x"/*"/*'
    pos = find_outside_quotes(text, "/*", len(text))
    assert pos == text.rindex("/*")


def test_find_outside_quotes_unquoted_first_match():
    text = '/* "/*" */'
    assert find_outside_quotes(text, "/*", len(text)) == text.index("/*")


def test_find_outside_quotes_only_quoted_match():
    text = 'a "//" b'
    assert find_outside_quotes(text, "//", len(text)) == -1


def test_find_outside_quotes_limit():
    assert find_outside_quotes("//", "//", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  16 \t16  2\t1 ") == ["16", "16", "2", "1"]


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_blank_text():
    assert split_words(" \t  ") == []