import pytest

from solong.colors import lookup_color
from solong.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    quoted_lines,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1",
"a c #FF0000",
"b c blue",
". c None",
"ab",
"b."
};
"""


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == lookup_color("blue")
    assert image.pixel(0, 1) == lookup_color("blue")
    assert image.pixel(1, 1) == 0xFF000000


def test_pixel_count_matches_size():
    image = parse_xpm_text(SAMPLE)
    assert len(image.pixels) == image.width * image.height


def test_pixel_out_of_range():
    image = parse_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_strip_comments_keeps_length_and_removes_block():
    text = "a/*bb*/c"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.startswith("a") and result.endswith("c")
    assert result.strip("ac ") == ""


def test_strip_comments_line_comment_takes_newline():
    text = "x // hi\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hi" not in result
    assert "\n" not in result
    assert result.endswith("y")


def test_strip_comments_leaves_quoted_text():
    text = '"/*x*/" "//y"'
    assert strip_comments(text) == text


def test_quoted_lines():
    assert list(quoted_lines('"ab" junk "cd" "unterminated')) == ["ab", "cd"]


def test_two_word_colour_name():
    image = parse_xpm_lines(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == lookup_color("light blue")


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 2", "aa c red", "aa c blue", "aa"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_undefined_pixel_key_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c white", "z"])
    assert image.pixel(0, 0) == lookup_color("black")


def test_header_with_zero_field_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["0 1 1 1", "a c red", "a"])


def test_header_too_short_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1"])


def test_colour_without_c_key_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a m red", "a"])


def test_colour_without_value_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a c", "a"])


def test_missing_pixel_rows_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 2 1 1", "a c red", "a"])


def test_empty_input_rejected():
    with pytest.raises(XpmError):
        parse_xpm_text("no quotes here")


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_image_equality_by_value():
    first = parse_xpm_lines(["1 1 1 1", "a c red", "a"])
    assert first == XpmImage(1, 1, (lookup_color("red"),))