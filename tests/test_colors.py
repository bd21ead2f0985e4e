import pytest

from solong.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray100", 0xFFFFFF),
        ("grey0", 0x0),
        ("thistle4", 0x8B7B8B),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_lookup_is_case_insensitive():
    assert lookup_color("DarkSlateGray") == lookup_color("darkslategray")
    assert lookup_color("WHITE") == lookup_color("white")


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_spellings_agree():
    for number in range(101):
        assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{number}") for number in range(101)]
    assert values == sorted(values)
    for value in values:
        red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_parse_hex_spec():
    assert parse_color("#ff0000") == 0xFF0000
    assert parse_color("#FFFFFF") == 0xFFFFFF


@pytest.mark.parametrize("name", ["white", "navy", "gold3", "skyblue", "peru"])
def test_parse_hex_round_trip(name):
    value = lookup_color(name)
    assert parse_color("#" + format(value, "06x")) == value


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hex_stops_at_first_non_digit():
    assert parse_color("#ff0000xyz") == parse_color("#ff0000")


def test_parse_named():
    assert parse_color("white") == 0xFFFFFF
    assert parse_color("None") == -1


def test_parse_joins_two_words():
    assert parse_color("navy", "blue") == lookup_color("navy blue")
    assert parse_color("misty", "rose") == lookup_color("misty rose")


def test_parse_unknown_name_is_zero():
    assert parse_color("nonexistent") == 0
    assert parse_color("white", "elephant") == 0


def test_parse_matches_lookup_for_every_known_single_word():
    for name in ("snow", "azure", "maroon", "orchid2", "gray50"):
        assert parse_color(name) == lookup_color(name)