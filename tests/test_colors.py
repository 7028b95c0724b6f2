import pytest

from solong.colors import NONE_COLOR, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("grey50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("thistle4", 0x8B7B8B),
    ],
)
def test_named_colors(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == NONE_COLOR


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dark Red") == lookup_color("dark red")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    assert lookup_color("dodger blue") == lookup_color("dodgerblue")
    assert lookup_color("misty rose") == lookup_color("mistyrose")


def test_numbered_grey_aliases_match_gray():
    for level in range(101):
        assert lookup_color(f"grey{level}") == lookup_color(f"gray{level}")


def test_unknown_name_is_zero():
    assert lookup_color("not a colour") == 0
    assert lookup_color("") == 0


def test_hex_forms():
    assert lookup_color("#ff0000") == 0xFF0000
    assert lookup_color("#FFFAFA") == lookup_color("snow")
    assert lookup_color("#000000") == 0


def test_hex_stops_at_first_non_digit():
    assert lookup_color("#ff0000zz") == 0xFF0000
    assert lookup_color("#") == 0
    assert lookup_color("#zz") == 0