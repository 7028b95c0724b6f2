import pytest

from solong.levelmap import (
    EMPTY_MESSAGE,
    IMPASSABLE_MESSAGE,
    NOT_SURROUNDED_MESSAGE,
    LevelMap,
    MapError,
    check_rectangular,
    is_passable,
    load_map,
    parse_map,
    read_map_lines,
    validate_elements,
)

VALID = "11111\n1PC01\n100E1\n11111\n"


def test_parse_valid_map_keeps_rows():
    level = parse_map(VALID)
    assert isinstance(level, LevelMap)
    assert list(level.rows) == VALID.splitlines()
    assert level.collectibles == VALID.count("C")
    assert level.rows[level.player[0]][level.player[1]] == "P"


def test_dimensions_follow_rows():
    level = parse_map(VALID)
    assert level.height == len(VALID.splitlines())
    assert level.width == len(VALID.splitlines()[0])


def test_trailing_newline_is_optional():
    assert parse_map(VALID) == parse_map(VALID.rstrip("\n"))


@pytest.mark.parametrize(
    "text, message",
    [
        ("1111\n1P01\n10E1\n1111\n", "Error\nThere is no collectible"),
        ("1111\n1PC1\n1001\n1111\n", "Error\nThere is no exit"),
        ("11111\n1PCE1\n1E001\n11111\n", "Error\nThere must be only one exit"),
        ("1111\n1CE1\n1001\n1111\n", "Error\nThere is no player"),
        ("11111\n1PCE1\n1P001\n11111\n", "Error\nOnly one player on map "),
        ("1111\n1PC1\n1XE1\n1111\n", "Error\nInvalid characters"),
    ],
)
def test_element_errors(text, message):
    with pytest.raises(MapError) as info:
        parse_map(text)
    assert str(info.value) == message


def test_not_rectangular():
    with pytest.raises(MapError) as info:
        parse_map("11111\n1PCE1\n1001\n11111\n")
    assert str(info.value) == "Error\nMap is not rectangular"


def test_blank_line_breaks_rectangle():
    with pytest.raises(MapError) as info:
        parse_map("11111\n1PCE1\n\n11111\n")
    assert str(info.value) == "Error\nMap is not rectangular"


def test_not_surrounded():
    with pytest.raises(MapError) as info:
        parse_map("11111\n1PCE0\n11111\n")
    assert str(info.value) == NOT_SURROUNDED_MESSAGE


def test_open_top_row_is_not_surrounded():
    with pytest.raises(MapError) as info:
        parse_map("11011\n1PCE1\n11111\n")
    assert str(info.value) == NOT_SURROUNDED_MESSAGE


def test_unreachable_collectible():
    with pytest.raises(MapError) as info:
        parse_map("111111\n1PE1C1\n111111\n")
    assert str(info.value) == IMPASSABLE_MESSAGE


def test_unreachable_exit():
    with pytest.raises(MapError) as info:
        parse_map("111111\n1PC1E1\n111111\n")
    assert str(info.value) == IMPASSABLE_MESSAGE


def test_invalid_character_reported_before_shape():
    with pytest.raises(MapError) as info:
        parse_map("111\n1PCEZ1\n1\n")
    assert str(info.value) == "Error\nInvalid characters"


def test_empty_text():
    with pytest.raises(MapError) as info:
        parse_map("")
    assert str(info.value) == EMPTY_MESSAGE


def test_validate_elements_counts_and_start():
    rows = ["1111111", "1C0C0P1", "1E00001", "1111111"]
    collectibles, start = validate_elements(rows)
    assert collectibles == 2
    assert rows[start[0]][start[1]] == "P"


def test_check_rectangular_accepts_closed_map():
    rows = VALID.splitlines()
    check_rectangular(rows)
    assert parse_map(VALID).rows == tuple(rows)


def test_check_rectangular_rejects_left_gap():
    with pytest.raises(MapError):
        check_rectangular(["1111", "0PC1", "1E01", "1111"])


def test_path_may_cross_the_exit():
    rows = ["111111", "1PEC01", "111111"]
    assert is_passable(rows, (1, 1), 1) is True


def test_path_blocked_by_walls():
    rows = ["11111", "1P1C1", "1E111", "11111"]
    assert is_passable(rows, (1, 1), 1) is False


def test_start_on_wall_is_not_passable():
    rows = ["1111", "1PC1", "1E01", "1111"]
    assert is_passable(rows, (0, 0), 1) is False


def test_read_map_lines_strips_newlines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert read_map_lines(path) == VALID.splitlines()


def test_read_map_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError) as info:
        read_map_lines(path)
    assert str(info.value) == EMPTY_MESSAGE


def test_load_map_matches_parse_map(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert load_map(path) == parse_map(VALID)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / "missing.ber")


def test_load_map_non_ascii_is_invalid(tmp_path):
    path = tmp_path / "odd.ber"
    path.write_bytes(b"1111\n1PC1\n1\xe9E1\n1111\n")
    with pytest.raises(MapError) as info:
        load_map(path)
    assert str(info.value) == "Error\nInvalid characters"