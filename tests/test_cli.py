import pytest

from solong.cli import INIT_FAILED_MESSAGE, USAGE_MESSAGE, is_map_name, main
from solong.levelmap import IMPASSABLE_MESSAGE, LOADING_MESSAGE


@pytest.fixture
def maps_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    directory = tmp_path / "maps"
    directory.mkdir()
    return directory


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/map1.ber", True),
        ("maps/.ber", True),
        ("map1.ber", False),
        ("maps/map1.berx", False),
        ("maps/map1.BER", False),
        ("other/map1.ber", False),
        ("maps/", False),
        ("", False),
        (None, False),
    ],
)
def test_is_map_name(path, expected):
    assert is_map_name(path) is expected


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert USAGE_MESSAGE in capsys.readouterr().out


def test_too_many_arguments_prints_usage(capsys):
    assert main(["maps/a.ber", "maps/b.ber"]) == 1
    assert "Put ./so_long maps/map?.ber" in capsys.readouterr().out


def test_bad_name_prints_usage(capsys):
    assert main(["level.txt"]) == 1
    assert USAGE_MESSAGE in capsys.readouterr().out


def test_missing_file_fails_to_initialize(maps_dir, capsys):
    assert main(["maps/missing.ber"]) == 1
    assert INIT_FAILED_MESSAGE in capsys.readouterr().out


def test_empty_file_reports_empty(maps_dir, capsys):
    (maps_dir / "empty.ber").write_text("")
    assert main(["maps/empty.ber"]) == 0
    out = capsys.readouterr().out
    assert "The file is empty or not exist." in out
    assert LOADING_MESSAGE not in out


def test_invalid_map_reports_error_after_loading(maps_dir, capsys):
    (maps_dir / "bad.ber").write_text("11111\n1P0E1\n11111\n")
    assert main(["maps/bad.ber"]) == 0
    out = capsys.readouterr().out
    assert out.index(LOADING_MESSAGE) < out.index("There is no collectible")


def test_impassable_map_reported(maps_dir, capsys):
    (maps_dir / "wall.ber").write_text("1111111\n1P1C0E1\n1111111\n")
    assert main(["maps/wall.ber"]) == 0
    assert IMPASSABLE_MESSAGE in capsys.readouterr().out