import pytest

from solong.cli import main, prepare_game, run
from solong.gamemap import MapError
from solong.xpm import XpmError

GOOD_MAP = "1111111\n1P0C0E1\n1111111"


def write_map(directory, name, text):
    path = directory / name
    path.write_text(text)
    return path


def test_prepare_game_finds_player_and_coins(tmp_path):
    game = prepare_game(write_map(tmp_path, "level.ber", GOOD_MAP))
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.coins_left == 1
    assert game.moves == 0


def test_prepare_game_rejects_wrong_extension(tmp_path):
    path = write_map(tmp_path, "level.txt", GOOD_MAP)
    with pytest.raises(MapError):
        prepare_game(path)


def test_prepare_game_rejects_missing_exit(tmp_path):
    path = write_map(tmp_path, "level.ber", "11111\n1PC01\n11111")
    with pytest.raises(MapError, match="Exit"):
        prepare_game(path)


def test_prepare_game_rejects_invalid_character(tmp_path):
    path = write_map(tmp_path, "level.ber", "111111\n1PCEX1\n111111")
    with pytest.raises(MapError, match="Invalid character"):
        prepare_game(path)


def test_prepare_game_rejects_open_bottom(tmp_path):
    path = write_map(tmp_path, "level.ber", GOOD_MAP + "\n")
    with pytest.raises(MapError, match="DOWN"):
        prepare_game(path)


def test_prepare_game_missing_file(tmp_path):
    with pytest.raises(MapError):
        prepare_game(tmp_path / "absent.ber")


def test_run_without_sprites_raises(tmp_path):
    path = write_map(tmp_path, "level.ber", GOOD_MAP)
    with pytest.raises(XpmError):
        run(path, tmp_path / "no_sprites")


def test_run_with_invalid_map_raises(tmp_path):
    path = write_map(tmp_path, "level.ber", "11111\n1PC01\n11111")
    with pytest.raises(MapError):
        run(path, tmp_path)


def test_main_without_arguments_reports_error(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("Error\n")


def test_main_with_bad_extension_reports_error(tmp_path, capsys):
    path = write_map(tmp_path, "level.txt", GOOD_MAP)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error\nBer error\n"


def test_main_with_extra_arguments_does_nothing(tmp_path, capsys):
    path = write_map(tmp_path, "level.ber", GOOD_MAP)
    assert main([str(path), "extra"]) == 0
    assert capsys.readouterr().out == ""


def test_main_with_invalid_map_reports_error(tmp_path, capsys):
    path = write_map(tmp_path, "level.ber", "111111\n1PCEX1\n111111")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Error\n")
    assert "Invalid character" in out


def test_main_without_sprite_directory_reports_error(tmp_path, capsys, monkeypatch):
    path = write_map(tmp_path, "level.ber", GOOD_MAP)
    monkeypatch.chdir(tmp_path)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.startswith("Error\n")