import pytest

from solong.cli import main, prepare_game
from solong.errors import ErrorKind, SoLongError

VALID = "11111\n1P0C1\n100E1\n11111\n"


def write_map(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_prepare_game_valid(tmp_path):
    game = prepare_game([str(write_map(tmp_path, VALID))])
    assert game.player == (1, 1)
    assert game.rows() == VALID.split()
    assert game.move_count == 0


def test_prepare_game_without_arguments():
    with pytest.raises(SoLongError) as excinfo:
        prepare_game([])
    assert excinfo.value.kind is ErrorKind.USAGE


def test_prepare_game_invalid_map(tmp_path):
    path = write_map(tmp_path, "11111\n1P0C1\n100E0\n11111\n")
    with pytest.raises(SoLongError) as excinfo:
        prepare_game([str(path)])
    assert excinfo.value.kind is ErrorKind.NOT_WALLED


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\nInvalid arguments. Usage: ./so_long <map.ber>\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().err == "Error\nFile does not exist\n"


def test_main_wrong_extension(tmp_path, capsys):
    path = write_map(tmp_path, VALID, name="level.txt")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == 'Error\nNot a ".ber" file\n'


def test_main_validation_error_exits_zero(tmp_path, capsys):
    path = write_map(tmp_path, "11111\n1P001\n100E1\n11111\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().err == "Error\nIncorrect elements\n"


def test_main_render_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    path = write_map(tmp_path, VALID)
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == "Error\nFailed to render map\n"