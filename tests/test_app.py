import logging

import pytest

from tty_sokoban import InvalidLevelIndex
from tty_sokoban.app import GameConfig, create_game, main, parse_config, setup_logging


def test_defaults():
    config = parse_config([])
    assert config.ascii_borders is False
    assert config.use_colors is True
    assert config.levels_dir is None
    assert config.start_level == 1
    assert config.log_level == "INFO"


@pytest.mark.parametrize("flag", ["-b", "--bw", "-bw"])
def test_black_and_white_flags(flag):
    assert parse_config([flag]).use_colors is False


@pytest.mark.parametrize("flag", ["-a", "--ascii"])
def test_ascii_flags(flag):
    assert parse_config([flag]).ascii_borders is True


def test_level_options(tmp_path):
    config = parse_config(["--level", "3", "--levels-dir", str(tmp_path), "--log-level", "DEBUG"])
    assert config.start_level == 3
    assert config.levels_dir == tmp_path
    assert config.log_level == "DEBUG"


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_config(["--help"])
    assert excinfo.value.code == 0
    assert "Restart current level" in capsys.readouterr().out


def test_setup_logging_writes_to_log_dir(tmp_path):
    config = GameConfig(log_dir=tmp_path / "logs")
    log_file = setup_logging(config)
    logging.getLogger("tty_sokoban.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert log_file == tmp_path / "logs" / "tty_sokoban.log"
    assert "hello" in log_file.read_text()


def test_create_game_from_directory(tmp_path):
    (tmp_path / "one.sok").write_text("#@$.#\n")
    (tmp_path / "two.sok").write_text("#@ $.#\n")
    game = create_game(GameConfig(levels_dir=tmp_path, start_level=2, ascii_borders=True))
    assert game.view().level_name == "two"
    assert game.ascii_borders is True


def test_create_game_with_bad_start_level():
    with pytest.raises(InvalidLevelIndex):
        create_game(GameConfig(start_level=0))


def test_main_reports_startup_errors(tmp_path, capsys):
    code = main(["--levels-dir", str(tmp_path), "--log-dir", str(tmp_path / "logs")])
    assert code == 1
    assert "No .sok files" in capsys.readouterr().err


def test_main_reports_unwritable_log_dir(tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    code = main(["--log-dir", str(blocker)])
    assert code == 1
    assert "Cannot write log file" in capsys.readouterr().err
