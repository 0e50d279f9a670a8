import pytest

from tty_sokoban import EmptyCatalog, InvalidLevelIndex, LevelCatalog, LevelDefinition, Tile
from tty_sokoban.engine import parse_level


def test_levels_are_sorted_by_name(small_catalog):
    assert small_catalog.names() == ["a_first", "b_second", "c_third"]
    assert small_catalog.count() == len(small_catalog) == 3
    assert [level.name for level in small_catalog] == small_catalog.names()


def test_get_out_of_range_raises(small_catalog):
    with pytest.raises(InvalidLevelIndex):
        small_catalog.get(3)
    with pytest.raises(IndexError):
        small_catalog.get(-1)


def test_from_directory_reads_sok_files_in_name_order(tmp_path):
    (tmp_path / "b.sok").write_text("#@$.#\n")
    (tmp_path / "a.sok").write_text("#+#\n")
    (tmp_path / "notes.txt").write_text("not a level")

    catalog = LevelCatalog.from_directory(tmp_path)

    assert catalog.names() == ["a", "b"]
    assert catalog.get(1).raw_text == "#@$.#\n"


def test_from_directory_without_levels_raises(tmp_path):
    with pytest.raises(EmptyCatalog):
        LevelCatalog.from_directory(tmp_path)


def test_from_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LevelCatalog.from_directory(tmp_path / "missing")


def test_bundled_levels_are_playable():
    catalog = LevelCatalog.bundled()
    assert catalog.count() > 0
    assert catalog.names() == sorted(catalog.names())
    for definition in catalog:
        level = parse_level(definition.raw_text)
        goals = level.grid.count(Tile.GOAL, Tile.BOX_ON_GOAL, Tile.PLAYER_ON_GOAL)
        assert level.grid.count(Tile.PLAYER, Tile.PLAYER_ON_GOAL) == 1, definition.name
        assert level.boxes_total > 0, definition.name
        assert level.boxes_total == goals, definition.name


def test_level_definition_rows():
    definition = LevelDefinition(name="x", raw_text="##\n#@\n")
    assert definition.rows == ["##", "#@"]


def test_level_definition_rows_match_the_loader():
    definition = LevelDefinition(name="x", raw_text="#@\r#$.\x0c#\r\n########")
    assert definition.rows == ["#@\r#$.\x0c#", "########"]
    assert definition.rows == parse_level(definition.raw_text).grid.rows()
