import pytest

from tty_sokoban import LevelCatalog, LevelDefinition, Tile

SCENARIO_LEVEL = "#####\n#@$.#\n#####"


def assert_invariants(session, boxes_total):
    """Player singularity, box conservation and boxes_on_goal consistency."""
    players = session.grid.find(Tile.PLAYER, Tile.PLAYER_ON_GOAL)
    assert players == [(session.player_x, session.player_y)]
    assert session.grid.count(Tile.BOX, Tile.BOX_ON_GOAL) == boxes_total
    assert session.boxes_total == boxes_total
    assert session.boxes_on_goal == session.grid.count(Tile.BOX_ON_GOAL)


@pytest.fixture
def scenario_level():
    return SCENARIO_LEVEL


@pytest.fixture
def small_catalog():
    return LevelCatalog(
        [
            LevelDefinition(name="b_second", raw_text="#####\n#@ $.#\n#####\n"),
            LevelDefinition(name="a_first", raw_text=SCENARIO_LEVEL),
            LevelDefinition(name="c_third", raw_text="######\n#@$ .#\n######\n"),
        ]
    )
