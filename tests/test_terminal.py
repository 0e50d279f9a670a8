import curses

import pytest

from tty_sokoban import GameController, Intent, LevelCatalog, LevelDefinition
from tty_sokoban.render import COMPLETE_BANNER, LINE_WALLS
from tty_sokoban.terminal import ACS_NAMES, BANNER_ROW, TerminalUI, intent_for_key


@pytest.mark.parametrize(
    "key,intent",
    [
        (curses.KEY_UP, Intent.MOVE_UP),
        (ord("w"), Intent.MOVE_UP),
        (ord("K"), Intent.MOVE_UP),
        (curses.KEY_DOWN, Intent.MOVE_DOWN),
        (ord("j"), Intent.MOVE_DOWN),
        (ord("A"), Intent.MOVE_LEFT),
        (ord("h"), Intent.MOVE_LEFT),
        (ord("l"), Intent.MOVE_RIGHT),
        (ord("D"), Intent.MOVE_RIGHT),
        (ord("r"), Intent.RESTART),
        (ord("n"), Intent.NEXT_LEVEL),
        (ord("p"), Intent.PREVIOUS_LEVEL),
        (ord("c"), Intent.FORCE_REDRAW),
        (ord("q"), Intent.QUIT),
    ],
)
def test_key_bindings(key, intent):
    assert intent_for_key(key) is intent


def test_unbound_keys():
    assert intent_for_key(ord("L")) is None
    assert intent_for_key(ord("x")) is None


def test_every_line_glyph_has_an_acs_name():
    assert set(LINE_WALLS.values()) <= set(ACS_NAMES)
    for name in ACS_NAMES.values():
        assert name.startswith("ACS_")


class RecordingScreen:
    """Stands in for a curses window, keeping the text of each row."""

    def __init__(self, height=24, width=80):
        self.height = height
        self.width = width
        self.cells = {}
        self.cursor = (0, 0)

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        for i, ch in enumerate(text):
            self.cells[y, x + i] = ch

    def addch(self, y, x, ch, attr=0):
        self.cells[y, x] = ch

    def move(self, y, x):
        self.cursor = (y, x)

    def clrtoeol(self):
        y, x = self.cursor
        for key in [key for key in self.cells if key[0] == y and key[1] >= x]:
            del self.cells[key]

    def erase(self):
        self.cells.clear()

    def refresh(self):
        pass

    def row(self, y):
        return "".join(ch for (cy, _), ch in sorted(self.cells.items()) if cy == y)


def make_ui(game):
    # Skips curses setup; drawing only needs the screen and the game.
    ui = TerminalUI.__new__(TerminalUI)
    ui.screen = RecordingScreen()
    ui.game = game
    ui.start_x = ui.start_y = 0
    ui._pairs = {}
    ui.colors = False
    return ui


def test_banner_is_cleared_when_level_is_unsolved():
    catalog = LevelCatalog([LevelDefinition(name="demo", raw_text="#######\n#@$.  #\n#######")])
    game = GameController(catalog, ascii_borders=True, use_colors=False)
    ui = make_ui(game)
    ui.draw()
    banner_y = ui.start_y + game.session.height + BANNER_ROW

    game.handle(Intent.MOVE_RIGHT)
    ui.draw_move(game.last_move)
    assert ui.screen.row(banner_y) == COMPLETE_BANNER

    game.handle(Intent.MOVE_RIGHT)
    assert not game.level_complete
    ui.draw_move(game.last_move)
    assert ui.screen.row(banner_y) == ""
    assert ui.screen.row(banner_y - 1) == "Boxes: 0/1"
