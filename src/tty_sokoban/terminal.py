# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Curses front end.

Draws the board from the tables in :mod:`tty_sokoban.render`, reads keys and
feeds the matching intents to a :class:`GameController`.
"""

import curses
import logging
from typing import Dict, List, Optional, Tuple, Union

from .game import GameController
from .models import Feedback, Intent, MoveResult
from .render import COMPLETE_BANNER, LEGEND, Style, glyph_at, status_lines

logger = logging.getLogger(__name__)

# Offset of the completion banner below the board, after title, level and boxes
BANNER_ROW = 4

KEY_BINDINGS: Dict[int, Intent] = {
    curses.KEY_UP: Intent.MOVE_UP,
    curses.KEY_DOWN: Intent.MOVE_DOWN,
    curses.KEY_LEFT: Intent.MOVE_LEFT,
    curses.KEY_RIGHT: Intent.MOVE_RIGHT,
    ord("r"): Intent.RESTART,
    ord("n"): Intent.NEXT_LEVEL,
    ord("p"): Intent.PREVIOUS_LEVEL,
    ord("c"): Intent.FORCE_REDRAW,
    ord("q"): Intent.QUIT,
    ord("l"): Intent.MOVE_RIGHT,
}
for _keys, _intent in (
    ("wWkK", Intent.MOVE_UP),
    ("sSjJ", Intent.MOVE_DOWN),
    ("aAhH", Intent.MOVE_LEFT),
    ("dD", Intent.MOVE_RIGHT),
):
    for _key in _keys:
        KEY_BINDINGS[ord(_key)] = _intent

# Line drawing glyphs -> curses alternate character set names
ACS_NAMES: Dict[str, str] = {
    "┼": "ACS_PLUS",
    "┤": "ACS_RTEE",
    "├": "ACS_LTEE",
    "┴": "ACS_BTEE",
    "┬": "ACS_TTEE",
    "│": "ACS_VLINE",
    "─": "ACS_HLINE",
    "└": "ACS_LLCORNER",
    "┘": "ACS_LRCORNER",
    "┌": "ACS_ULCORNER",
    "┐": "ACS_URCORNER",
}

COLOR_NAMES: Dict[str, int] = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


def intent_for_key(key: int) -> Optional[Intent]:
    return KEY_BINDINGS.get(key)


class TerminalUI:
    """Plays a :class:`GameController` on a curses screen."""

    def __init__(self, screen, game: GameController):
        self.screen = screen
        self.game = game
        self.start_x = 0
        self.start_y = 0
        self._pairs: Dict[Tuple[str, str], int] = {}
        self.colors = game.use_colors and curses.has_colors()

        curses.cbreak()
        curses.noecho()
        screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        if self.colors:
            curses.start_color()

    def _attr(self, style: Style) -> int:
        """curses attribute for a style, allocating colour pairs on first use."""
        if not self.game.use_colors:
            return curses.A_NORMAL
        attr = curses.A_NORMAL
        if self.colors:
            key = (style.fg, style.bg)
            if key not in self._pairs:
                pair = len(self._pairs) + 1
                curses.init_pair(pair, COLOR_NAMES[style.fg], COLOR_NAMES[style.bg])
                self._pairs[key] = pair
            attr |= curses.color_pair(self._pairs[key])
        if style.bold:
            attr |= curses.A_BOLD
        if style.reverse:
            attr |= curses.A_REVERSE
        return attr

    def _put(self, y: int, x: int, text: Union[str, int], attr: int = curses.A_NORMAL) -> None:
        try:
            if isinstance(text, int):
                self.screen.addch(y, x, text, attr)
            else:
                self.screen.addstr(y, x, text, attr)
        except curses.error:
            # Writing past the bottom-right corner or off screen.
            pass

    def _clear_line(self, y: int) -> None:
        try:
            self.screen.move(y, self.start_x)
            self.screen.clrtoeol()
        except curses.error:
            # Row below the bottom of the screen.
            pass

    def draw_cell(self, board: List[str], x: int, y: int) -> None:
        glyph, style = glyph_at(board, x, y, self.game.ascii_borders)
        acs = ACS_NAMES.get(glyph)
        ch = getattr(curses, acs) if acs is not None else glyph
        self._put(self.start_y + y, self.start_x + x, ch, self._attr(style))

    def draw_status(self) -> None:
        view = self.game.view()
        bold = curses.A_BOLD if self.game.use_colors else curses.A_NORMAL
        base = self.start_y + self.game.session.height
        for offset, line in enumerate(status_lines(view), start=1):
            standout = line == COMPLETE_BANNER and self.game.use_colors
            self._put(base + offset, self.start_x, line, curses.A_STANDOUT if standout else bold)
        if not view.level_complete:
            # A box pushed back off its goal un-solves the level.
            self._clear_line(base + BANNER_ROW)

        screen_height, _ = self.screen.getmaxyx()
        if base + BANNER_ROW + 1 + len(LEGEND) < screen_height:
            for offset, line in enumerate(LEGEND, start=BANNER_ROW + 1):
                self._put(base + offset, self.start_x, line)

    def draw(self) -> None:
        """Full redraw, centring the board on the screen."""
        session = self.game.session
        screen_height, screen_width = self.screen.getmaxyx()
        self.start_y = max((screen_height - session.height) // 2, 2)
        self.start_x = max((screen_width - session.width) // 2, 0)

        self.screen.erase()
        board = session.grid.rows()
        for y in range(session.height):
            for x in range(session.width):
                self.draw_cell(board, x, y)
        self.draw_status()
        self.screen.refresh()

    def draw_move(self, result: MoveResult) -> None:
        """Redraw only the cells a move touched and the status lines."""
        board = self.game.session.grid.rows()
        for x, y in result.changed:
            self.draw_cell(board, x, y)
        self.draw_status()
        self.screen.refresh()

    def run(self) -> None:
        self.draw()
        while True:
            intent = intent_for_key(self.screen.getch())
            if intent is None:
                continue
            feedback = self.game.handle(intent)
            if feedback is Feedback.QUIT:
                break
            if feedback in (Feedback.MOVED, Feedback.PUSHED):
                self.draw_move(self.game.last_move)
            elif feedback in (Feedback.LEVEL_CHANGED, Feedback.REDRAW):
                if feedback is Feedback.REDRAW:
                    self.screen.clear()
                self.draw()


def play(game: GameController) -> None:
    """Run the game until the player quits, restoring the terminal afterwards."""
    curses.wrapper(lambda screen: TerminalUI(screen, game).run())
