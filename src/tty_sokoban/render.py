# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Presentation tables for the Sokoban board.

Everything here is a pure function of the board contents, so it can be used
without a terminal: the curses front end draws from these tables and
:func:`render_text` produces a plain string version of the board.
"""

from typing import Dict, List, NamedTuple, Sequence, Tuple

from .models import Cell, SessionView, Tile

TITLE = "TTY SOKOBAN"
LEGEND = [
    "Arrows/WASD/hjkl move",
    "[R]estart, [N]ext, [P]rev, [Q]uit, [C]lear",
]
COMPLETE_BANNER = "Level complete! Press 'n' for next level."


class Style(NamedTuple):
    """Colour and attribute hint for one cell."""

    fg: str
    bg: str
    bold: bool = False
    reverse: bool = False


DEFAULT_STYLE = Style("white", "black")

# Tile -> (glyph, style). Walls get their glyph from wall_glyph().
TILE_STYLES: Dict[Tile, Tuple[str, Style]] = {
    Tile.WALL: ("#", Style("blue", "white", reverse=True)),
    Tile.PLAYER: ("@", Style("black", "green", bold=True)),
    Tile.PLAYER_ON_GOAL: ("@", Style("black", "green", bold=True)),
    Tile.BOX: ("#", Style("black", "red", bold=True)),
    Tile.GOAL: ("O", Style("red", "cyan", bold=True)),
    Tile.BOX_ON_GOAL: ("0", Style("white", "magenta", bold=True)),
    Tile.EMPTY: (" ", Style("black", "yellow")),
}

# (up, down, left, right) wall neighbours -> glyph
ASCII_WALLS: Dict[Tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "+",
    (True, True, True, False): "+",
    (True, True, False, True): "+",
    (True, False, True, True): "+",
    (False, True, True, True): "+",
    (True, True, False, False): "|",
    (False, False, True, True): "-",
    (True, False, False, True): "+",
    (True, False, True, False): "+",
    (False, True, False, True): "+",
    (False, True, True, False): "+",
    (True, False, False, False): "|",
    (False, True, False, False): "|",
    (False, False, True, False): "-",
    (False, False, False, True): "-",
    (False, False, False, False): "+",
}

LINE_WALLS: Dict[Tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "┼",
    (True, True, True, False): "┤",
    (True, True, False, True): "├",
    (True, False, True, True): "┴",
    (False, True, True, True): "┬",
    (True, True, False, False): "│",
    (False, False, True, True): "─",
    (True, False, False, True): "└",
    (True, False, True, False): "┘",
    (False, True, False, True): "┌",
    (False, True, True, False): "┐",
    (True, False, False, False): "│",
    (False, True, False, False): "│",
    (False, False, True, False): "─",
    (False, False, False, True): "─",
    (False, False, False, False): "┼",
}


def cell_style(cell: Cell) -> Tuple[str, Style]:
    """Glyph and style for a cell; foreign tiles are drawn verbatim."""
    if isinstance(cell, Tile):
        return TILE_STYLES[cell]
    return cell, DEFAULT_STYLE


def wall_neighbours(board: Sequence[str], x: int, y: int) -> Tuple[bool, bool, bool, bool]:
    """Which of the four neighbours of (x, y) are walls, as (up, down, left, right)."""
    wall = Tile.WALL.value

    def is_wall(cx: int, cy: int) -> bool:
        return 0 <= cy < len(board) and 0 <= cx < len(board[cy]) and board[cy][cx] == wall

    return (is_wall(x, y - 1), is_wall(x, y + 1), is_wall(x - 1, y), is_wall(x + 1, y))


def wall_glyph(board: Sequence[str], x: int, y: int, ascii_borders: bool = False) -> str:
    table = ASCII_WALLS if ascii_borders else LINE_WALLS
    return table[wall_neighbours(board, x, y)]


def glyph_at(board: Sequence[str], x: int, y: int, ascii_borders: bool = False) -> Tuple[str, Style]:
    """Glyph and style for the board cell at (x, y)."""
    cell = Tile.from_char(board[y][x])
    glyph, style = cell_style(cell)
    if cell == Tile.WALL:
        glyph = wall_glyph(board, x, y, ascii_borders)
    return glyph, style


def render_text(view: SessionView) -> str:
    """The board as plain text, one line per row."""
    lines = []
    for y, row in enumerate(view.board):
        lines.append(
            "".join(glyph_at(view.board, x, y, view.ascii_borders)[0] for x in range(len(row)))
        )
    return "\n".join(lines)


def level_line(view: SessionView) -> str:
    return f"Level: {view.level_name} ({view.current_index + 1}/{view.total_levels})"


def boxes_line(view: SessionView) -> str:
    return f"Boxes: {view.boxes_on_goal}/{view.boxes_total}"


def status_lines(view: SessionView) -> List[str]:
    """Title, level and box counter, plus the completion banner once solved."""
    lines = [TITLE, level_line(view), boxes_line(view)]
    if view.level_complete:
        lines.append(COMPLETE_BANNER)
    return lines
