# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Data models for TTY Sokoban.

Sokoban is a classic puzzle game where the player pushes boxes to goal locations.
The player can move in four directions and push boxes (but not pull them).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class Tile(str, Enum):
    """
    One grid cell.

    A tile encodes both the terrain and what stands on it, so a box resting
    on a goal is its own value rather than a box layered over a goal.
    """

    EMPTY = " "
    WALL = "#"
    BOX = "$"
    BOX_ON_GOAL = "*"
    PLAYER = "@"
    PLAYER_ON_GOAL = "+"
    GOAL = "."

    @property
    def is_box(self) -> bool:
        return self in (Tile.BOX, Tile.BOX_ON_GOAL)

    @property
    def is_player(self) -> bool:
        return self in (Tile.PLAYER, Tile.PLAYER_ON_GOAL)

    @property
    def is_goal(self) -> bool:
        return self in (Tile.GOAL, Tile.BOX_ON_GOAL, Tile.PLAYER_ON_GOAL)

    @classmethod
    def from_char(cls, ch: str) -> "Cell":
        """Return the Tile for ``ch``, or ``ch`` itself for a foreign character."""
        try:
            return cls(ch)
        except ValueError:
            return ch


# A grid cell is a Tile, or the raw character of a tile outside the alphabet.
Cell = Union[Tile, str]


class Intent(Enum):
    """Discrete commands coming from the input layer."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RESTART = "restart"
    NEXT_LEVEL = "next_level"
    PREVIOUS_LEVEL = "previous_level"
    QUIT = "quit"
    FORCE_REDRAW = "force_redraw"


# (dx, dy) per movement intent; y grows downwards.
DIRECTION_DELTAS: Dict[Intent, Tuple[int, int]] = {
    Intent.MOVE_UP: (0, -1),
    Intent.MOVE_DOWN: (0, 1),
    Intent.MOVE_LEFT: (-1, 0),
    Intent.MOVE_RIGHT: (1, 0),
}


class Feedback(Enum):
    """What the controller did with an intent, for the presentation layer."""

    MOVED = "moved"
    PUSHED = "pushed"
    BLOCKED = "blocked"
    LEVEL_CHANGED = "level_changed"
    REDRAW = "redraw"
    QUIT = "quit"
    IGNORED = "ignored"


def split_rows(text: str) -> List[str]:
    """
    Split level text into rows.

    Rows end at ``\\n``; a ``\\r`` right before it belongs to the terminator.
    A last row without a terminator still counts, a trailing terminator does
    not start an extra row. No other character ends a row.
    """
    *terminated, last = text.split("\n")
    rows = [row[:-1] if row.endswith("\r") else row for row in terminated]
    if last:
        rows.append(last)
    return rows


@dataclass(frozen=True)
class LevelDefinition:
    """
    A named level as supplied by the catalog.

    Attributes:
        name: Display name, conventionally the source file's base name
        raw_text: Level rows separated by newlines, no header
    """

    name: str
    raw_text: str

    @property
    def rows(self) -> List[str]:
        return split_rows(self.raw_text)


@dataclass(kw_only=True)
class MoveResult:
    """
    Outcome of a single move attempt.

    Attributes:
        moved: Whether the player changed cell
        pushed: Whether a box was relocated by the move
        level_complete: Whether every box rests on a goal after the move
        changed: (x, y) of every cell that was rewritten, for partial redraw
    """

    moved: bool
    pushed: bool = False
    level_complete: bool = False
    changed: List[Tuple[int, int]] = field(default_factory=list)


@dataclass(kw_only=True)
class SessionView:
    """
    Snapshot of the current game for the display layer.

    Attributes:
        board: Rows of the grid as strings of tile characters
        board_shape: Shape of the board (height, width)
        level_name: Display name of the level being played
        current_index: Zero-based catalog index of the level
        total_levels: Number of levels in the catalog
        boxes_on_goal: Number of boxes currently on goal positions
        boxes_total: Total number of boxes in the level
        player_position: (x, y) position of the player
        level_complete: Whether all boxes are on goals
        ascii_borders: Draw walls with ASCII instead of line drawing characters
        use_colors: Whether colour styling is enabled
    """

    board: List[str]
    board_shape: List[int]
    level_name: str
    current_index: int
    total_levels: int
    boxes_on_goal: int
    boxes_total: int
    player_position: Optional[List[int]]
    level_complete: bool = False
    ascii_borders: bool = False
    use_colors: bool = True
