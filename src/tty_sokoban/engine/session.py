# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Sokoban game session.

Holds the mutable state of one level being played and applies the
move/push rules. Each move only looks at the two or three cells along the
move vector; ``boxes_on_goal`` is maintained incrementally.
"""

import logging
from typing import Optional, Tuple

from ..exceptions import DegenerateLevel
from ..models import Cell, LevelDefinition, MoveResult, Tile
from .grid import Grid
from .loader import ParsedLevel, parse_level

logger = logging.getLogger(__name__)

CARDINAL_DIRECTIONS = {(0, -1), (0, 1), (-1, 0), (1, 0)}


class GameSession:
    """
    One level being played.

    The player moves in four directions. If there is a box in the direction
    of movement and empty floor or a goal behind it, the box is pushed.
    Illegal moves are rejected without touching the state.

    Example:
        >>> session = GameSession.from_text("#####\\n#@$.#\\n#####", name="demo")
        >>> result = session.attempt_move(1, 0)
        >>> print(result.pushed, result.level_complete)
        True True
    """

    def __init__(
        self,
        level: ParsedLevel,
        level_name: str = "",
        ascii_borders: bool = False,
        use_colors: bool = True,
    ):
        """
        Wrap a parsed level in play state.

        Args:
            level: Output of the level loader; its grid is taken over by the session
            level_name: Display name of the level
            ascii_borders: Presentation flag, not used by the rules
            use_colors: Presentation flag, not used by the rules

        Raises:
            DegenerateLevel: if the grid is empty or has no player
        """
        if level.width == 0 or level.height == 0:
            raise DegenerateLevel(f"Level {level_name!r} is empty ({level.width}x{level.height})")
        if level.player_x is None or level.player_y is None:
            raise DegenerateLevel(f"Level {level_name!r} has no player")

        self.grid: Grid = level.grid
        self.width = level.width
        self.height = level.height
        self.player_x: int = level.player_x
        self.player_y: int = level.player_y
        self.boxes_total = level.boxes_total
        # Boxes may start on goals.
        self.boxes_on_goal = self.grid.count(Tile.BOX_ON_GOAL)
        self.level_name = level_name
        self.ascii_borders = ascii_borders
        self.use_colors = use_colors

        if self.boxes_total == 0:
            logger.warning(f"Level {level_name!r} has no boxes and can never be completed")
        logger.info(
            f"Session started for level {level_name!r}: {self.width}x{self.height}, "
            f"{self.boxes_on_goal}/{self.boxes_total} boxes on goals"
        )

    @classmethod
    def from_text(cls, text: str, name: str = "", **options) -> "GameSession":
        return cls(parse_level(text), level_name=name, **options)

    @classmethod
    def from_definition(cls, level: LevelDefinition, **options) -> "GameSession":
        return cls(parse_level(level.raw_text), level_name=level.name, **options)

    @property
    def level_complete(self) -> bool:
        """All boxes on goals. A level without boxes is never complete."""
        return self.boxes_total > 0 and self.boxes_on_goal == self.boxes_total

    @property
    def player_position(self) -> Tuple[int, int]:
        return self.player_x, self.player_y

    def tile_at(self, x: int, y: int) -> Optional[Cell]:
        """Tile at (x, y), or None outside the grid."""
        if not self.grid.in_bounds(x, y):
            return None
        return self.grid[x, y]

    def attempt_move(self, dx: int, dy: int) -> MoveResult:
        """
        Try to move the player by one cell.

        Args:
            dx: -1, 0 or 1, horizontal step
            dy: -1, 0 or 1, vertical step; exactly one of dx, dy is non-zero

        Returns:
            MoveResult; ``moved`` is False when the move was blocked, in which
            case nothing changed

        Raises:
            ValueError: for a diagonal or non-unit step
        """
        if (dx, dy) not in CARDINAL_DIRECTIONS:
            raise ValueError(f"Not a cardinal direction: ({dx}, {dy})")

        new_x, new_y = self.player_x + dx, self.player_y + dy

        if not self.grid.in_bounds(new_x, new_y):
            return self._blocked(dx, dy, "edge of the map")
        cell = self.grid[new_x, new_y]
        if cell == Tile.WALL:
            return self._blocked(dx, dy, "wall")

        changed = [(self.player_x, self.player_y), (new_x, new_y)]
        pushed = False
        if cell in (Tile.BOX, Tile.BOX_ON_GOAL):
            box_new_x, box_new_y = new_x + dx, new_y + dy
            if not self.grid.in_bounds(box_new_x, box_new_y):
                return self._blocked(dx, dy, "box at the edge of the map")
            if self.grid[box_new_x, box_new_y] not in (Tile.EMPTY, Tile.GOAL):
                return self._blocked(dx, dy, "box against an obstacle")
            self._push_box(new_x, new_y, box_new_x, box_new_y)
            changed.append((box_new_x, box_new_y))
            pushed = True

        self._move_player(new_x, new_y)

        complete = self.level_complete
        if complete:
            logger.info(f"Level {self.level_name!r} solved")
        logger.debug(
            f"Moved ({dx}, {dy}) to ({new_x}, {new_y}), pushed={pushed}, "
            f"boxes {self.boxes_on_goal}/{self.boxes_total}"
        )
        return MoveResult(moved=True, pushed=pushed, level_complete=complete, changed=changed)

    def _blocked(self, dx: int, dy: int, reason: str) -> MoveResult:
        logger.debug(f"Move ({dx}, {dy}) from ({self.player_x}, {self.player_y}) blocked: {reason}")
        return MoveResult(moved=False, level_complete=self.level_complete)

    def _push_box(self, box_x: int, box_y: int, new_x: int, new_y: int) -> None:
        """Push a box from one position to another."""
        # Uncover the goal under the box, if any
        if self.grid[box_x, box_y] == Tile.BOX_ON_GOAL:
            self.grid[box_x, box_y] = Tile.GOAL
            self.boxes_on_goal -= 1
        else:
            self.grid[box_x, box_y] = Tile.EMPTY

        if self.grid[new_x, new_y] == Tile.GOAL:
            self.grid[new_x, new_y] = Tile.BOX_ON_GOAL
            self.boxes_on_goal += 1
        else:
            self.grid[new_x, new_y] = Tile.BOX

    def _move_player(self, new_x: int, new_y: int) -> None:
        """Move the player to a new position."""
        if self.grid[self.player_x, self.player_y] == Tile.PLAYER_ON_GOAL:
            self.grid[self.player_x, self.player_y] = Tile.GOAL
        else:
            self.grid[self.player_x, self.player_y] = Tile.EMPTY

        if self.grid[new_x, new_y] == Tile.GOAL:
            self.grid[new_x, new_y] = Tile.PLAYER_ON_GOAL
        else:
            self.grid[new_x, new_y] = Tile.PLAYER

        self.player_x, self.player_y = new_x, new_y
