# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Game controller.

Owns the level catalog, the index of the level being played and its
session, and turns input intents into engine operations.
"""

import logging
from typing import Optional

from .catalog import LevelCatalog
from .engine import GameSession, load_level
from .exceptions import DegenerateLevel, EmptyCatalog, InvalidLevelIndex
from .models import DIRECTION_DELTAS, Cell, Feedback, Intent, MoveResult, SessionView

logger = logging.getLogger(__name__)


class GameController:
    """
    Level navigation and input dispatch around a :class:`GameSession`.

    Example:
        >>> game = GameController(LevelCatalog.bundled())
        >>> feedback = game.handle(Intent.MOVE_LEFT)
        >>> view = game.view()
        >>> print(f"Boxes on goals: {view.boxes_on_goal}/{view.boxes_total}")
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        start_level: int = 0,
        ascii_borders: bool = False,
        use_colors: bool = True,
    ):
        """
        Start playing ``start_level``.

        Raises:
            EmptyCatalog: if the catalog has no levels
            InvalidLevelIndex: if ``start_level`` is out of range
            DegenerateLevel: if the start level cannot be played
        """
        if catalog.count() == 0:
            raise EmptyCatalog("No levels found.")
        self.catalog = catalog
        self.ascii_borders = ascii_borders
        self.use_colors = use_colors
        self.current_index = start_level
        self.session = self._load(start_level)
        self.last_move: Optional[MoveResult] = None

    @property
    def total_levels(self) -> int:
        return self.catalog.count()

    @property
    def level_complete(self) -> bool:
        return self.session.level_complete

    def _load(self, index: int) -> GameSession:
        level = load_level(self.catalog, index)
        return GameSession.from_definition(
            level, ascii_borders=self.ascii_borders, use_colors=self.use_colors
        )

    def go_to(self, index: int) -> bool:
        """
        Replace the session with a fresh one for level ``index``.

        An invalid index or unplayable level is rejected and the current
        session is kept.

        Returns:
            True if the level was loaded
        """
        try:
            session = self._load(index)
        except (InvalidLevelIndex, DegenerateLevel) as e:
            logger.warning(f"Navigation rejected: {e}")
            return False
        self.session = session
        self.current_index = index
        self.last_move = None
        logger.info(f"Playing level {index + 1}/{self.total_levels}: {session.level_name}")
        return True

    def restart(self) -> bool:
        return self.go_to(self.current_index)

    def next_level(self) -> bool:
        """
        Advance to the next level.

        Allowed when there is a next level or the current one is solved; a
        solved last level wraps around to the first.
        """
        if self.level_complete:
            return self.go_to((self.current_index + 1) % self.total_levels)
        if self.current_index < self.total_levels - 1:
            return self.go_to(self.current_index + 1)
        return False

    def previous_level(self) -> bool:
        if self.current_index > 0:
            return self.go_to(self.current_index - 1)
        return False

    def move(self, intent: Intent) -> MoveResult:
        dx, dy = DIRECTION_DELTAS[intent]
        self.last_move = self.session.attempt_move(dx, dy)
        return self.last_move

    def handle(self, intent: Intent) -> Feedback:
        """Apply one input intent and report what happened."""
        if intent in DIRECTION_DELTAS:
            result = self.move(intent)
            if not result.moved:
                return Feedback.BLOCKED
            return Feedback.PUSHED if result.pushed else Feedback.MOVED
        if intent is Intent.RESTART:
            return Feedback.LEVEL_CHANGED if self.restart() else Feedback.IGNORED
        if intent is Intent.NEXT_LEVEL:
            return Feedback.LEVEL_CHANGED if self.next_level() else Feedback.IGNORED
        if intent is Intent.PREVIOUS_LEVEL:
            return Feedback.LEVEL_CHANGED if self.previous_level() else Feedback.IGNORED
        if intent is Intent.FORCE_REDRAW:
            return Feedback.REDRAW
        if intent is Intent.QUIT:
            logger.info("Quit requested")
            return Feedback.QUIT
        return Feedback.IGNORED

    def tile_at(self, x: int, y: int) -> Optional[Cell]:
        return self.session.tile_at(x, y)

    def view(self) -> SessionView:
        """Snapshot of the current session for the display layer."""
        session = self.session
        return SessionView(
            board=session.grid.rows(),
            board_shape=[session.height, session.width],
            level_name=session.level_name,
            current_index=self.current_index,
            total_levels=self.total_levels,
            boxes_on_goal=session.boxes_on_goal,
            boxes_total=session.boxes_total,
            player_position=list(session.player_position),
            level_complete=session.level_complete,
            ascii_borders=self.ascii_borders,
            use_colors=self.use_colors,
        )
