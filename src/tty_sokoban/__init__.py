# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""TTY Sokoban - a terminal box-pushing puzzle game."""

from .catalog import LevelCatalog
from .engine import GameSession, Grid, parse_level
from .exceptions import DegenerateLevel, EmptyCatalog, InvalidLevelIndex, SokobanError
from .game import GameController
from .models import Feedback, Intent, LevelDefinition, MoveResult, SessionView, Tile

__all__ = [
    "DegenerateLevel",
    "EmptyCatalog",
    "Feedback",
    "GameController",
    "GameSession",
    "Grid",
    "Intent",
    "InvalidLevelIndex",
    "LevelCatalog",
    "LevelDefinition",
    "MoveResult",
    "SessionView",
    "SokobanError",
    "Tile",
    "parse_level",
]
