# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Sokoban rule engine: grid, level loader and game session."""

from .grid import Grid
from .loader import ParsedLevel, load_level, parse_level, split_rows
from .session import GameSession

__all__ = ["Grid", "ParsedLevel", "GameSession", "load_level", "parse_level", "split_rows"]
