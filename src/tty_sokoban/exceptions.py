# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Errors raised while loading levels and building game sessions."""


class SokobanError(Exception):
    """Base class for all TTY Sokoban errors."""


class InvalidLevelIndex(SokobanError, IndexError):
    """A level index outside ``[0, count)`` was requested."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Invalid level index: {index} (catalog has {count} levels)")


class EmptyCatalog(SokobanError):
    """The level catalog holds no levels, so no session can be built."""


class DegenerateLevel(SokobanError, ValueError):
    """A parsed level cannot be played (empty grid or no player)."""
