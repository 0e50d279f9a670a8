# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Level loader.

Turns the raw text of one level into a :class:`Grid` plus the metadata the
engine needs: dimensions, player start and the number of boxes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidLevelIndex
from ..models import LevelDefinition, Tile, split_rows
from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ParsedLevel:
    """
    Result of parsing a level.

    Attributes:
        grid: Freshly allocated board, owned by whoever builds a session from it
        width: Length of the longest row
        height: Number of rows
        player_x: Column of the player, None if the level has no player tile
        player_y: Row of the player, None if the level has no player tile
        boxes_total: Number of Box and BoxOnGoal tiles
    """

    grid: Grid
    width: int
    height: int
    player_x: Optional[int]
    player_y: Optional[int]
    boxes_total: int


def parse_level(text: str) -> ParsedLevel:
    """
    Parse one level.

    Characters outside the tile alphabet are kept verbatim in the grid. If
    more than one player tile appears, the last one in row-major order wins.

    Args:
        text: Raw level text

    Returns:
        ParsedLevel with the grid and its derived metadata
    """
    rows = split_rows(text)
    grid = Grid.from_rows(rows)

    player_x: Optional[int] = None
    player_y: Optional[int] = None
    boxes_total = 0
    for x, y, tile in grid:
        if not isinstance(tile, Tile):
            continue
        if tile.is_box:
            boxes_total += 1
        if tile.is_player:
            player_x, player_y = x, y

    logger.debug(
        f"Parsed level {grid.width}x{grid.height}, player at ({player_x}, {player_y}), "
        f"{boxes_total} boxes"
    )
    return ParsedLevel(
        grid=grid,
        width=grid.width,
        height=grid.height,
        player_x=player_x,
        player_y=player_y,
        boxes_total=boxes_total,
    )


def load_level(catalog, index: int) -> LevelDefinition:
    """
    Fetch a level definition by index.

    Args:
        catalog: Anything with ``count()`` and ``get(index)``
        index: Zero-based level index

    Raises:
        InvalidLevelIndex: if ``index`` is outside ``[0, catalog.count())``
    """
    count = catalog.count()
    if index < 0 or index >= count:
        logger.error(f"Invalid level index: {index}")
        raise InvalidLevelIndex(index, count)
    return catalog.get(index)
