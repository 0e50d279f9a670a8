# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Level catalog.

An ordered, read-only collection of named levels. Levels are sorted by name
so that a given index always refers to the same level.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .exceptions import EmptyCatalog, InvalidLevelIndex
from .models import LevelDefinition

LEVEL_SUFFIX = ".sok"

logger = logging.getLogger(__name__)


class LevelCatalog:
    """
    Sorted collection of level definitions.

    Example:
        >>> catalog = LevelCatalog.bundled()
        >>> print(f"{catalog.count()} levels, first is {catalog.get(0).name}")
    """

    def __init__(self, levels: Iterable[LevelDefinition]):
        self._levels: List[LevelDefinition] = sorted(levels, key=lambda level: level.name)

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "LevelCatalog":
        """
        Read every ``*.sok`` file in ``directory``.

        The display name of a level is its file name without the suffix.

        Raises:
            FileNotFoundError: if ``directory`` does not exist
            EmptyCatalog: if it holds no level files
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Level directory not found: {directory}")
        levels = [
            LevelDefinition(name=path.stem, raw_text=path.read_text(encoding="utf-8"))
            for path in sorted(directory.glob(f"*{LEVEL_SUFFIX}"))
        ]
        if not levels:
            raise EmptyCatalog(f"No {LEVEL_SUFFIX} files found in '{directory}'")
        logger.info(f"Loaded {len(levels)} levels from {directory}")
        return cls(levels)

    @classmethod
    def bundled(cls) -> "LevelCatalog":
        """Levels shipped with the package."""
        package_levels = resources.files("tty_sokoban") / "levels"
        levels = [
            LevelDefinition(
                name=entry.name[: -len(LEVEL_SUFFIX)],
                raw_text=entry.read_text(encoding="utf-8"),
            )
            for entry in package_levels.iterdir()
            if entry.name.endswith(LEVEL_SUFFIX)
        ]
        if not levels:
            raise EmptyCatalog("No bundled levels found")
        logger.info(f"Loaded {len(levels)} bundled levels")
        return cls(levels)

    def count(self) -> int:
        return len(self._levels)

    def get(self, index: int) -> LevelDefinition:
        """
        Level at ``index``.

        Raises:
            InvalidLevelIndex: if ``index`` is outside ``[0, count())``
        """
        if index < 0 or index >= len(self._levels):
            raise InvalidLevelIndex(index, len(self._levels))
        return self._levels[index]

    def names(self) -> List[str]:
        return [level.name for level in self._levels]

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[LevelDefinition]:
        return iter(self._levels)
