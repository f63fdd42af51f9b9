"""Tile map of the stage: chip types, grid lookups and CSV loading."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Union

from chiprunner.vecmath import Vector3


class MapChipType(enum.Enum):
    """Kind of tile occupying one grid cell."""

    BLANK = 0
    BLOCK = 1
    SAVE_BLOCK = 2
    GOAL_BLOCK = 3


_CHIP_TABLE: Dict[str, MapChipType] = {
    "0": MapChipType.BLANK,
    "1": MapChipType.BLOCK,
    "2": MapChipType.SAVE_BLOCK,
    "3": MapChipType.GOAL_BLOCK,
}


@dataclass(frozen=True)
class IndexSet:
    """Column and row of a grid cell; row 0 is the top of the map."""

    x_index: int
    y_index: int


@dataclass(frozen=True)
class Rect:
    """World-space extent of a grid cell."""

    left: float
    right: float
    bottom: float
    top: float


class MapChipField:
    """Fixed-size grid of map chips addressed by index or world position."""

    BLOCK_WIDTH: ClassVar[float] = 1.0
    BLOCK_HEIGHT: ClassVar[float] = 1.0
    NUM_BLOCK_VERTICAL: ClassVar[int] = 20
    NUM_BLOCK_HORIZONTAL: ClassVar[int] = 100

    def __init__(self) -> None:
        self._data: List[List[MapChipType]] = []
        self.reset()

    @property
    def num_block_vertical(self) -> int:
        return self.NUM_BLOCK_VERTICAL

    @property
    def num_block_horizontal(self) -> int:
        return self.NUM_BLOCK_HORIZONTAL

    def reset(self) -> None:
        """Clear every cell to blank."""
        self._data = [
            [MapChipType.BLANK] * self.NUM_BLOCK_HORIZONTAL
            for _ in range(self.NUM_BLOCK_VERTICAL)
        ]

    def load_csv(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Load the grid from a CSV file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        self.load_csv_text(text)

    def load_csv_text(self, text: str) -> None:
        """Load the grid from CSV text; unknown or missing cells stay blank."""
        self.reset()
        lines = text.split("\n")[: self.NUM_BLOCK_VERTICAL]
        for row, line in zip(self._data, lines):
            words = line.split(",")[: self.NUM_BLOCK_HORIZONTAL]
            for column, word in enumerate(words):
                chip = _CHIP_TABLE.get(word)
                if chip is not None:
                    row[column] = chip

    def type_at(self, x_index: int, y_index: int) -> MapChipType:
        """Chip at a cell; cells outside the grid count as blank."""
        if not 0 <= x_index < self.NUM_BLOCK_HORIZONTAL:
            return MapChipType.BLANK
        if not 0 <= y_index < self.NUM_BLOCK_VERTICAL:
            return MapChipType.BLANK
        return self._data[y_index][x_index]

    def position_at(self, x_index: int, y_index: int) -> Vector3:
        """World-space centre of a cell."""
        return Vector3(
            self.BLOCK_WIDTH * x_index,
            self.BLOCK_HEIGHT * (self.NUM_BLOCK_VERTICAL - 1 - y_index),
            0.0,
        )

    def index_set_at(self, position: Vector3) -> IndexSet:
        """Cell containing a world-space position."""
        x_index = int((position.x + self.BLOCK_WIDTH / 2.0) / self.BLOCK_WIDTH)
        y_index = self.NUM_BLOCK_VERTICAL - 1 - int(
            position.y + self.BLOCK_HEIGHT / 2.0 / self.BLOCK_HEIGHT
        )
        return IndexSet(x_index, y_index)

    def rect_at(self, x_index: int, y_index: int) -> Rect:
        """World-space extent of a cell."""
        center = self.position_at(x_index, y_index)
        half = self.BLOCK_WIDTH / 2.0
        return Rect(
            left=center.x - half,
            right=center.x + half,
            bottom=center.y - half,
            top=center.y + half,
        )