"""The playing field: fifteen numbered tiles and one blank on a square grid."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from fifteen.state import FIELD_SIZE, GAP, TILE_SIZE

SHUFFLE_MOVES = 50


@dataclass(eq=False)
class Tile:
    """A tile labelled ``number`` (0 for the blank) sitting in cell ``index``."""

    number: int
    index: int

    def position(self) -> tuple[int, int]:
        """Pixel coordinates of the tile's top-left corner."""
        row, col = divmod(self.index, FIELD_SIZE)
        return (col * (GAP + TILE_SIZE) + GAP, row * (GAP + TILE_SIZE) + GAP)


class Field:
    """Grid of tiles, starting in solved order."""

    def __init__(self) -> None:
        count = FIELD_SIZE * FIELD_SIZE
        self.tiles = [Tile((index + 1) % count, index) for index in range(count)]
        self.blank = self.tiles[-1]

    def is_near(self, first: Tile, second: Tile) -> bool:
        """Tell whether two tiles sit in neighbouring cells."""
        x1, y1 = first.position()
        x2, y2 = second.position()
        return abs(x1 - x2) + abs(y1 - y2) == GAP + TILE_SIZE

    def _swap_with_blank(self, tile: Tile) -> None:
        tile.index, self.blank.index = self.blank.index, tile.index

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Make random legal moves, never moving the same tile twice in a row."""
        rng = rng or random.Random()
        last_moved = 0
        moved = 0
        while moved < SHUFFLE_MOVES:
            choice = rng.randrange(len(self.tiles) - 1)
            tile = self.tiles[choice]
            if self.is_near(self.blank, tile) and choice != last_moved:
                self._swap_with_blank(tile)
                moved += 1
                last_moved = choice

    def is_sorted(self) -> bool:
        """Tell whether every numbered tile is in its own cell."""
        return all(tile.index == cell for cell, tile in enumerate(self.tiles[:-1]))

    def move(self, number: int) -> bool:
        """Slide tile ``number`` into the blank if they are neighbours."""
        if not 1 <= number < len(self.tiles):
            raise ValueError(f"no tile numbered {number}")
        tile = self.tiles[number - 1]
        if not self.is_near(tile, self.blank):
            return False
        self._swap_with_blank(tile)
        return True

    def board(self) -> list[int]:
        """Tile numbers in row-major cell order, 0 for the blank."""
        cells = [0] * len(self.tiles)
        for tile in self.tiles:
            cells[tile.index] = tile.number
        return cells