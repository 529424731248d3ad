"""Board states for searching a solution of the fifteen puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from fifteen.pqueue import PriorityQueue

FIELD_SIZE = 4
TILE_SIZE = 50
GAP = 5

Grid = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Pos:
    """A cell on the board: column ``x`` and row ``y``."""

    x: int
    y: int


class Direction(Enum):
    """The way the blank cell moves."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


def goal_positions() -> list[Pos]:
    """Return the solved cell of every tile, indexed by tile number (0 is blank)."""
    goal = [Pos(FIELD_SIZE - 1, FIELD_SIZE - 1)] * (FIELD_SIZE * FIELD_SIZE)
    for number in range(1, FIELD_SIZE * FIELD_SIZE):
        row, col = divmod(number - 1, FIELD_SIZE)
        goal[number] = Pos(col, row)
    return goal


def state_less(a: State, b: State) -> bool:
    """Ordering used by the search: weighted cost first, then heuristic."""
    f_a = 2 * a.moves + 3 * a.heuristic
    f_b = 2 * b.moves + 3 * b.heuristic
    if f_a != f_b:
        return f_a < f_b
    return a.heuristic < b.heuristic


class State:
    """A board arrangement reached after some moves from a starting board."""

    def __init__(
        self,
        tiles: Grid,
        zero: Pos,
        goal: Sequence[Pos],
        moves: int = 0,
        parent: Optional[State] = None,
    ) -> None:
        self.tiles = tiles
        self.zero = zero
        self.goal = goal
        self.moves = moves
        self.parent = parent
        self.heuristic = 0
        self.calculate_heuristic()

    @classmethod
    def from_board(cls, board: Iterable[int], goal: Optional[Sequence[Pos]] = None) -> State:
        """Build a root state from tile numbers in row-major cell order."""
        cells = list(board)
        if sorted(cells) != list(range(FIELD_SIZE * FIELD_SIZE)):
            raise ValueError(
                f"board must hold each number from 0 to {FIELD_SIZE * FIELD_SIZE - 1} once"
            )
        tiles = tuple(
            tuple(cells[row * FIELD_SIZE:(row + 1) * FIELD_SIZE]) for row in range(FIELD_SIZE)
        )
        row, col = divmod(cells.index(0), FIELD_SIZE)
        return cls(tiles, Pos(col, row), goal if goal is not None else goal_positions())

    def child(self, direction: Direction) -> State:
        """Return the state reached by moving the blank in ``direction``."""
        if not self.can_move(direction):
            raise ValueError(f"blank at {self.zero} cannot move {direction.name}")
        x, y = self.zero.x, self.zero.y
        nx, ny = x + direction.dx, y + direction.dy
        grid = [list(row) for row in self.tiles]
        grid[y][x], grid[ny][nx] = grid[ny][nx], grid[y][x]
        new = State(tuple(tuple(row) for row in grid), Pos(nx, ny), self.goal, parent=self)
        depth = 0
        node = new
        while node.parent is not None:
            depth += 1
            node = node.parent
        new.moves = depth
        return new

    def calculate_heuristic(self) -> int:
        """Set and return the sum of Manhattan distances of all tiles to their goal."""
        total = 0
        for row, line in enumerate(self.tiles):
            for col, tile in enumerate(line):
                if tile:
                    target = self.goal[tile]
                    total += abs(row - target.y) + abs(col - target.x)
        self.heuristic = total
        return total

    def can_move(self, direction: Direction) -> bool:
        """Tell whether the blank can move in ``direction``."""
        return (
            0 <= self.zero.x + direction.dx < FIELD_SIZE
            and 0 <= self.zero.y + direction.dy < FIELD_SIZE
        )

    def is_same(self, other: State) -> bool:
        """Tell whether both states hold the same arrangement."""
        return self.heuristic == other.heuristic and self.tiles == other.tiles

    def _assign(self, other: State) -> None:
        self.tiles = other.tiles
        self.zero = other.zero
        self.goal = other.goal
        self.moves = other.moves
        self.heuristic = other.heuristic
        self.parent = other.parent

    def check_unique_and_add(self, existing: list[State], queue: PriorityQueue[State]) -> bool:
        """Queue this state unless an equal one was already reached as cheaply.

        An equal known state reached with more moves is overwritten with this
        one.  Returns True when this state was queued.
        """
        for known in existing:
            if self.is_same(known):
                if self.moves < known.moves:
                    known._assign(self)
                    queue.push(self)
                    return True
                return False
        existing.append(self)
        queue.push(self)
        return True

    def __repr__(self) -> str:
        return f"State(tiles={self.tiles}, moves={self.moves}, heuristic={self.heuristic})"