"""Automatic solving of the fifteen puzzle by a weighted best-first search."""

from __future__ import annotations

from typing import Iterable

from fifteen.pqueue import PriorityQueue
from fifteen.state import FIELD_SIZE, Direction, Grid, State, state_less


def _is_solvable(tiles: Grid) -> bool:
    """Tell whether the arrangement can reach the solved order."""
    numbers = [tile for row in tiles for tile in row if tile]
    inversions = sum(
        1
        for position, first in enumerate(numbers)
        for second in numbers[position + 1:]
        if first > second
    )
    blank_row = next(row for row, line in enumerate(tiles) if 0 in line)
    if FIELD_SIZE % 2:
        return inversions % 2 == 0
    row_from_bottom = FIELD_SIZE - blank_row
    return (inversions + row_from_bottom) % 2 == 1


def solve(board: Iterable[int]) -> list[int]:
    """Return the tile numbers to slide, in order, to sort ``board``.

    ``board`` lists tile numbers in row-major cell order with 0 for the blank.
    The search always expands the starting board once, so even a sorted
    board yields a (short) sequence of moves.
    """
    root = State.from_board(board)
    if not _is_solvable(root.tiles):
        raise ValueError("board cannot be brought into sorted order")

    queue: PriorityQueue[State] = PriorityQueue(state_less)
    existing: list[State] = []
    queue.push(root)

    while True:
        current = queue.pop()
        for direction in Direction:
            if current.can_move(direction):
                current.child(direction).check_unique_and_add(existing, queue)
        if not queue:
            raise RuntimeError("search ran out of states without reaching the goal")
        if queue.top().heuristic == 0:
            break

    moves: list[int] = []
    node = queue.top()
    while node.parent is not None:
        moves.append(node.parent.tiles[node.zero.y][node.zero.x])
        node = node.parent
    moves.reverse()
    return moves