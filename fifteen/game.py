"""Game flow of the fifteen puzzle: shuffling, playing, solving and retrying."""

from __future__ import annotations

import random
from typing import Optional

from fifteen.field import Field
from fifteen.solver import solve
from fifteen.state import FIELD_SIZE


class Game:
    """One playing session with a move counter and an automatic solver."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.field = Field()
        self.moves_num = 0
        self.status = ""
        self.started = False
        self.auto_available = False
        self.locked = False
        self.solved = False
        self._show_moves()

    def _show_moves(self) -> None:
        self.status = f"Moves: {self.moves_num}"

    def _show_remaining(self, remaining: int) -> None:
        self.status = f"Moves left:\n{remaining}/{self.moves_num}"

    @property
    def result_message(self) -> str:
        """Text shown once the puzzle is solved."""
        return f"You solved puzzle!\nNumber of moves:  {self.moves_num}"

    def start(self) -> None:
        """Shuffle the field and make the automatic solver available."""
        if self.started:
            raise RuntimeError("game already started")
        self.field.shuffle(self._rng)
        self.started = True
        self.auto_available = True

    def click(self, number: int) -> bool:
        """Slide tile ``number`` if it touches the blank; return whether it moved."""
        if not self.started or self.locked or self.solved:
            return False
        if not self.field.move(number):
            return False
        self.moves_num += 1
        self._show_moves()
        if self.field.is_sorted():
            self.solved = True
        return True

    def auto_solve(self) -> list[int]:
        """Solve the field, play every move and return the tiles moved."""
        if not self.auto_available:
            raise RuntimeError("automatic solve is not available")
        self.auto_available = False
        self.locked = True
        self.status = "Solving..."
        moves = solve(self.field.board())
        self.moves_num = len(moves)
        for done, number in enumerate(moves, start=1):
            self.field.move(number)
            self._show_remaining(len(moves) - done)
        self._show_remaining(0)
        self.solved = True
        return moves

    def retry(self) -> None:
        """Reset the counter and controls for a new round after solving."""
        if not self.solved:
            raise RuntimeError("puzzle is not solved yet")
        self.moves_num = 0
        self._show_moves()
        self.started = False
        self.auto_available = False
        self.locked = False
        self.solved = False

    def render(self) -> str:
        """Text picture of the field followed by the counter."""
        board = self.field.board()
        rows = [
            " ".join(f"{n:>2}" if n else " ." for n in board[start:start + FIELD_SIZE])
            for start in range(0, len(board), FIELD_SIZE)
        ]
        return "\n".join(rows + [self.status])