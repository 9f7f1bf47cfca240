"""
Board implementation for tic-tac-toe.
"""
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import InvalidMove


class Mark(Enum):
    """The two sides of the game, valued by their board encoding."""
    HUMAN = 1
    COMPUTER = -1

    def opponent(self) -> "Mark":
        """Get the other mark."""
        return Mark.COMPUTER if self is Mark.HUMAN else Mark.HUMAN


@dataclass(frozen=True)
class Move:
    """A mark placed on a square."""
    mark: Mark
    index: int


# Rows, then columns, then the two diagonals. Order matters for
# immediate_winning_square, which returns the first hit.
WIN_PATTERNS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)

_SYMBOLS = {0: '.', Mark.HUMAN.value: 'X', Mark.COMPUTER.value: 'O'}


class BoardState:
    """
    Represents the 3x3 board, squares indexed 0-8 row-major.

    Board state representation:
    - 0: empty square
    - 1: human mark
    - -1: computer mark
    """

    def __init__(self):
        """Initialize an empty board."""
        self.size = 9
        self.state = np.zeros(self.size, dtype=np.int8)

    @classmethod
    def from_marks(cls, marks):
        """
        Build a board from a sequence of 9 entries.

        Args:
            marks: Iterable of Mark or None, one per square in index order

        Returns:
            BoardState: A new board holding those marks
        """
        marks = list(marks)
        if len(marks) != 9:
            raise ValueError(f"Expected 9 squares, got {len(marks)}")
        board = cls()
        for index, mark in enumerate(marks):
            if mark is not None:
                board.place(mark, index)
        return board

    def _check_index(self, index):
        # bool is an int subclass but never a square
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise InvalidMove(index, "index must be an integer")
        if not 0 <= index < self.size:
            raise InvalidMove(index, "index out of range 0-8")

    def is_occupied(self, index):
        """
        Check whether a square holds a mark.

        Args:
            index (int): Square index (0-8)

        Returns:
            bool: True if some move exists at that index
        """
        self._check_index(index)
        return bool(self.state[index] != 0)

    def available_squares(self):
        """
        Get all empty squares.

        Returns:
            list: Empty square indices in ascending order
        """
        return [int(i) for i in np.flatnonzero(self.state == 0)]

    def moves_of(self, mark):
        """Return the set of squares held by ``mark``."""
        return {int(i) for i in np.flatnonzero(self.state == mark.value)}

    @property
    def moves(self):
        """The 9 slots as Move or None, in index order."""
        return [
            Move(Mark(int(value)), index) if value != 0 else None
            for index, value in enumerate(self.state)
        ]

    def place(self, mark, index):
        """
        Record a move on the board.

        Args:
            mark (Mark): Who is moving
            index (int): Square index (0-8)

        Raises:
            InvalidMove: If the index is out of range or already occupied
        """
        if not isinstance(mark, Mark):
            raise TypeError(f"Expected a Mark, got {mark!r}")
        if self.is_occupied(index):
            raise InvalidMove(index, "square already occupied")
        self.state[index] = mark.value

    def has_won(self, mark):
        """
        Check whether ``mark`` holds every square of some win pattern.

        Args:
            mark (Mark): Mark to check

        Returns:
            bool: True if at least one pattern is complete for that mark
        """
        positions = self.moves_of(mark)
        return any(positions.issuperset(pattern) for pattern in WIN_PATTERNS)

    def winner(self):
        """
        Get the mark that has completed a line, if any.

        Both marks completing a line cannot happen when turns alternate and
        play stops on the first win, so it is not checked here.

        Returns:
            Mark or None: The winning mark, or None if nobody has won
        """
        for mark in Mark:
            if self.has_won(mark):
                return mark
        return None

    def is_full(self):
        """True when all 9 squares are taken."""
        return bool(np.count_nonzero(self.state) == self.size)

    def reset(self):
        """Clear every square."""
        self.state[:] = 0

    def copy(self):
        """Create an independent copy of the board."""
        board = BoardState()
        board.state = self.state.copy()
        return board

    def render(self):
        """
        Draw the board as ASCII.

        Returns:
            str: Three rows of X (human), O (computer) and . (empty)
        """
        rows = []
        for start in range(0, self.size, 3):
            rows.append(' '.join(_SYMBOLS[int(v)] for v in self.state[start:start + 3]))
        return '\n'.join(rows)

    def __repr__(self):
        return f"BoardState({self.state.tolist()})"
