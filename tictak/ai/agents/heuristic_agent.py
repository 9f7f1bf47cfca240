"""
Heuristic agent for tic-tac-toe.

Three skill tiers share one building block, immediate_winning_square, which
finds a square completing a line for a given mark. Asked for the computer it
is a winning move, asked for the human it is the square to block.
"""
import random
from enum import Enum

from ...core.board import CENTER, CORNERS, EDGES, WIN_PATTERNS, Mark

DEFAULT_ASSIST_PROBABILITY = 0.2


class Difficulty(Enum):
    """Opponent skill tier, fixed for the length of a game."""
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'


def immediate_winning_square(board, mark):
    """
    Find a square that completes a line for ``mark``.

    Patterns are scanned rows first, then columns, then diagonals, and the
    first hit is returned.

    Args:
        board: BoardState to inspect
        mark: Mark that would move

    Returns:
        int or None: The completing square, or None if there is none
    """
    held = board.moves_of(mark)
    for pattern in WIN_PATTERNS:
        empty = [i for i in pattern if not board.is_occupied(i)]
        if len(empty) == 1 and held.issuperset(set(pattern) - set(empty)):
            return empty[0]
    return None


def _win_or_block(board):
    win = immediate_winning_square(board, Mark.COMPUTER)
    if win is not None:
        return win
    return immediate_winning_square(board, Mark.HUMAN)


def easy_move(board, rng, assist_probability=DEFAULT_ASSIST_PROBABILITY):
    """
    Mostly random play.

    With probability ``assist_probability`` the agent first looks for a win,
    then a block. Otherwise, or when neither exists, it picks uniformly
    among the empty squares.
    """
    if rng.random() < assist_probability:
        square = _win_or_block(board)
        if square is not None:
            return square
    return rng.choice(board.available_squares())


def medium_move(board, rng):
    """Win, else block, else centre, else a random empty square."""
    square = _win_or_block(board)
    if square is not None:
        return square
    if not board.is_occupied(CENTER):
        return CENTER
    return rng.choice(board.available_squares())


def hard_move(board, rng):
    """
    Win, block and centre like medium, then corners before edges.

    Corner and edge picks are random among the empty ones. If neither
    group has room the lowest empty square is taken.
    """
    square = _win_or_block(board)
    if square is not None:
        return square
    if not board.is_occupied(CENTER):
        return CENTER

    corners = [i for i in CORNERS if not board.is_occupied(i)]
    if corners:
        return rng.choice(corners)

    edges = [i for i in EDGES if not board.is_occupied(i)]
    if edges:
        return rng.choice(edges)

    return board.available_squares()[0]


def choose_move(board, difficulty, rng=None, assist_probability=DEFAULT_ASSIST_PROBABILITY):
    """
    Pick the computer's square for the given difficulty.

    Args:
        board: BoardState with at least one empty square
        difficulty: Difficulty tier (or its string value)
        rng: random.Random used for every random draw
        assist_probability: Easy tier's chance of looking for a win or block

    Returns:
        int: Chosen empty square (0-8)

    Raises:
        ValueError: If the board is full
    """
    if not board.available_squares():
        raise ValueError("choose_move called on a full board")
    difficulty = Difficulty(difficulty)
    if rng is None:
        rng = random.Random()

    if difficulty is Difficulty.EASY:
        return easy_move(board, rng, assist_probability)
    if difficulty is Difficulty.MEDIUM:
        return medium_move(board, rng)
    return hard_move(board, rng)


class OpponentAgent:
    """
    The computer player for one difficulty tier.

    Holds the random source so the engine's moves can be reproduced from a
    seed. The move logic itself is stateless.
    """

    def __init__(self, difficulty, seed=None, rng=None,
                 assist_probability=DEFAULT_ASSIST_PROBABILITY):
        """
        Initialize the opponent.

        Args:
            difficulty (Difficulty): Skill tier
            seed (int, optional): Random seed, ignored when ``rng`` is given
            rng (random.Random, optional): Shared random source
            assist_probability (float): Easy tier's win/block chance
        """
        self.difficulty = Difficulty(difficulty)
        self.rng = rng if rng is not None else random.Random(seed)
        self.assist_probability = assist_probability

    def select_action(self, board):
        """
        Select the computer's square.

        Args:
            board: BoardState with current marks

        Returns:
            int: Square index (0-8)
        """
        return choose_move(board, self.difficulty, self.rng, self.assist_probability)
