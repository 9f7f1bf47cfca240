"""
Random agent for tic-tac-toe.
"""
import random


class RandomAgent:
    """
    An agent that plays random legal moves.

    Used as a stand-in human opponent when measuring the difficulty tiers.
    """

    def __init__(self, seed=None):
        """
        Initialize the random agent.

        Args:
            seed (int, optional): Random seed for reproducible behavior
        """
        self.rng = random.Random(seed)

    def select_action(self, board):
        """
        Select a random empty square.

        Args:
            board: BoardState with current marks

        Returns:
            int: Square index, or None if the board is full
        """
        available = board.available_squares()

        if not available:
            return None

        return self.rng.choice(available)
