"""
Exceptions raised by the tic-tac-toe core.
"""


class TictakError(Exception):
    """Base class for game errors."""


class InvalidMove(TictakError):
    """A square index outside 0-8, or a square that is already taken."""

    def __init__(self, index, reason):
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid move at {index!r}: {reason}")


class IllegalStateTransition(TictakError):
    """An engine operation requested from a state that does not allow it."""

    def __init__(self, operation, state):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while engine is {state.name}")
