"""
Game engine for tic-tac-toe against the computer.
"""
import random
import threading
from enum import Enum

from .board import BoardState, Mark
from .config import EngineConfig
from .errors import IllegalStateTransition, InvalidMove
from .events import GameEvent
from .scheduler import TimerScheduler
from ..ai.agents.heuristic_agent import Difficulty, OpponentAgent


class EngineState(Enum):
    """Whose turn it is, or why nobody can move."""
    AWAITING_DIFFICULTY = 'awaiting_difficulty'
    HUMAN_TURN = 'human_turn'
    COMPUTER_THINKING = 'computer_thinking'
    GAME_OVER = 'game_over'


class GameOutcome(Enum):
    """Result of a position, always derived from the board."""
    IN_PROGRESS = 'in_progress'
    HUMAN_WIN = 'human_win'
    COMPUTER_WIN = 'computer_win'
    DRAW = 'draw'


_WIN_OUTCOME = {Mark.HUMAN: GameOutcome.HUMAN_WIN, Mark.COMPUTER: GameOutcome.COMPUTER_WIN}
_WIN_EVENT = {Mark.HUMAN: GameEvent.HUMAN_WON, Mark.COMPUTER: GameEvent.COMPUTER_WON}
_MOVE_EVENT = {Mark.HUMAN: GameEvent.HUMAN_MOVED, Mark.COMPUTER: GameEvent.COMPUTER_MOVED}


def evaluate_outcome(board, last_mover):
    """
    Work out the outcome after ``last_mover`` placed a mark.

    Only the mark that just moved can have won, and it is checked before the
    full-board test so a winning ninth move is not reported as a draw.

    Args:
        board: BoardState after the move
        last_mover: Mark that just moved

    Returns:
        GameOutcome: Result of the position
    """
    if board.has_won(last_mover):
        return _WIN_OUTCOME[last_mover]
    if board.is_full():
        return GameOutcome.DRAW
    return GameOutcome.IN_PROGRESS


class GameEngine:
    """
    Manages a human vs computer game session.

    Owns the board and the difficulty for one game, decides whose turn it
    is, and schedules the computer's reply after a short thinking delay.
    Calls that are not allowed (occupied square, wrong turn, difficulty not
    chosen) are ignored and return False, like tapping a dead square.
    """

    def __init__(self, config=None, scheduler=None, rng=None, verbose=False):
        """
        Initialize a new engine waiting for a difficulty.

        Args:
            config (EngineConfig, optional): Delay and opponent settings
            scheduler (Scheduler, optional): Runs the delayed computer turn;
                defaults to a TimerScheduler
            rng (random.Random, optional): Opponent random source; seeded
                from ``config.seed`` when omitted
            verbose (bool): Whether to print transitions and ignored calls
        """
        self.config = config if config is not None else EngineConfig()
        self.scheduler = scheduler if scheduler is not None else TimerScheduler()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.verbose = verbose

        self._board = BoardState()
        self._state = EngineState.AWAITING_DIFFICULTY
        self._difficulty = None
        self._agent = None
        self._pending = None
        self._generation = 0
        self._listeners = []
        self._lock = threading.RLock()
        self.events = []

    # Read-only view

    @property
    def state(self):
        """Current EngineState."""
        return self._state

    @property
    def difficulty(self):
        """Difficulty of the current game, or None before one is chosen."""
        return self._difficulty

    @property
    def board(self):
        """A copy of the board; changing it does not affect the game."""
        with self._lock:
            return self._board.copy()

    @property
    def outcome(self):
        """
        Current result, derived from the board on every read.

        Returns:
            GameOutcome: IN_PROGRESS until a line is complete or the board fills
        """
        with self._lock:
            winner = self._board.winner()
            if winner is not None:
                return _WIN_OUTCOME[winner]
            if self._board.is_full():
                return GameOutcome.DRAW
            return GameOutcome.IN_PROGRESS

    @property
    def is_board_disabled(self):
        """True whenever a tap on the board would be ignored."""
        return self._state is not EngineState.HUMAN_TURN

    def snapshot(self):
        """Return the 9 squares as a tuple of Mark or None."""
        with self._lock:
            return tuple(move.mark if move else None for move in self._board.moves)

    # Notifications

    def add_listener(self, listener):
        """
        Register a callable that receives every GameEvent.

        Listeners are called after the transition that produced the event
        has finished, so they may call back into the engine. An exception
        raised by a listener is printed and does not affect the game.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener):
        self._listeners.remove(listener)

    def _log(self, message):
        if self.verbose:
            print(message)

    # Transitions

    def start_new_game(self):
        """
        Abandon the current game and wait for a difficulty.

        Any scheduled computer turn is cancelled first. Always succeeds.

        Returns:
            bool: True
        """
        with self._lock:
            self._cancel_pending()
            self._reset_board()
            self._difficulty = None
            self._agent = None
            self._state = EngineState.AWAITING_DIFFICULTY
            self._log("New game: waiting for difficulty")
            return True

    def select_difficulty(self, difficulty):
        """
        Fix the difficulty and start play with the human to move.

        Allowed before the first game and after a game has ended (rematch).

        Args:
            difficulty (Difficulty or str): Skill tier for this game

        Returns:
            bool: True if a game started, False if the call was ignored
        """
        with self._lock:
            try:
                self._select_difficulty(Difficulty(difficulty))
            except IllegalStateTransition as e:
                self._log(f"Ignored: {e}")
                return False
            return True

    def _select_difficulty(self, difficulty):
        if self._state not in (EngineState.AWAITING_DIFFICULTY, EngineState.GAME_OVER):
            raise IllegalStateTransition("select difficulty", self._state)

        self._cancel_pending()
        self._reset_board()
        self._difficulty = difficulty
        self._agent = OpponentAgent(
            difficulty,
            rng=self.rng,
            assist_probability=self.config.easy_assist_probability,
        )
        self._state = EngineState.HUMAN_TURN
        self._log(f"Difficulty {difficulty.value} selected, human to move")

    def submit_human_move(self, index):
        """
        Play the human's mark on a square.

        Args:
            index (int): Square index (0-8)

        Returns:
            bool: True if the move was played, False if it was ignored
        """
        with self._lock:
            try:
                events = self._submit_human_move(index)
            except (InvalidMove, IllegalStateTransition) as e:
                self._log(f"Ignored: {e}")
                return False
            self._notify(events)
            return True

    def _submit_human_move(self, index):
        if self._state is not EngineState.HUMAN_TURN:
            raise IllegalStateTransition("submit a human move", self._state)

        events = self._play(Mark.HUMAN, index)

        if self._state is not EngineState.GAME_OVER:
            self._state = EngineState.COMPUTER_THINKING
            generation = self._generation
            self._pending = self.scheduler.schedule(
                self.config.think_delay,
                lambda: self._computer_turn(generation),
            )
        return events

    def _computer_turn(self, generation):
        with self._lock:
            # A reset since scheduling makes this callback stale
            if generation != self._generation or self._state is not EngineState.COMPUTER_THINKING:
                self._log("Discarded stale computer turn")
                return
            self._pending = None

            index = self._agent.select_action(self._board)
            events = self._play(Mark.COMPUTER, index)

            if self._state is not EngineState.GAME_OVER:
                self._state = EngineState.HUMAN_TURN
            self._notify(events)

    def _play(self, mark, index):
        """
        Place a mark and move to GAME_OVER if it ends the game.

        Events are recorded in ``self.events`` but not sent to listeners;
        the caller announces them once the transition is complete.

        Returns:
            list: GameEvents produced by the move
        """
        self._board.place(mark, index)
        if mark is Mark.HUMAN:
            self._log(f"Human plays {index}")
        else:
            self._log(f"Computer ({self._difficulty.value}) plays {index}")
        events = [_MOVE_EVENT[mark]]

        outcome = evaluate_outcome(self._board, mark)
        if outcome is not GameOutcome.IN_PROGRESS:
            self._state = EngineState.GAME_OVER
            events.append(_WIN_EVENT[mark] if outcome is not GameOutcome.DRAW else GameEvent.DRAW)
            self._log(f"Game over: {outcome.value}")
            if self.verbose:
                print(self._board.render())

        self.events.extend(events)
        return events

    def _notify(self, events):
        generation = self._generation
        for event in events:
            for listener in list(self._listeners):
                # A listener that started a new game makes the rest of the batch stale
                if generation != self._generation:
                    return
                try:
                    listener(event)
                except Exception as e:
                    print(f"Listener {listener!r} failed on {event.name}: {e}")

    def _cancel_pending(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _reset_board(self):
        # Bumping the generation invalidates any callback already in flight
        self._generation += 1
        self._board.reset()
        self.events = []
