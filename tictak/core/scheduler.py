"""
Single-shot delayed execution for the computer's turn.

The engine only needs "run this callback after ``delay`` seconds" and a way
to cancel it. Two implementations are provided:

- ManualScheduler queues callbacks until ``run_pending`` is called, which
  keeps tests and the terminal client deterministic.
- TimerScheduler hands each callback to a ``threading.Timer``.
"""
import threading
from abc import ABC, abstractmethod
from typing import Callable, List


class ScheduledCall:
    """Handle for a pending callback."""

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.done = False

    def cancel(self):
        """Prevent the callback from running. Safe to call more than once."""
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def run(self):
        if not self.pending:
            return
        self.done = True
        self.callback()


class Scheduler(ABC):
    """Interface for delayed callbacks."""

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Arrange for ``callback`` to run once after ``delay`` seconds.

        Args:
            delay: Seconds to wait
            callback: Zero-argument callable

        Returns:
            ScheduledCall: Handle whose ``cancel()`` drops the callback
        """
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """Holds callbacks until the owner runs them."""

    def __init__(self):
        self._queue: List[ScheduledCall] = []

    def schedule(self, delay, callback):
        call = ScheduledCall(delay, callback)
        self._queue.append(call)
        return call

    @property
    def pending(self) -> List[ScheduledCall]:
        return [call for call in self._queue if call.pending]

    def run_pending(self) -> int:
        """
        Run every queued callback in scheduling order, ignoring delays.

        Callbacks scheduled while running are picked up in the same pass.

        Returns:
            int: Number of callbacks that actually ran
        """
        ran = 0
        while self._queue:
            call = self._queue.pop(0)
            if call.pending:
                call.run()
                ran += 1
        return ran


class _TimerCall(ScheduledCall):

    def __init__(self, delay, callback):
        super().__init__(delay, callback)
        self.timer = threading.Timer(delay, self.run)
        self.timer.daemon = True

    def cancel(self):
        super().cancel()
        self.timer.cancel()


class TimerScheduler(Scheduler):
    """Runs callbacks on ``threading.Timer`` threads."""

    def schedule(self, delay, callback):
        call = _TimerCall(delay, callback)
        call.timer.start()
        return call
