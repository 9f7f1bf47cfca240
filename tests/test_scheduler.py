"""
Tests for the schedulers.
"""
import threading

import pytest
from tictak.core.scheduler import ManualScheduler, Scheduler, TimerScheduler


def test_base_scheduler_is_abstract():
    """Test that the interface and incomplete subclasses cannot be built."""
    with pytest.raises(TypeError):
        Scheduler()

    class Incomplete(Scheduler):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_manual_scheduler_runs_in_order():
    """Test that queued callbacks run in scheduling order."""
    scheduler = ManualScheduler()
    calls = []

    scheduler.schedule(1.0, lambda: calls.append('a'))
    scheduler.schedule(0.0, lambda: calls.append('b'))

    assert calls == []
    assert len(scheduler.pending) == 2

    assert scheduler.run_pending() == 2
    assert calls == ['a', 'b']
    assert scheduler.pending == []


def test_manual_scheduler_cancel():
    """Test that a cancelled callback never runs."""
    scheduler = ManualScheduler()
    calls = []

    handle = scheduler.schedule(0.5, lambda: calls.append('x'))
    handle.cancel()
    handle.cancel()

    assert not handle.pending
    assert scheduler.run_pending() == 0
    assert calls == []


def test_manual_scheduler_runs_once():
    """Test that a callback is not repeated on a second pass."""
    scheduler = ManualScheduler()
    calls = []

    handle = scheduler.schedule(0.0, lambda: calls.append(1))
    scheduler.run_pending()
    scheduler.run_pending()
    handle.run()

    assert calls == [1]
    assert handle.done


def test_manual_scheduler_picks_up_nested_callbacks():
    """Test that callbacks scheduled from a callback run in the same pass."""
    scheduler = ManualScheduler()
    calls = []

    def outer():
        calls.append('outer')
        scheduler.schedule(0.0, lambda: calls.append('inner'))

    scheduler.schedule(0.0, outer)

    assert scheduler.run_pending() == 2
    assert calls == ['outer', 'inner']


def test_timer_scheduler_runs_callback():
    """Test that the timer fires the callback on another thread."""
    fired = threading.Event()

    handle = TimerScheduler().schedule(0.01, fired.set)

    assert fired.wait(timeout=2.0)
    assert handle.done


def test_timer_scheduler_cancel():
    """Test that cancelling a timer prevents the callback."""
    fired = threading.Event()

    handle = TimerScheduler().schedule(0.2, fired.set)
    handle.cancel()

    assert not fired.wait(timeout=0.4)
    assert handle.cancelled
