import threading

import pytest
from unittest.mock import MagicMock
from PyQt6.QtCore import QObject, pyqtSignal

from hello_threads.delay_worker import DelayedMessageWorker


class SignalListener(QObject):
    """Helper class to capture signals and their arguments."""
    def __init__(self, signal: pyqtSignal):
        super().__init__()
        self.signal = signal
        self.received = []
        self.signal.connect(self.on_signal)

    def on_signal(self, *args):
        self.received.append(args)

    @property
    def call_count(self):
        return len(self.received)

    @property
    def last_call_args(self):
        return self.received[-1] if self.received else None


@pytest.fixture
def producer():
    return MagicMock(return_value="Hello, from threads!")


def test_worker_success_direct_call(producer):
    """
    Calls run() directly with no delay.
    Verifies that result_ready is emitted with the produced message.
    """
    worker = DelayedMessageWorker(delay_ms=0, producer=producer, parent=None)

    result_listener = SignalListener(worker.result_ready)
    error_listener = SignalListener(worker.error_occurred)

    worker.run()

    assert result_listener.call_count == 1
    assert result_listener.last_call_args[0] == "Hello, from threads!"
    assert error_listener.call_count == 0
    producer.assert_called_once_with()


def test_worker_failure_direct_call(producer):
    """
    Verifies that error_occurred carries the exception type and message.
    """
    producer.side_effect = RuntimeError("producer exploded")
    worker = DelayedMessageWorker(delay_ms=0, producer=producer, parent=None)

    result_listener = SignalListener(worker.result_ready)
    error_listener = SignalListener(worker.error_occurred)

    worker.run()

    assert result_listener.call_count == 0
    assert error_listener.call_count == 1
    assert error_listener.last_call_args[0] == "RuntimeError: producer exploded"


def test_cancelled_worker_emits_nothing(producer):
    worker = DelayedMessageWorker(delay_ms=0, producer=producer, parent=None)
    result_listener = SignalListener(worker.result_ready)
    error_listener = SignalListener(worker.error_occurred)

    worker.cancel()
    worker.run()

    assert worker.is_cancelled()
    assert result_listener.call_count == 0
    assert error_listener.call_count == 0
    producer.assert_not_called()


@pytest.mark.parametrize("delay_ms, producer_arg", [(-1, lambda: "x"), (10, None)])
def test_invalid_arguments(delay_ms, producer_arg):
    with pytest.raises(ValueError):
        DelayedMessageWorker(delay_ms=delay_ms, producer=producer_arg)


def test_worker_runs_on_background_thread(qtbot):
    seen_threads = []

    def produce():
        seen_threads.append(threading.current_thread())
        return "from the worker"

    worker = DelayedMessageWorker(delay_ms=20, producer=produce)
    with qtbot.waitSignal(worker.result_ready, timeout=2000) as blocker:
        worker.start()

    assert blocker.args == ["from the worker"]
    assert worker.wait(2000)

    assert seen_threads and seen_threads[0] is not threading.main_thread()


def test_cancel_interrupts_the_delay(qtbot, producer):
    worker = DelayedMessageWorker(delay_ms=60_000, producer=producer)
    result_listener = SignalListener(worker.result_ready)

    worker.start()
    qtbot.waitUntil(worker.isRunning, timeout=1000)
    worker.cancel()

    # Returns long before the 60 s delay
    assert worker.wait(2000)
    qtbot.wait(20)
    assert result_listener.call_count == 0
    producer.assert_not_called()
