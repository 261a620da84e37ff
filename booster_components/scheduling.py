# deferred callbacks for the opening -> revealing transition.
import heapq
import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> None: ...


class ThreadingScheduler(Scheduler):
    """Runs each callback once on a daemon `threading.Timer`."""

    def __init__(self):
        self._timers: List[threading.Timer] = []

    def call_later(self, delay, callback):
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        self._timers = [t for t in self._timers if t.is_alive()]
        self._timers.append(timer)
        timer.start()

    def join(self, timeout: float = None):
        """Wait for pending timers so a caller can tell the opening transition has run."""
        for timer in list(self._timers):
            timer.join(timeout)


@dataclass(order=True)
class _Pending:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler(Scheduler):
    """Virtual clock. Nothing fires until `advance` moves time past the due point."""

    def __init__(self):
        self.now = 0.0
        self._queue: List[_Pending] = []
        self._counter = itertools.count()

    def call_later(self, delay, callback):
        heapq.heappush(self._queue, _Pending(self.now + delay, next(self._counter), callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every callback that came due.

        :return: number of callbacks fired
        """
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            item = heapq.heappop(self._queue)
            self.now = item.due
            item.callback()
            fired += 1
        self.now = target
        return fired
