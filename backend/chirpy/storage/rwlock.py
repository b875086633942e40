"""Readers–writer lock guarding the JSON document."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

from chirpy.services._shared.errors import StoreBusyError


class ReadWriteLock:
    """
    Writer-preferring readers–writer lock with acquisition timeouts.

    Any number of readers may hold the lock together; a writer holds it alone.
    Once a writer is waiting, new readers queue behind it so writers are never
    starved. Timeouts only bound the wait: a caller that times out holds
    nothing and has changed nothing.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @staticmethod
    def _deadline(timeout: float | None) -> float | None:
        return None if timeout is None else time.monotonic() + timeout

    @staticmethod
    def _remaining(deadline: float | None) -> float | None:
        return None if deadline is None else deadline - time.monotonic()

    def acquire_read(self, timeout: float | None = None) -> bool:
        deadline = self._deadline(timeout)
        with self._cond:
            while self._writer or self._waiting_writers:
                remaining = self._remaining(deadline)
                if remaining is not None and remaining <= 0:
                    return False
                self._cond.wait(remaining)
            self._readers += 1
            return True

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, timeout: float | None = None) -> bool:
        deadline = self._deadline(timeout)
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    remaining = self._remaining(deadline)
                    if remaining is not None and remaining <= 0:
                        return False
                    self._cond.wait(remaining)
                self._writer = True
                return True
            finally:
                self._waiting_writers -= 1
                # A writer giving up may unblock readers queued behind it.
                self._cond.notify_all()

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def write_locked(self, timeout: float | None = None) -> Iterator[None]:
        """Hold the exclusive side for the duration of the block.

        :raises StoreBusyError: If the lock is not acquired within ``timeout``.
        """
        if not self.acquire_write(timeout):
            raise StoreBusyError(timeout)
        try:
            yield
        finally:
            self.release_write()
