"""Tests for the writer-preferring readers-writer lock."""

from __future__ import annotations

import threading
import time

import pytest

from chirpy.services._shared.errors import StoreBusyError
from chirpy.storage import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()

    assert lock.acquire_read(timeout=0.1)
    assert lock.acquire_read(timeout=0.1)

    lock.release_read()
    lock.release_read()


def test_writer_excludes_readers_and_writers():
    lock = ReadWriteLock()
    assert lock.acquire_write(timeout=0.1)

    assert lock.acquire_read(timeout=0.05) is False
    assert lock.acquire_write(timeout=0.05) is False

    lock.release_write()
    assert lock.acquire_read(timeout=0.1)
    lock.release_read()


def test_reader_blocks_writer_until_released():
    lock = ReadWriteLock()
    lock.acquire_read()
    acquired = threading.Event()

    def writer():
        if lock.acquire_write(timeout=2):
            acquired.set()
            lock.release_write()

    t = threading.Thread(target=writer)
    t.start()
    assert not acquired.wait(0.1)

    lock.release_read()
    t.join(2)
    assert acquired.is_set()


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    lock.acquire_read()
    writer_started = threading.Event()

    def writer():
        writer_started.set()
        if lock.acquire_write(timeout=2):
            lock.release_write()

    t = threading.Thread(target=writer)
    t.start()
    writer_started.wait(1)
    # Give the writer time to register as waiting.
    for _ in range(50):
        if lock._waiting_writers:
            break
        time.sleep(0.01)

    assert lock.acquire_read(timeout=0.05) is False

    lock.release_read()
    t.join(2)
    assert lock.acquire_read(timeout=0.1)
    lock.release_read()


def test_timed_out_writer_unblocks_queued_readers():
    lock = ReadWriteLock()
    lock.acquire_read()

    assert lock.acquire_write(timeout=0.05) is False
    assert lock._waiting_writers == 0
    assert lock.acquire_read(timeout=0.1)

    lock.release_read()
    lock.release_read()


def test_write_locked_raises_store_busy_on_timeout():
    lock = ReadWriteLock()
    lock.acquire_read()

    with pytest.raises(StoreBusyError):
        with lock.write_locked(timeout=0.05):
            pass  # pragma: no cover

    lock.release_read()


def test_unbalanced_release_is_an_error():
    lock = ReadWriteLock()

    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
