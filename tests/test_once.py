"""
Tests for the one-time initialization guard
"""

import threading
import time

import pytest

from rono.utils.once import Once


def test_runs_initializer_once():
    calls = []
    guard = Once("test")

    assert guard.run(lambda: calls.append(1)) is True
    assert guard.run(lambda: calls.append(2)) is False
    assert calls == [1]
    assert guard.done


def test_concurrent_first_use_runs_once():
    calls = []
    guard = Once("race")
    barrier = threading.Barrier(8)

    def init():
        time.sleep(0.05)
        calls.append(threading.get_ident())

    def worker():
        barrier.wait()
        guard.run(init)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1


def test_failed_initializer_can_be_retried():
    guard = Once("flaky")

    def boom():
        raise RuntimeError("not yet")

    with pytest.raises(RuntimeError):
        guard.run(boom)
    assert not guard.done

    assert guard.run(lambda: None) is True
    assert guard.done
