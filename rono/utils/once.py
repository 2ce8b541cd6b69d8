#!/usr/bin/env python3
import threading
from typing import Callable


class Once:
    """Run an initializer at most once per process, safely across threads"""

    def __init__(self, name: str):
        self.name = name
        self._done = False
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._done

    def run(self, initializer: Callable[[], None]) -> bool:
        """Call initializer if it has not run yet. Returns True if this call ran it."""
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            initializer()
            # A raising initializer leaves the guard open for the next caller
            self._done = True
            return True

    def __repr__(self) -> str:
        return f"Once({self.name!r}, done={self._done})"
