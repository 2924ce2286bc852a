"""Trailing debounce for search-as-you-type callers."""

from __future__ import annotations

import threading
from typing import Any, Callable

DEFAULT_DELAY_MS = 300


class Debounced:
    """
    Wraps ``fn`` so it runs ``delay_ms`` after the last call.
    Each call cancels the pending timer and starts a new one; only the
    arguments of the most recent call are used. No leading-edge call.
    """

    def __init__(self, fn: Callable[..., Any], delay_ms: float = DEFAULT_DELAY_MS) -> None:
        self.fn = fn
        self.delay_ms = delay_ms
        self._lock = threading.Lock()
        # held while fn runs; at most one execution at a time
        self._run_lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.delay_ms / 1000, self._fire, args=(args, kwargs))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, args: tuple, kwargs: dict) -> None:
        with self._run_lock:
            with self._lock:
                if self._timer is not threading.current_thread():
                    # superseded while waiting for the previous run
                    return
                self._timer = None
            self.fn(*args, **kwargs)

    @property
    def pending(self) -> bool:
        """True while a call is waiting to fire."""
        with self._lock:
            return self._timer is not None


def debounce(fn: Callable[..., Any], delay_ms: float = DEFAULT_DELAY_MS) -> Debounced:
    """Return a debounced wrapper around ``fn``."""
    return Debounced(fn, delay_ms)
