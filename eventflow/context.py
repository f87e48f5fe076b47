# SPDX-License-Identifier: Apache-2.0
"""Cancellation and deadline handle passed to every action."""
from __future__ import annotations

import threading
import time
from typing import Optional


class Context:
    """Carries an optional deadline and a cancellation flag.

    The dispatcher stores the context with the job snapshot so retries run
    under the same scope as the original dispatch. Nothing in the engine
    checks it; actions decide whether to honour it.
    """

    def __init__(self, deadline: Optional[float] = None):
        self._deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> "Context":
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "Context":
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> Optional[float]:
        """Absolute deadline on the ``time.monotonic`` clock, if any."""
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired

    def remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def __repr__(self) -> str:
        return f"Context(deadline={self._deadline!r}, cancelled={self.cancelled})"
