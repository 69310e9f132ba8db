"""
Per-request context passed explicitly through every port call.

A :class:`Context` carries a request id (used to correlate log records),
an optional absolute deadline and a cancellation flag.  The service
layer never inspects it; it only forwards it to the repository and the
logger, which decide what cancellation means for them.
"""

from __future__ import annotations

import time
import uuid
from typing import Optional


class ContextCancelledError(Exception):
    """Raised by :meth:`Context.check` when the context is no longer live."""

    def __init__(self, request_id: str, reason: str) -> None:
        super().__init__(f"context {request_id} {reason}")
        self.request_id = request_id
        self.reason = reason


class Context:
    """Cancellable request context with an optional deadline."""

    __slots__ = ("request_id", "deadline", "_cancelled")

    def __init__(self, request_id: Optional[str] = None, deadline: Optional[float] = None) -> None:
        self.request_id = request_id or uuid.uuid4().hex
        # Absolute value of ``time.monotonic()``.
        self.deadline = deadline
        self._cancelled = False

    @classmethod
    def background(cls) -> "Context":
        """Return a context that is never cancelled and has no deadline."""
        return cls(request_id="background")

    @classmethod
    def with_timeout(cls, seconds: float, request_id: Optional[str] = None) -> "Context":
        return cls(request_id=request_id, deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def err(self) -> Optional[ContextCancelledError]:
        """Return the reason the context is done, or ``None`` while it is live."""
        if self._cancelled:
            return ContextCancelledError(self.request_id, "cancelled")
        if self.expired:
            return ContextCancelledError(self.request_id, "deadline exceeded")
        return None

    def check(self) -> None:
        """Raise :class:`ContextCancelledError` if the context is done."""
        error = self.err()
        if error is not None:
            raise error

    def __repr__(self) -> str:
        return f"Context(request_id={self.request_id!r}, deadline={self.deadline!r})"
