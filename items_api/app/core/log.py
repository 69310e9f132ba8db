"""
Logger port adapter backed by the standard ``logging`` module.

``AppLogger`` prefixes each record with the request id of the context
and renders structured fields as ``key=value`` pairs, e.g.::

    [req=3f2a...] failed to get by id: item not found | id=7c9e...
"""

import logging
from typing import Any, Mapping, Optional

from .context import Context


class AppLogger:
    """Implementation of :class:`~items_api.app.core.interfaces.ILogger`.

    Debug records are dropped unless ``debug=True``.  Errors raised while
    emitting a record are swallowed so logging never fails an operation.
    """

    def __init__(self, name: str = "items_api", debug: bool = False) -> None:
        self._logger = logging.getLogger(name)
        self.debug_enabled = debug

    def info(self, ctx: Context, msg: str) -> None:
        self._emit(logging.INFO, ctx, msg)

    def warn(self, ctx: Context, msg: str) -> None:
        self._emit(logging.WARNING, ctx, msg)

    def debug(self, ctx: Context, msg: str) -> None:
        if self.debug_enabled:
            self._emit(logging.DEBUG, ctx, msg)

    def error(
        self,
        ctx: Context,
        err: Optional[BaseException],
        msg: str,
        fields: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._emit(logging.ERROR, ctx, msg, fields, err)

    def _emit(
        self,
        level: int,
        ctx: Optional[Context],
        msg: str,
        fields: Optional[Mapping[str, Any]] = None,
        err: Optional[BaseException] = None,
    ) -> None:
        try:
            if err is not None:
                msg = f"{msg}: {err}"
            request_id = getattr(ctx, "request_id", None) or "-"
            line = f"[req={request_id}] {msg}"
            if fields:
                line += " | " + " ".join(f"{k}={v}" for k, v in fields.items())
            self._logger.log(level, line, extra={"request_id": request_id, "fields": dict(fields or {})})
        except Exception:
            # Logging failures must not propagate into the caller.
            pass
