"""Test doubles and sample data shared by the Items API tests."""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Tuple

from items_api.app.schemas.item import Item

SAMPLE_ID = uuid.UUID("7c9e6679-7425-40de-944b-e07fc1f90ae7")
INVALID_ID_STRING = "not-a-valid-id"


def new_item_without_id(name: str = "widget") -> Item:
    return Item(name=name, description="a sample item", quantity=3)


def new_item_with_id(key: uuid.UUID = SAMPLE_ID, name: str = "widget") -> Item:
    return Item(id=key, name=name, description="a sample item", quantity=3)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class RecordingLogger:
    """ILogger double that keeps every call for later assertions."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, tuple]] = []

    def info(self, ctx, msg):
        self.calls.append(("info", (ctx, msg)))

    def warn(self, ctx, msg):
        self.calls.append(("warn", (ctx, msg)))

    def debug(self, ctx, msg):
        self.calls.append(("debug", (ctx, msg)))

    def error(self, ctx, err, msg, fields=None):
        self.calls.append(("error", (ctx, err, msg, dict(fields or {}))))

    @property
    def errors(self) -> List[tuple]:
        return [args for level, args in self.calls if level == "error"]


class StubRepository:
    """IItemRepository double returning canned results.

    ``results`` maps a method name to the value it returns; ``failures``
    maps a method name to the exception it raises.  Every call is
    recorded in ``calls`` as ``(method, args)``.
    """

    def __init__(self) -> None:
        self.results: Dict[str, Any] = {}
        self.failures: Dict[str, BaseException] = {}
        self.calls: List[Tuple[str, tuple]] = []

    async def _call(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        if method in self.failures:
            raise self.failures[method]
        return self.results.get(method)

    async def get_all(self, ctx):
        return await self._call("get_all", ctx)

    async def get_by_id(self, ctx, key):
        return await self._call("get_by_id", ctx, key)

    async def insert(self, ctx, item):
        return await self._call("insert", ctx, item)

    async def update(self, ctx, key, item):
        return await self._call("update", ctx, key, item)

    async def remove(self, ctx, key):
        return await self._call("remove", ctx, key)


class UntouchableRepository:
    """IItemRepository double that fails the test if storage is reached."""

    def _fail(self, *args: Any, **kwargs: Any) -> Optional[Any]:
        raise AssertionError("repository must not be called")

    async def get_all(self, ctx):
        self._fail()

    async def get_by_id(self, ctx, key):
        self._fail()

    async def insert(self, ctx, item):
        self._fail()

    async def update(self, ctx, key, item):
        self._fail()

    async def remove(self, ctx, key):
        self._fail()
