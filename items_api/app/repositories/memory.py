"""
In-memory item repository.

Items are kept in a dict keyed by UUID and copied on the way in and out,
so callers never share state with the store.  An ``asyncio.Lock``
serializes writes.  Useful for local runs and tests; data is lost when
the process exits.
"""

import asyncio
import logging
from typing import Callable, Dict, List
from uuid import UUID

from ..core.context import Context, ContextCancelledError
from ..core.errors import ConflictError, GenericError, NotFoundError
from ..core.identifiers import new_id
from ..schemas.item import Item

logger = logging.getLogger(__name__)

# Attempts to draw an unused id before giving up.
MAX_ID_ATTEMPTS = 5


class InMemoryItemRepository:
    """Dict-backed implementation of ``IItemRepository``."""

    def __init__(self, id_generator: Callable[[], UUID] = new_id) -> None:
        self._items: Dict[UUID, Item] = {}
        self._lock = asyncio.Lock()
        self._id_generator = id_generator

    async def get_all(self, ctx: Context) -> List[Item]:
        self._check(ctx)
        return [item.model_copy() for item in self._items.values()]

    async def get_by_id(self, ctx: Context, key: UUID) -> Item:
        self._check(ctx)
        item = self._items.get(key)
        if item is None:
            raise NotFoundError(id=key)
        return item.model_copy()

    async def insert(self, ctx: Context, item: Item) -> Item:
        self._check(ctx)
        async with self._lock:
            key = self._unused_id()
            stored = item.model_copy(update={"id": key})
            self._items[key] = stored
        logger.debug("Inserted item %s", key)
        return stored.model_copy()

    async def update(self, ctx: Context, key: UUID, item: Item) -> None:
        self._check(ctx)
        async with self._lock:
            if key not in self._items:
                raise NotFoundError(id=key)
            self._items[key] = item.model_copy(update={"id": key})
        logger.debug("Updated item %s", key)

    async def remove(self, ctx: Context, key: UUID) -> None:
        self._check(ctx)
        async with self._lock:
            if self._items.pop(key, None) is None:
                raise NotFoundError(id=key)
        logger.debug("Removed item %s", key)

    def _unused_id(self) -> UUID:
        for _ in range(MAX_ID_ATTEMPTS):
            key = self._id_generator()
            if key not in self._items:
                return key
        raise ConflictError("could not generate an unused identifier")

    @staticmethod
    def _check(ctx: Context) -> None:
        try:
            ctx.check()
        except ContextCancelledError as exc:
            raise GenericError(str(exc), cause=exc) from exc
