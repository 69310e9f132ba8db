"""
Service layer for items.

``ItemService`` sits between the HTTP endpoints and the storage port.
Every operation runs the same three steps, stopping at the first
failure:

1. parse the external identifier (if any).  A malformed id is logged
   and rejected with ``InvalidIdentifierError`` before storage is
   touched;
2. call the repository;
3. on failure, log once through the logger port with an operation
   specific message and context fields, then re-raise the repository's
   exception unchanged.

The service keeps no per-call state, so one instance can serve any
number of concurrent requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List
from uuid import UUID

from ..core.context import Context
from ..core.errors import GenericError, InvalidIdentifierError
from ..core.identifiers import parse_id
from ..core.interfaces import IItemRepository, ILogger
from ..schemas.item import Item

FAILED_TO_PARSE_ID = "failed to parse identifier"
FAILED_TO_GET_ALL = "failed to get all items"
FAILED_TO_GET_BY_ID = "failed to get by id"
FAILED_TO_CREATE = "failed to create item"
FAILED_TO_UPDATE = "failed to update item"
FAILED_TO_DELETE = "failed to delete item"

ITEM_ID_KEY = "id"
ITEM_OBJ_KEY = "item"


@dataclass(frozen=True)
class ServiceDependencies:
    """Collaborators injected into :class:`ItemService`."""

    log: ILogger
    repository: IItemRepository


class ItemService:
    """CRUD orchestration for items."""

    def __init__(self, deps: ServiceDependencies) -> None:
        self._deps = deps

    @property
    def log(self) -> ILogger:
        return self._deps.log

    @property
    def repository(self) -> IItemRepository:
        return self._deps.repository

    async def get_all(self, ctx: Context) -> List[Item]:
        """Return every stored item; an empty store yields an empty list."""
        try:
            return await self.repository.get_all(ctx)
        except Exception as exc:
            self.log.error(ctx, exc, FAILED_TO_GET_ALL, {})
            raise

    async def get_one_by_id(self, ctx: Context, raw_id: str) -> Item:
        key = self._parse_id(ctx, raw_id)
        try:
            return await self.repository.get_by_id(ctx, key)
        except Exception as exc:
            self.log.error(ctx, exc, FAILED_TO_GET_BY_ID, {ITEM_ID_KEY: key})
            raise

    async def create(self, ctx: Context, item: Item) -> Item:
        """Insert ``item`` and return the stored copy with its new id."""
        try:
            created = await self.repository.insert(ctx, item)
        except Exception as exc:
            self.log.error(ctx, exc, FAILED_TO_CREATE, {ITEM_OBJ_KEY: item})
            raise
        if created is None or created.id is None:
            exc = GenericError("repository returned an item without an identifier")
            self.log.error(ctx, exc, FAILED_TO_CREATE, {ITEM_OBJ_KEY: item})
            raise exc
        return created

    async def update(self, ctx: Context, raw_id: str, item: Item) -> None:
        key = self._parse_id(ctx, raw_id)
        try:
            await self.repository.update(ctx, key, item)
        except Exception as exc:
            self.log.error(ctx, exc, FAILED_TO_UPDATE, {ITEM_ID_KEY: key, ITEM_OBJ_KEY: item})
            raise

    async def delete(self, ctx: Context, raw_id: str) -> None:
        key = self._parse_id(ctx, raw_id)
        try:
            await self.repository.remove(ctx, key)
        except Exception as exc:
            self.log.error(ctx, exc, FAILED_TO_DELETE, {ITEM_ID_KEY: key})
            raise

    def _parse_id(self, ctx: Context, raw_id: str) -> UUID:
        try:
            return parse_id(raw_id)
        except InvalidIdentifierError as exc:
            self.log.error(ctx, exc, FAILED_TO_PARSE_ID, {ITEM_ID_KEY: raw_id})
            raise
