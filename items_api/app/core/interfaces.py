"""Protocol interfaces for the service layer's collaborators.

The service depends on these ports only.  Storage and logging adapters
(and the test doubles) implement them and are injected through
:class:`~items_api.app.services.item_service.ServiceDependencies`.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, runtime_checkable
from uuid import UUID

from .context import Context
from ..schemas.item import Item


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------

@runtime_checkable
class ILogger(Protocol):
    """Structured, leveled logging sink.

    Implementations must never raise back into the caller.
    """

    def info(self, ctx: Context, msg: str) -> None: ...
    def warn(self, ctx: Context, msg: str) -> None: ...
    def debug(self, ctx: Context, msg: str) -> None: ...

    def error(
        self,
        ctx: Context,
        err: Optional[BaseException],
        msg: str,
        fields: Optional[Mapping[str, Any]] = None,
    ) -> None: ...


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

@runtime_checkable
class IItemRepository(Protocol):
    """Storage port for items.

    All methods must be safe to call concurrently.  Missing rows raise
    ``NotFoundError``; any other failure raises ``GenericError`` (or a
    subclass).
    """

    async def get_all(self, ctx: Context) -> List[Item]: ...
    async def get_by_id(self, ctx: Context, key: UUID) -> Item: ...
    async def insert(self, ctx: Context, item: Item) -> Item: ...
    async def update(self, ctx: Context, key: UUID, item: Item) -> None: ...
    async def remove(self, ctx: Context, key: UUID) -> None: ...
