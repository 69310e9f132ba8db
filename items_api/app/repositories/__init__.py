"""Storage adapters implementing ``IItemRepository``."""

from .memory import InMemoryItemRepository  # noqa: F401
from .sqlite import SqliteItemRepository  # noqa: F401
