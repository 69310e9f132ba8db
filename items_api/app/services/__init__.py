"""
Service layer abstraction.

Services encapsulate the orchestration between the HTTP endpoints and
the storage port, so storage adapters can be swapped without changing
API handlers.
"""

from .item_service import ItemService, ServiceDependencies  # noqa: F401
