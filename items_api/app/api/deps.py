"""
FastAPI dependencies shared by the v1 endpoints.

The service instance is created once by ``create_app`` and stored on
``app.state``; each request gets its own :class:`Context` whose request
id is taken from the ``X-Request-ID`` header when the client sends one.
"""

from fastapi import Request

from ..core.context import Context
from ..services.item_service import ItemService

REQUEST_ID_HEADER = "X-Request-ID"


def get_item_service(request: Request) -> ItemService:
    return request.app.state.item_service


def get_context(request: Request) -> Context:
    return Context(request_id=request.headers.get(REQUEST_ID_HEADER))
