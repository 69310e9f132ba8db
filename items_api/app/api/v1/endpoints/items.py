"""
Item endpoints for API v1.

These routes expose CRUD operations for items.  Request bodies are
validated by FastAPI before the service is called; a body that fails
validation is answered with HTTP 400 by the handler registered in
``main.py``.  Failures raised by the service are rendered with
:func:`~items_api.app.core.errors.http_status_of`:

* invalid identifier -> 400
* item not found -> 404
* anything else -> 500 (the original error text is not exposed)
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from items_api.app.api.deps import get_context, get_item_service
from items_api.app.core.context import Context
from items_api.app.core.errors import ErrorKind, http_status_of, public_message
from items_api.app.schemas.item import Item, ItemCreate
from items_api.app.services.item_service import ItemService

router = APIRouter()


def error_response(exc: Exception) -> JSONResponse:
    """Render any error raised by the service as a JSON response."""
    kind = getattr(exc, "kind", None)
    if not isinstance(kind, ErrorKind):
        kind = ErrorKind.GENERIC
    return JSONResponse(
        status_code=http_status_of(exc),
        content={"detail": public_message(exc), "kind": kind.value},
    )


@router.get("/", response_model=List[Item])
async def list_items(
    ctx: Context = Depends(get_context),
    service: ItemService = Depends(get_item_service),
):
    """Return all stored items (an empty list when there are none)."""
    try:
        return await service.get_all(ctx)
    except Exception as exc:
        return error_response(exc)


@router.get("/{item_id}", response_model=Item)
async def get_item(
    item_id: str,
    ctx: Context = Depends(get_context),
    service: ItemService = Depends(get_item_service),
):
    """Retrieve a single item by ID."""
    try:
        return await service.get_one_by_id(ctx, item_id)
    except Exception as exc:
        return error_response(exc)


@router.post("/", response_model=Item, status_code=status.HTTP_200_OK)
async def create_item(
    item_in: ItemCreate,
    ctx: Context = Depends(get_context),
    service: ItemService = Depends(get_item_service),
):
    """Create an item and return it with its assigned ID."""
    try:
        return await service.create(ctx, Item.from_input(item_in))
    except Exception as exc:
        return error_response(exc)


@router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_item(
    item_id: str,
    item_in: ItemCreate,
    ctx: Context = Depends(get_context),
    service: ItemService = Depends(get_item_service),
):
    """Replace all attributes of an existing item."""
    try:
        await service.update(ctx, item_id, Item.from_input(item_in))
    except Exception as exc:
        return error_response(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str,
    ctx: Context = Depends(get_context),
    service: ItemService = Depends(get_item_service),
):
    """Delete an item by ID."""
    try:
        await service.delete(ctx, item_id)
    except Exception as exc:
        return error_response(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
