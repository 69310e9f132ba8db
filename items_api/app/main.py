"""
Main entrypoint for the Items API.

This module assembles the FastAPI application: it sets up logging,
builds the storage adapter and the item service, registers the request
validation handler and includes the versioned routers.  The module-level ``app``
can be served with uvicorn::

    uvicorn items_api.app.main:app --reload

Tests call :func:`create_app` directly and pass their own service or
repository.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import get_database_path
from .core.errors import ErrorKind
from .core.interfaces import IItemRepository, ILogger
from .core.log import AppLogger
from .core.logging_config import setup_logging
from .repositories.memory import InMemoryItemRepository
from .repositories.sqlite import SqliteItemRepository
from .services.item_service import ItemService, ServiceDependencies


def build_repository(config: Settings) -> IItemRepository:
    """Instantiate the storage adapter selected by ``STORAGE_BACKEND``."""
    if config.storage_backend == "sqlite":
        return SqliteItemRepository(get_database_path(config.database_url))
    if config.storage_backend == "memory":
        return InMemoryItemRepository()
    raise ValueError(f"Unknown storage backend: {config.storage_backend!r}")


def register_error_handlers(app: FastAPI) -> None:
    """Install app-level handlers.

    Only body binding failures are handled here.  Errors raised by the
    service are rendered by the routes themselves through
    ``endpoints.items.error_response``.
    """
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Body binding failures are client errors, not 422s.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "validation failed",
                "kind": ErrorKind.VALIDATION_FAILED.value,
                "errors": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()
                ],
            },
        )


def create_app(
    service: Optional[ItemService] = None,
    *,
    repository: Optional[IItemRepository] = None,
    logger: Optional[ILogger] = None,
    config: Settings = settings,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[ItemService]
        Fully built service to use.  When omitted, one is built from
        ``repository`` and ``logger``.
    repository : Optional[IItemRepository]
        Storage adapter.  Defaults to the backend named by ``config``.
    logger : Optional[ILogger]
        Logger port for the service.  Defaults to :class:`AppLogger`.
    config : Settings
        Settings to use instead of the module-level ``settings``.
    """
    setup_logging(config.log_level, config.log_file, debug=config.debug)

    app = FastAPI(title=config.project_name, version=config.api_version)

    if service is None:
        backend = config.storage_backend if repository is None else "custom"
        service = ItemService(
            ServiceDependencies(
                log=logger or AppLogger(debug=config.debug),
                repository=repository or build_repository(config),
            )
        )
    else:
        backend = "custom"
    app.state.item_service = service
    app.state.storage_backend = backend

    register_error_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
