"""
Health endpoint for API v1.

Returns the project name, version and the configured storage backend.
It does not touch storage, so it is cheap to poll for liveness.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_health(request: Request) -> Dict[str, Any]:
    app = request.app
    return {
        "status": "ok",
        "name": app.title,
        "version": app.version,
        "storage": getattr(app.state, "storage_backend", "custom"),
    }
