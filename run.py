"""Entry point for the Items API.

Starts the FastAPI application with Uvicorn.  Configuration is read
from environment variables (see ``items_api/app/core/config.py``);
host and port come from ``API_HOST`` and ``API_PORT``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from items_api.app.core.config import settings
from items_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Items API stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
