"""Serve the people API with Uvicorn.

Usage:
    python -m components.peopleapi

Host, port and log level come from ``PEOPLE_HOST``, ``PEOPLE_PORT`` and
``PEOPLE_LOG_LEVEL`` (defaults ``0.0.0.0``, ``3000``, ``INFO``).
"""
import asyncio

from uvicorn import Config, Server

from .app import app
from .settings import get_settings


async def serve() -> None:
    settings = get_settings()
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    await Server(config).serve()


if __name__ == "__main__":
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass
