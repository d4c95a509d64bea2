"""Entry point for the Trailer Rental API.

Serves the FastAPI application with uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Configuration such as CONTENT_ROOT, LOG_LEVEL, API_HOST and API_PORT
is read from environment variables; see
``trailer_rental_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from trailer_rental_api.app.core.config import settings
from trailer_rental_api.app.main import app


async def run_api() -> None:
    """Start the API server on ``settings.api_host:settings.api_port``."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Trailer Rental API stopped")


if __name__ == "__main__":
    main()
