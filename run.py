"""Entry point for the Customer API.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from the same environment variables as the rest of the
configuration (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``customer_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=settings.access_log,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
