"""Entry point for the Clean Slate API server.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``).  Logging is configured when the app is
created; uvicorn is started with ``log_config=None`` so its loggers keep
that configuration.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from clean_slate_api.app.core.config import settings
from clean_slate_api.app.main import app

logger = logging.getLogger("clean_slate_api")


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logger.info("Clean Slate API Server running on port %s", settings.port)
    logger.info("Dashboard: http://localhost:%s/dashboard.html", settings.port)
    logger.info("Participant Tool: http://localhost:%s/index.html", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
