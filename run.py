"""Entry point for the portfolio site.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Configuration such as SECRET_KEY, the admin credentials and the data
directories is read from environment variables (see
``portfolio_site/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from portfolio_site.app.core.config import settings
from portfolio_site.app.main import app


async def main() -> None:
    """Serve the site until interrupted.

    Host and port are read from the ``HOST`` and ``PORT`` environment
    variables.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")
