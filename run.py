"""Process entry point for the Customer Success Platform API.

Starts the FastAPI application with uvicorn.  Logging is configured by the
application (see ``core.logging_config``), so uvicorn is started
without a logging config of its own.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``customer_success_api.app.core.config``); the defaults are
``0.0.0.0`` and ``3000``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from customer_success_api.app.core.config import settings
from customer_success_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
