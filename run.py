"""Entry point for the Assignment API.

Serves the FastAPI application with Uvicorn.  Intended to be executed
from the project root, e.g. under Docker or a process manager where
only a single Python file is specified::

    python run.py

Configuration such as ``MONGO_URI``, ``MONGO_DB`` and
``FIREBASE_CREDENTIALS`` is read from the environment or a ``.env``
file in the same directory.  ``HOST`` and ``PORT`` default to
``0.0.0.0`` and ``3000``.
"""
import asyncio
import logging

from uvicorn import Config, Server

from assignment_api.app.core.config import settings
from assignment_api.app.main import app


async def main() -> None:
    """Run the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("App listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
