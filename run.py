"""Entry point for the Seller API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8080``); everything else is configured through the
variables documented in ``seller_api.app.core.config``.

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from seller_api.app.core.config import settings
from seller_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Starting Seller API on %s:%s", host, port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
