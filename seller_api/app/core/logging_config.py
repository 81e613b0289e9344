"""
Process-wide logging for the Seller API.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where those records go.  ``create_app`` calls
``setup_logging`` with ``LOG_LEVEL`` and ``LOG_FILE`` from the settings.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send application logs to stderr and, when ``logfile`` is set, to a file.

    Does nothing if the root logger already has handlers (uvicorn may
    have installed its own, and tests build the app more than once).
    An unknown ``level`` name is treated as ``INFO``.  Missing parent
    directories of ``logfile`` are created.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # The UserService client goes through urllib3, which logs each
    # pooled connection at DEBUG.
    if numeric_level < logging.WARNING:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
