"""
Logging configuration for the API process.

``setup_logging`` installs this application's console handler (and a
file handler when ``LOG_FILE`` is set) on the root logger and routes
uvicorn's own loggers through them, so application and server messages
share one format and one level.  ``run.py`` starts uvicorn with
``log_config=None`` so uvicorn does not install handlers of its own.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "customer_success.console"
FILE_HANDLER_NAME = "customer_success.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(config: Settings) -> None:
    """Configure the root and uvicorn loggers from ``config``.

    Safe to call more than once: handlers are identified by name and
    only added when missing, so repeated ``create_app`` calls do not
    duplicate output.  Handlers installed by others (pytest, for one)
    are left alone.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    present = {h.get_name() for h in root.handlers}

    if CONSOLE_HANDLER_NAME not in present:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if config.log_file and FILE_HANDLER_NAME not in present:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(level)
        server_logger.propagate = True
