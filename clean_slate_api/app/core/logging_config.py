"""
Logging setup shared by the API and the uvicorn server.

Everything is routed through the root logger with a single format,
``"%(asctime)s [%(levelname)s] %(name)s: %(message)s"``.  Uvicorn's own
loggers (startup, errors and the per‑request access log) lose their
handlers and propagate to root instead, so ``run.py``'s startup lines,
request logs and application messages read the same.  ``run.py``
passes ``log_config=None`` to uvicorn so it does not install its own
configuration on top.

``setup_logging`` may be called repeatedly (every ``create_app`` does);
handlers it installed earlier are recognised by name and not added
twice, while handlers owned by others (pytest, for instance) are left
alone.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "clean_slate_api.console"
FILE_HANDLER_NAME = "clean_slate_api.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def _add_handler(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(settings: Settings) -> None:
    """Configure the root and uvicorn loggers from ``settings``.

    Parameters
    ----------
    settings : Settings
        ``log_level`` names the root level (case insensitive, unknown
        names fall back to ``INFO``).  ``log_file``, when not empty,
        adds a UTF‑8 file handler next to the console one.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        _add_handler(root, logging.StreamHandler(), CONSOLE_HANDLER_NAME)

    if settings.log_file and not _has_handler(root, FILE_HANDLER_NAME):
        log_path = Path(settings.log_file).resolve()
        _add_handler(root, logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER_NAME)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
