"""Package logger driven by environment switches.

- ``LIST_SELECT_DEBUG=1``: DEBUG level, and a ``list_select_debug.log`` in
  the working directory unless ``LIST_SELECT_LOG`` names another file
- ``LIST_SELECT_LOG=path``: write records there at the current level
- ``LIST_SELECT_DEBUG_KEYS=1``: trace every key the list widget receives

When the host application already configured logging (a ``main`` logger
or root handlers) records simply propagate to it.
"""
import logging
import os
from typing import List, Optional


_LOGGER: Optional[logging.Logger] = None
_OWN_HANDLERS: List[logging.Handler] = []

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_TRUTHY = {"1", "true", "yes", "on", "debug"}


def debug_enabled() -> bool:
    return os.environ.get("LIST_SELECT_DEBUG", "0").lower() in _TRUTHY


def debug_keys_enabled() -> bool:
    return bool(os.environ.get("LIST_SELECT_DEBUG_KEYS"))


def _log_path() -> Optional[str]:
    path = os.environ.get("LIST_SELECT_LOG")
    if path:
        return os.path.expanduser(path)
    if debug_enabled():
        return os.path.join(os.getcwd(), "list_select_debug.log")
    return None


def _make_handler(level: int) -> logging.Handler:
    """File handler for the configured path; stderr if it cannot be opened."""
    path = _log_path()
    if not path:
        return logging.NullHandler()
    try:
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logging.getLogger("list_select").addHandler(handler)
        _OWN_HANDLERS.append(handler)
        logging.getLogger("list_select").warning(
            "Cannot open log file '%s': %s. Logging to standard error.", path, exc
        )
        return handler
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def _configure() -> logging.Logger:
    level = logging.DEBUG if debug_enabled() else logging.INFO

    host = logging.getLogger("main")
    if host.handlers:
        logger = host.getChild("list_select")
        logger.setLevel(level)
        return logger

    logger = logging.getLogger("list_select")
    logger.setLevel(level)
    if logger.handlers or logging.getLogger().handlers:
        return logger

    handler = _make_handler(level)
    if handler not in logger.handlers:
        logger.addHandler(handler)
        _OWN_HANDLERS.append(handler)
    return logger


def get_logger(name: str = "list_select") -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = _configure()
    return _LOGGER.getChild(name)


def reset_logger() -> None:
    """Forget the cached logger so the next call re-reads the environment.

    Used by the CLI after ``--debug`` flips ``LIST_SELECT_DEBUG``.
    """
    global _LOGGER
    while _OWN_HANDLERS:
        handler = _OWN_HANDLERS.pop()
        for logger in (logging.getLogger("list_select"), logging.getLogger("main.list_select")):
            if handler in logger.handlers:
                logger.removeHandler(handler)
        handler.close()
    _LOGGER = None
