"""
Root logger setup for the class portal.

``create_app`` calls ``setup_logging`` every time an application is
built, and the test suite builds one per test.  Repeated calls are
therefore expected: the level is re-applied on each call, the console
handler is attached once, and a file handler is attached once per
distinct ``LOG_FILE`` path.  Handlers installed by others (pytest's
capture handler, uvicorn) are left alone.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Prefix of the ``Handler.name`` of every handler installed here.
HANDLER_PREFIX = "class_portal"


def _owned_handlers(root: logging.Logger) -> dict:
    return {
        handler.name: handler
        for handler in root.handlers
        if handler.name and handler.name.startswith(HANDLER_PREFIX)
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the root logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to, in addition to the
        console.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    owned = _owned_handlers(root)
    wanted = {f"{HANDLER_PREFIX}.console": None}
    if logfile:
        log_path = Path(logfile).resolve()
        wanted[f"{HANDLER_PREFIX}.file:{log_path}"] = log_path

    for name, log_path in wanted.items():
        if name in owned:
            continue
        if log_path is None:
            handler: logging.Handler = logging.StreamHandler()
        else:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.set_name(name)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root
