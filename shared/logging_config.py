"""
Root logger setup for the School Locator API.

Records always go to stderr; when ``LOG_FILE`` is configured they are
written to that file as well.  Calling ``setup_logging`` again after
handlers exist (e.g. a second app startup in tests) leaves the
existing configuration alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Value of the ``LOG_FILE`` setting, if any.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
