from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging config once; no-op if the root logger has handlers.

    Raises ``ValueError`` for a level name logging does not know.
    """
    if isinstance(level, str):
        if level.upper() not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {level!r}")
        lvl = getattr(logging, level.upper())
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)


__all__ = ["setup_default_logging"]
