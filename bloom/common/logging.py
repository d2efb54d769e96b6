"""
Small logging helper shared by the launcher and tests.

Modules grab their own logger with `logging.getLogger(__name__)`; the
launcher calls `setup_default_logging` once so there is a sane default
when nothing else configured the root logger.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal basicConfig once; no-op if the root logger has handlers."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(lvl)
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
