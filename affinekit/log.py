"""affinekit logging.

Library modules obtain their logger through :func:`get_logger`; every
logger lives under the ``affinekit`` hierarchy so applications can tune
or silence the whole package through one name.

The level is read once from ``AFFINEKIT_LOG_LEVEL`` (default WARNING).
"""

import logging
import os
import sys

_CONFIGURED = False


def _configure_once() -> None:
    """One-time lazy init of the ``affinekit`` root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger("affinekit")
    level_name = os.environ.get("AFFINEKIT_LOG_LEVEL", "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``affinekit`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module. A leading
            ``affinekit.`` prefix is not repeated.
    """
    _configure_once()
    if name == "affinekit" or name.startswith("affinekit."):
        return logging.getLogger(name)
    return logging.getLogger(f"affinekit.{name}")
