"""Logging helpers shared by the library modules and the CLI.

Library modules only ever ask for a namespaced logger; the handler that
writes records out is installed by the CLI through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "jumble"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.WARNING, stream=None) -> logging.Handler:
    """Send log records to stderr (or ``stream``) at ``level``.

    Result words are printed on stdout, so diagnostics never share it.
    Any handler installed by an earlier call is replaced.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``jumble`` namespace without touching handlers."""

    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
