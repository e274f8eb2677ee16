"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Configure root logging once for the whole process.

    Output goes to stdout unless another stream is given.
    """
    root = logging.getLogger()

    # Prevent double config on Streamlit reruns
    if getattr(root, "_schedule_configured", False):
        return

    root.setLevel(config.resolve_log_level(level, default=config.LOG_LEVEL))

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    root._schedule_configured = True  # type: ignore[attr-defined]
