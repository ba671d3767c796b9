"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/utils/logging.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

PACKAGE_LOGGER = "pmcmc"


def resolve_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def configure_logging(level: str = "INFO") -> None:
    numeric = resolve_level(level)
    install_rich_traceback(show_locals=False)
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            RichHandler(rich_tracebacks=True, show_time=True, show_level=True, show_path=numeric <= logging.DEBUG)
        ],
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric)
    for noisy_logger in ("markdown_it", "asyncio"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)
