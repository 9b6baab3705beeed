"""
Utility helpers for wordbridge.

Provides:
- Structured logging configuration with timestamps.
- A wall-clock timing context manager.
"""

import contextlib
import logging
import time
from typing import Generator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def setup_logging(
    level: int = logging.INFO,
    fmt: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt: str = "%Y-%m-%dT%H:%M:%S%z",
) -> None:
    """Configure the root logger with timestamped structured output."""
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt, force=True)


# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------


@contextlib.contextmanager
def timed(label: str) -> Generator[None, None, None]:
    """Context manager that logs elapsed wall-clock time for *label*."""
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    logger.info("%s completed in %.3fs.", label, elapsed)
