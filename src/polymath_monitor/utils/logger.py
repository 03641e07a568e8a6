"""
Logging for Polymath Monitor, built on loguru.

Builders only log recoveries (undecodable entries, dropped relationships)
at debug level; nothing is printed unless a sink is enabled:

    POLYMATH_DEBUG=1          console sink at DEBUG
    POLYMATH_LOG_CONSOLE=1    console sink at POLYMATH_LOG_LEVEL (INFO)
    POLYMATH_LOG_DIR=<path>   rotating text and JSON file sinks
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

LOG_DIR_ENV = "POLYMATH_LOG_DIR"
LOG_NAME = "polymath-monitor"
DEFAULT_COMPONENT = "polymath"

FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | <cyan>{name}:{line}</cyan> | {message}"
)


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).lower() in ("1", "true")


def setup_logging(log_dir: str | Path | None = None) -> None:
    """(Re)configure sinks from the environment.

    Args:
        log_dir: Directory for file sinks; defaults to POLYMATH_LOG_DIR.
            No files are written when neither is set.
    """
    debug_mode = _env_flag("POLYMATH_DEBUG")
    level = os.getenv("POLYMATH_LOG_LEVEL", "DEBUG" if debug_mode else "INFO").upper()

    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})
    if _env_flag("POLYMATH_LOG_CONSOLE", "1" if debug_mode else "0"):
        logger.add(sys.stderr, format=FMT, level=level, colorize=True, diagnose=False)

    target = log_dir or os.getenv(LOG_DIR_ENV)
    if not target:
        return

    directory = Path(target).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    logger.add(
        directory / f"{LOG_NAME}.log",
        format=FMT,
        level=level,
        rotation="10 MB",
        retention=5,
        compression="gz",
        diagnose=False,
    )
    logger.add(
        directory / f"{LOG_NAME}.json",
        level=level,
        rotation="20 MB",
        retention=3,
        compression="gz",
        serialize=True,
        diagnose=False,
    )


setup_logging()


def get_logger(name: str | None = None) -> Any:
    """Logger whose records carry the given component name."""
    return logger.bind(component=name) if name else logger


def debug(msg: str, *a: Any, **k: Any) -> None:
    logger.opt(depth=1).debug(msg, *a, **k)


def info(msg: str, *a: Any, **k: Any) -> None:
    logger.opt(depth=1).info(msg, *a, **k)


def warn(msg: str, *a: Any, **k: Any) -> None:
    logger.opt(depth=1).warning(msg, *a, **k)


warning = warn


def error(msg: str, *a: Any, **k: Any) -> None:
    logger.opt(depth=1).error(msg, *a, **k)


def exception(msg: str, *a: Any, **k: Any) -> None:
    logger.opt(depth=1, exception=True).error(msg, *a, **k)


__all__ = [
    "setup_logging",
    "get_logger",
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "exception",
    "logger",
]
