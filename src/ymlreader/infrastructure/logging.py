# src/ymlreader/infrastructure/logging.py
"""
Logging configuration module for ymlreader.

Uses Loguru as backend. This module provides two functions:
- setup_logging(): configures sinks once, from the host program
- get_logger(name): gets a logger "bound" with the module name

The library itself never calls setup_logging(). Until the host does,
messages go to Loguru's default stderr handler.

Levels used by the library:

DEBUG:
    - Each line matched by the scanner
    - Each insert into the index (bucket, chain length)

INFO:
    - Reader opened / parsed / closed

WARNING:
    - Duplicate key overwritten during parse
    - Operation attempted on a released reader

ERROR:
    - Load or lock failures, logged right before the exception is raised
"""

from loguru import logger
from pathlib import Path
import sys


# Flag to prevent multiple setups
_is_configured = False


def setup_logging(
    level: str = "DEBUG",
    console_level: str = "INFO",
    log_dir: str = "logs",
    log_filename: str = "ymlreader.log"
) -> None:
    """
    Configure logging for the host application.

    Call this function ONCE at startup. Subsequent calls are ignored.

    Args:
        level: Minimum level for FILE. Default: "DEBUG"
        console_level: Minimum level for CONSOLE. Default: "INFO"
        log_dir: Directory for log files. Created if it doesn't exist.
        log_filename: Name of log file. Default: "ymlreader.log"

    Example:
        from ymlreader.infrastructure.logging import setup_logging

        setup_logging(console_level="WARNING")
    """
    global _is_configured

    if _is_configured:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    # Remove default handler (stderr)
    logger.remove()

    # timestamp | level | module:function:line | message
    log_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level:<8} | "
        "{extra[name]}:{function}:{line} | "
        "{message}"
    )

    logger.add(
        sink=log_path / log_filename,
        level=level,
        format=log_format,
        rotation="10 MB",
        retention="7 days",
        encoding="utf-8",
    )

    console_format = (
        "<level>{level:<8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> | "
        "{message}"
    )

    logger.add(
        sink=sys.stderr,
        level=console_level,
        format=console_format,
        colorize=True,
    )

    _is_configured = True

    logger.bind(name="ymlreader.logging").info(
        f"Logging configured - file={level}, console={console_level}, path={log_path / log_filename}"
    )


def get_logger(name: str):
    """
    Get a logger with the module name bound.

    Args:
        name: Module name. Always use __name__ for consistency.

    Returns:
        Loguru logger with bound name.

    Example:
        from ymlreader.infrastructure.logging import get_logger

        logger = get_logger(__name__)
        logger.debug("Scanning buffer")
    """
    return logger.bind(name=name)
