"""
Logging setup for the psych2cne command line tool.

Library modules only call ``logging.getLogger(__name__)``; the CLI attaches
handlers to the ``psych2cne`` package logger, which every module logger
propagates to.

Log levels:
    DEBUG: Per-field and per-animation conversion checkpoints
    INFO: Conversion start/finish, files written
    ERROR: Failed conversions

Usage:
    from psych2cne.logging_config import setup_logging

    logger = setup_logging(level="debug", log_file=Path("convert.log"))
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from psych2cne.exceptions import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    name: str = "psych2cne",
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Configure and return the converter's logger.

    Args:
        name: Logger name (default: the package logger)
        level: Level number or name such as ``"debug"`` (default: INFO)
        log_file: Optional file to append log lines to
        console_output: Log to stdout; off when stdout carries the converted document

    Returns:
        Configured logger instance

    Raises:
        ConfigurationError: If ``level`` is not a standard level name
    """
    level = _resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Re-running the CLI in one process must not stack handlers
    logger.handlers.clear()

    handlers: List[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
