"""
Logging utilities for formkit.

formkit logs through loguru under the ``formkit`` name and is disabled by
default, so importing it never touches the host's sinks. Hosts opt in with
``logger.enable("formkit")``, or call ``setup_logging`` / ``configure_from_settings``
to have formkit install its own sinks.
"""

import inspect
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from loguru import logger as _logger

from ..settings import Settings, settings


class InterceptHandler(logging.Handler):
    """
    Logging handler intercepting standard library logs and redirecting to loguru.

    Attach it to stdlib loggers (see ``intercept_loggers`` in ``setup_logging``)
    so their records end up in the same loguru sinks as formkit's messages.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level if it exists
        level: str | int
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        _logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    level: str = "WARNING",
    format: str | None = None,
    log_to_file: bool = False,
    log_file: str | Path | None = None,
    rotation: str = "20 MB",
    retention: str = "1 week",
    serialize: bool = False,
    intercept_loggers: Iterable[str] = (),
) -> None:
    """
    Replace loguru's sinks with formkit's console (and optional file) sinks.

    Meant for hosts that have no logging setup of their own: it removes every
    existing loguru sink. Also enables formkit's messages.

    Args:
        level: Minimum log level to capture
        format: Log message format string
        log_to_file: Whether to log to a file in addition to console
        log_file: Path to log file (will be created if doesn't exist)
        rotation: When to rotate log files (size or time)
        retention: How long to keep log files
        serialize: Whether to serialize logs as JSON (useful for log aggregation)
        intercept_loggers: Standard library logger names to route into loguru
    """
    if format is None:
        format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )

    _logger.remove()

    _logger.add(
        sys.stderr,
        level=level,
        format=format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    if log_to_file and log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _logger.add(
            str(log_path),
            level=level,
            format=format,
            rotation=rotation,
            retention=retention,
            compression="zip",
            serialize=serialize,
            backtrace=True,
            diagnose=True,
        )

    for log_name in intercept_loggers:
        logging.getLogger(log_name).handlers = [InterceptHandler()]

    _logger.enable("formkit")


def configure_from_settings(config: Settings | None = None) -> None:
    """Run ``setup_logging`` with the values from formkit settings."""
    config = config or settings
    setup_logging(
        level=config.log_level,
        format=config.log_format,
        log_to_file=config.log_to_file,
        log_file=config.get_log_dir() / "formkit.log" if config.log_to_file else None,
        rotation=config.log_rotation,
        retention=config.log_retention,
    )


# Export loguru's logger as the module's logger
logger = _logger
