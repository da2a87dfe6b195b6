"""
Loguru-based logging for the flight code experiment.

Console output is kept short so sampled prediction lines stay readable;
the optional file sink records the full call site of every message.

Usage:
    from flightcodes.utils.logger import logger, setup_logger

    setup_logger(settings.logging, level="DEBUG")
    logger.opt(colors=True).info("<green>{}</green>", "sampled prediction")
"""

import sys
from pathlib import Path

from loguru import logger

from flightcodes.config import LoggingSettings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<level>{message}</level>"
)

# No colour markup in files
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logger(settings: LoggingSettings | None = None, level: str | None = None) -> Path | None:
    """
    Route experiment logs to stdout and, if enabled, a rotating log file.

    Args:
        settings: Logging settings, environment defaults when omitted
        level: Overrides settings.level (the --log-level flag)

    Returns:
        Path of the log file, or None when file logging is off
    """
    settings = settings or LoggingSettings()
    level = (level or settings.level).upper()

    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level, colorize=True)

    log_path = None
    if settings.enable_file:
        log_path = Path(settings.log_dir) / settings.log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=settings.rotation,
            retention=settings.retention,
            encoding="utf-8",
        )

    logger.debug(f"Logging at {level}" + (f" to {log_path}" if log_path else ""))
    return log_path


setup_logger()


__all__ = ["logger", "setup_logger"]
