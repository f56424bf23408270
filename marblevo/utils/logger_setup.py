"""
Logging setup for Marble Evolution.

One console sink and, when a log directory is given, one rotating file
sink. Verbose game mode traces every individual, which is logged at DEBUG.
"""

from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
COLOR_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<yellow>{line}</yellow> | "
    "<level>{message}</level>"
)

_VERBOSE_LEVELS = ("TRACE", "DEBUG")


def resolve_level(level: str, verbose: bool) -> str:
    """Level actually used by the sinks; verbose mode never logs less than DEBUG."""
    level = level.upper()
    if verbose and level not in _VERBOSE_LEVELS:
        return "DEBUG"
    return level


def setup_logger(
    log_dir: str | Path | None = "logs",
    level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    enable_colors: bool = True,
    verbose: bool = False,
) -> Path | None:
    """
    Replace every loguru sink with the Marble Evolution ones.

    Args:
        log_dir: Directory for run logs; None keeps logging on the console only
        level: Minimum level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: File rotation policy, e.g. "10 MB"
        retention: How long rotated files are kept, e.g. "7 days"
        enable_colors: Colorize the console when stderr is a terminal
        verbose: Verbose game mode

    Returns:
        Path of the run's log file, or None
    """
    level = resolve_level(level, verbose)
    colorize = enable_colors and sys.stderr.isatty()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=COLOR_FORMAT if colorize else PLAIN_FORMAT,
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )

    log_file = None
    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        log_file = directory / f"marble_evolution_{stamp}.log"
        logger.add(
            log_file,
            level=level,
            format=PLAIN_FORMAT,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )

    logger.info("Logging at {} (file: {})", level, log_file or "none")
    return log_file
