"""
Loguru configuration for genloop runs.

Colored console output plus an optional rotating file sink.
"""

from datetime import datetime, timezone
import os
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<blue>{function}</blue>:<yellow>{line}</yellow> | "
    "<level>{message}</level>"
)
PLAIN_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
)


def setup_logger(
    log_dir: str | None = None,
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
) -> str | None:
    """
    Replace loguru's sinks with a console sink and, optionally, a file sink.

    Args:
        log_dir: Directory for log files; no file sink when None
        level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation policy (e.g., "50 MB", "1 day")
        retention: Log retention policy (e.g., "30 days", "1 month")
        enable_colors: Colorize console output when stderr is a TTY

    Returns:
        Path to the log file, or None without a file sink
    """
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT if colorize else PLAIN_FORMAT,
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )

    if log_dir is None:
        logger.debug("Logger initialized (console only, level={})", level)
        return None

    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"evolution_{timestamp}.log")
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
    logger.info("Logger initialized. Logging to console and {}", log_file)
    return log_file
