import os
import sys
from pathlib import Path

from loguru import logger

from config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(
    *,
    json_logs: bool = False,
    level: str = "INFO",
    log_dir: str | Path | None = None,
) -> Path:
    """Configure loguru for the montoks API process.

    Console level comes from LOG_LEVEL (default: ``level``). The daily file
    under ``log_dir`` (default: ``settings.log_dir``) always captures DEBUG,
    including the per-branch upstream failures the analyzer absorbs.

    Returns the directory the file sink writes to.
    """
    console_level = os.getenv("LOG_LEVEL", level).upper()
    directory = Path(log_dir if log_dir is not None else settings.log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    logger.remove()
    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    logger.add(
        directory / "montoks_{time:YYYY-MM-DD}.log",
        rotation="20 MB",
        retention=settings.log_retention,
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )
    return directory
