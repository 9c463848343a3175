"""
Centralized logging configuration for the Causal Insight Engine.

The engine modules only emit records through loguru and never add sinks
themselves. The host application (worker, API process or script) calls
init_logging once at startup; until then loguru's default stderr sink applies.

Usage:
    from utils.logger import logger, init_logging

    init_logging("insights")
    logger.info("Your message")
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_configured = False


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: str = "INFO",
    app_name: str = "causal_engine",
):
    """
    Configure logging with console and file outputs.

    Replaces loguru's default handler. Calling it more than once is a no-op.

    Args:
        log_dir: Directory to store log files. If None, file logging is disabled.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        app_name: Name prefix for log files (e.g., "insights", "batch")
    """
    global _configured

    if _configured:
        return

    logger.remove()

    # Console logging with colors
    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    )

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # Main log file - rotates daily
        logger.add(
            log_dir / f"{app_name}_{{time:YYYY-MM-DD}}.log",
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            rotation="00:00",
            retention="30 days",
            compression="gz",
            encoding="utf-8"
        )

        logger.info(f"Logging configured. Log directory: {log_dir}")

    _configured = True


def init_logging(app_name: str = "causal_engine"):
    """
    Initialize logging using settings from config.
    Call this once at application startup.

    Args:
        app_name: Name prefix for log files
    """
    from config import settings, ensure_directories

    ensure_directories()
    setup_logging(log_dir=settings.LOG_DIR, log_level=settings.LOG_LEVEL, app_name=app_name)


__all__ = ["logger", "setup_logging", "init_logging"]
