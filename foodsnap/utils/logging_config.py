"""Logging setup for the engine and context helpers for edit/publish jobs"""
import logging
import sys
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Chatty at INFO; only their warnings are worth keeping
QUIET_LOGGERS = ("aiohttp.access", "google.auth", "urllib3")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger once and quiet the HTTP/auth libraries.

    Args:
        name: Logger name, normally "foodsnap"
        level: Level name from settings.LOG_LEVEL
        format_string: Overrides DEFAULT_FORMAT

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        logger.addHandler(handler)

    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger


def log_job_event(logger: logging.Logger, ref: Optional[str], event: str, details: str = ""):
    """Log an edit/publish step as `Job <ref> | <event> | <details>`"""
    msg = f"Job {ref or '-'} | {event}"
    if details:
        msg += f" | {details}"
    logger.info(msg)


def log_error_with_context(
    logger: logging.Logger,
    error: Exception,
    context: str,
    job_id: Optional[str] = None
):
    """
    Log a provider failure with its job/container reference and traceback.
    """
    job_info = f"Job {job_id} | " if job_id else ""
    logger.error(f"{job_info}{context}: {type(error).__name__}: {error}", exc_info=True)
