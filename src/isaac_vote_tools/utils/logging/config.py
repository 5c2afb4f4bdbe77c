# ABOUTME: Logging configuration using loguru
# ABOUTME: Dual-mode operation: interactive CLI (log files) vs production JSON logging

import logging
import os
import sys
import time
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

LOG_DIR = Path("logs")

# Noisy HTTP stack loggers, kept at WARNING so request lines don't flood the console
WARNING_LOGGERS = ["httpx", "httpcore", "urllib3", "asyncio", "charset_normalizer"]

# structlog method names that are not loguru level names
_STRUCTLOG_LEVELS = {"exception": "ERROR", "warn": "WARNING", "fatal": "CRITICAL", "msg": "INFO"}

# Mode chosen by the last configure_logging call, after any fallback
_active_mode: str | None = None


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("ISAAC_VOTE_TOOLS_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Configure third-party library logging to avoid CLI interference."""
    for logger_name in WARNING_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def _forward_to_loguru(_logger: Any, method_name: str, event_dict: dict[str, Any]) -> Any:
    """structlog processor that hands every event to loguru and stops the chain."""
    level = _STRUCTLOG_LEVELS.get(method_name, method_name.upper())
    event = str(event_dict.pop("event", ""))
    name = event_dict.pop("logger_name", None)
    context = " ".join(f"{key}={value!r}" for key, value in event_dict.items())
    sink = logger.patch(lambda record: record.update(name=name)) if name else logger
    sink.bind(**event_dict).log(level, f"{event} {context}" if context else event)
    raise structlog.DropEvent


def configure_structlog(log_level: str = "INFO") -> None:
    """Route structlog loggers into the loguru sinks."""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, _forward_to_loguru],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def _ensure_log_dir(max_retries: int = 3) -> bool:
    """Create the log directory, returning False if it cannot be created."""
    for attempt in range(max_retries):
        try:
            LOG_DIR.mkdir(exist_ok=True)
            return True
        except OSError:
            if attempt == max_retries - 1:
                return False
            time.sleep(0.01 * (attempt + 1))
    return False


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    global _active_mode
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    configure_structlog(log_level)

    # Remove default loguru handler
    logger.remove()

    if mode == LoggingMode.INTERACTIVE and not _ensure_log_dir():
        # No writable log directory: fall back to stdout JSON
        mode = LoggingMode.PRODUCTION

    _active_mode = mode

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stdout, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
        return

    log_file_path = log_file or str(LOG_DIR / "isaac-vote-tools.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        LOG_DIR / "isaac-vote-tools.json",
        level=log_level,
        format="{time} | {level} | {name} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = _active_mode or detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": str(LOG_DIR / "isaac-vote-tools.log") if interactive else None,
            "json": str(LOG_DIR / "isaac-vote-tools.json") if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": [*WARNING_LOGGERS, "py.warnings"],
    }
