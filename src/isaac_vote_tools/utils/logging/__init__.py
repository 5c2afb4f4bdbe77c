# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Dual-mode loguru sinks plus structlog loggers with bound context

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import LogContext, get_logger, log_api_call, with_run_context, with_vote_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "log_api_call",
    "with_run_context",
    "with_vote_context",
]
