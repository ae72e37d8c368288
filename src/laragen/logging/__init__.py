"""
Laragen structured logging.

Provides JSON and text formatting plus context injection so that every
message emitted while generating an entity carries the entity name.
"""

from laragen.logging.config import LaragenLogger, configure_logging, get_logger
from laragen.logging.context import LogContext, with_log_context
from laragen.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "LaragenLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    # Context
    "LogContext",
    "with_log_context",
]
