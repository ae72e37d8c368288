"""
Logging configuration for Laragen.

Generators only emit records; hosts decide where they go by calling
``configure_logging`` once. Records about items left out of a generated
class carry the code and details of the error that caused it.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

from laragen.logging.context import ContextFilter
from laragen.logging.formatters import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from laragen.core.errors import LaragenError

ROOT_LOGGER = "laragen"

FORMATS = ("text", "json")


class LaragenLogger:
    """
    Logger wrapper that turns keyword arguments into record extras.

    Example:
        logger = LaragenLogger("laragen.codegen")
        logger.debug("Building migration", column_count=4)
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, **fields: Any) -> None:
        self._logger.debug(msg, extra=fields)

    def skipped(self, error: LaragenError) -> None:
        """Report an item that was left out of the generated class."""
        self._logger.warning(
            error.message,
            extra={"code": error.code, "details": error.details},
        )


def get_logger(name: str) -> LaragenLogger:
    """Get a Laragen logger, typically for ``__name__``."""
    return LaragenLogger(name)


def configure_logging(
    level: str | int = "INFO",
    format: str = "text",
    output: TextIO | None = None,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Route Laragen records to a stream.

    The handler always carries the context filter, so records emitted
    while an entity is being generated are tagged with the entity,
    generator and column in scope.

    Args:
        level: Log level name or number
        format: ``text`` for terminals, ``json`` for log collectors
        output: Output stream (defaults to stderr)
        use_colors: Whether to color the level in text format

    Returns:
        The configured ``laragen`` logger
    """
    if isinstance(level, str):
        level = level.upper()

    format = format.lower()
    if format not in FORMATS:
        raise ValueError(f"Unknown log format '{format}', expected one of {FORMATS}")

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(output or sys.stderr)
    if format == "json":
        handler.setFormatter(JSONFormatter(include_extra=True))
    else:
        handler.setFormatter(TextFormatter(use_colors=use_colors))
    handler.addFilter(ContextFilter())

    root_logger.addHandler(handler)
    root_logger.propagate = False
    return root_logger
