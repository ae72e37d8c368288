"""
Error taxonomy for Laragen.

All Laragen errors inherit from LaragenError and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional hints describing how to fix the input
"""

from typing import Any


class LaragenError(Exception):
    """
    Base class for all Laragen errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        hints: Suggestions for how to fix the offending metadata
        details: Additional error context
    """

    code: str = "LARAGEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        hints: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hints = hints or []
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "hints": self.hints,
            "details": self.details,
        }


class InvalidEntityError(LaragenError):
    """The entity description is structurally unusable (e.g. it has no name)."""

    code = "INVALID_ENTITY"


class UnmappedColumnTypeError(LaragenError):
    """A column type has no schema-builder method."""

    code = "UNMAPPED_COLUMN_TYPE"

    def __init__(
        self,
        column_type: str,
        column: str,
        entity: str,
        known_types: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        hints = []
        if known_types:
            hints.append(f"Known column types: {', '.join(known_types[:10])}")
            if len(known_types) > 10:
                hints[-1] += f" (and {len(known_types) - 10} more)"
        super().__init__(
            f"Column type ({column_type}) is not defined in laravel",
            hints=hints,
            details={"column_type": column_type, "column": column, "entity": entity},
            **kwargs,
        )


class MissingReferenceError(LaragenError):
    """A foreign-key column does not say which column it references."""

    code = "MISSING_REFERENCE"

    def __init__(self, column: str, entity: str, **kwargs: Any) -> None:
        super().__init__(
            f"Foreign key column '{column}' on '{entity}' has no reference",
            hints=["Point the column at a target column and table"],
            details={"column": column, "entity": entity},
            **kwargs,
        )


class MalformedRelationError(LaragenError):
    """An association endpoint is missing or cannot be mapped."""

    code = "MALFORMED_RELATION"

    def __init__(self, reason: str, entity: str, **kwargs: Any) -> None:
        super().__init__(
            f"Skipping relation on '{entity}': {reason}",
            details={"entity": entity, "reason": reason},
            **kwargs,
        )


class WriterStateError(LaragenError):
    """The code writer was driven into an invalid state."""

    code = "WRITER_STATE"


class UnknownProfileError(LaragenError):
    """The requested defaults profile does not exist."""

    code = "UNKNOWN_PROFILE"
