"""Domain error codes for the tickets module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_FORM_INPUT = "INVALID_FORM_INPUT"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidFormInputError(DomainError):
    """Raised when submitted form values fail validation."""

    def __init__(self, field_errors: dict[str, Any]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FORM_INPUT,
            message="Invalid form input",
            details=dict(field_errors),
        )


class UnknownFieldError(DomainError):
    """Raised when input names a field that cannot be written."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_FIELD,
            message="Unknown or read-only field",
            details={"fields": sorted(names)},
        )
