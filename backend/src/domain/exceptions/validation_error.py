"""
ValidationError - Raised when input is missing or malformed.
Maps to: invalid-argument (HTTP 400)
"""

from enum import Enum

from src.domain.exceptions.domain_error import DomainError


class ValidationCode(str, Enum):
    REQUIRED = "REQUIRED"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INVALID_FORMAT = "INVALID_FORMAT"
    FORBIDDEN_WORD = "FORBIDDEN_WORD"
    NOT_PARTICIPANT = "NOT_PARTICIPANT"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class ValidationError(DomainError):
    """Exception raised for invalid input. Callers match on `code`, not the message."""

    def __init__(
        self,
        field: str,
        message: str,
        code: ValidationCode = ValidationCode.INVALID_FORMAT,
    ):
        super().__init__(message)
        self.field = field
        self.code = code

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, code={self.code.value})"
