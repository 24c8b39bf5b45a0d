"""
OpaqueId - Base for string identifiers (UserId, ProjectId).

Identifiers are opaque: non-blank, bounded length, compared by value.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.constants import ValidationRules
from src.domain.exceptions import ValidationCode, ValidationError


@dataclass(frozen=True)
class OpaqueId:
    value: str

    FIELD: ClassVar[str] = "id"

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                self.FIELD, f"{self.FIELD} is required", ValidationCode.REQUIRED
            )
        if len(self.value) > ValidationRules.ID_MAX_LENGTH:
            raise ValidationError(
                self.FIELD,
                f"{self.FIELD} must be at most {ValidationRules.ID_MAX_LENGTH} characters",
                ValidationCode.TOO_LONG,
            )

    @classmethod
    def _sentinel(cls, value: str):
        """Build a pre-validated instance that skips __post_init__."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    @property
    def is_empty(self) -> bool:
        return self.value == ""

    def __str__(self) -> str:
        return self.value
