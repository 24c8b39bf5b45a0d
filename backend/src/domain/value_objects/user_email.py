"""
UserEmail Value Object - Wraps user email with validation.

Equality ignores case: "Bob@Example.com" == "bob@example.com".
"""

import re
from dataclasses import dataclass

from src.domain.constants import ValidationRules
from src.domain.exceptions import ValidationCode, ValidationError


@dataclass(frozen=True, eq=False)
class UserEmail:
    value: str  # user_email, presented as email

    _PATTERN = re.compile(ValidationRules.EMAIL_PATTERN)

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValidationError("email", "Email is required", ValidationCode.REQUIRED)
        if len(self.value) > ValidationRules.EMAIL_MAX_LENGTH:
            raise ValidationError(
                "email",
                f"Email must be at most {ValidationRules.EMAIL_MAX_LENGTH} characters",
                ValidationCode.TOO_LONG,
            )
        if not self._PATTERN.match(self.value):
            raise ValidationError("email", "Invalid email format")
        if ".." in self.value:
            raise ValidationError("email", "Email cannot contain consecutive dots")

        local, _, domain = self.value.rpartition("@")
        for part in (local, domain):
            if part.startswith(".") or part.endswith("."):
                raise ValidationError("email", "Email cannot start or end with a dot")

    @property
    def normalized(self) -> str:
        return self.value.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserEmail):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value
