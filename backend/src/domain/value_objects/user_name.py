"""
UserName Value Object - Display name shown to other users.

Rules:
- 2-20 characters: letters, digits, Hangul, space, underscore, hyphen
- No double spaces, no leading/trailing underscore or hyphen
- Must not contain a forbidden word (case-insensitive substring)

Equality ignores case. Stored-name lookups (UserRepository.find_by_name)
match the exact spelling.
"""

import re
from dataclasses import dataclass

from src.domain.constants import ValidationRules
from src.domain.exceptions import ValidationCode, ValidationError


@dataclass(frozen=True, eq=False)
class UserName:
    value: str

    _PATTERN = re.compile(ValidationRules.USER_NAME_PATTERN)

    def __post_init__(self):
        value = self.value
        if not value or not value.strip():
            raise ValidationError("name", "Name is required", ValidationCode.REQUIRED)
        if len(value) < ValidationRules.USER_NAME_MIN_LENGTH:
            raise ValidationError(
                "name",
                f"Name must be at least {ValidationRules.USER_NAME_MIN_LENGTH} characters",
                ValidationCode.TOO_SHORT,
            )
        if len(value) > ValidationRules.USER_NAME_MAX_LENGTH:
            raise ValidationError(
                "name",
                f"Name must be at most {ValidationRules.USER_NAME_MAX_LENGTH} characters",
                ValidationCode.TOO_LONG,
            )
        if not self._PATTERN.match(value):
            raise ValidationError(
                "name",
                "Name can only contain letters, numbers, Korean, spaces, underscores and hyphens",
            )
        if "  " in value:
            raise ValidationError("name", "Name cannot contain consecutive spaces")
        if value[0] in "_-" or value[-1] in "_-":
            raise ValidationError(
                "name", "Name cannot start or end with an underscore or hyphen"
            )

        lowered = value.lower()
        for word in ValidationRules.USER_NAME_FORBIDDEN_WORDS:
            if word in lowered:
                raise ValidationError(
                    "name",
                    "Name contains a reserved word",
                    ValidationCode.FORBIDDEN_WORD,
                )

    @classmethod
    def _sentinel(cls, value: str) -> "UserName":
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    @property
    def normalized(self) -> str:
        return self.value.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserName):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value


# Placeholder for stored profiles whose name no longer passes validation
UserName.UNKNOWN_USER = UserName._sentinel("Unknown User")
