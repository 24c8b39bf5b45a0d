"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation and raises ValidationError
- Has no framework dependencies beyond PyJWT for token parsing
"""

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.project_id import ProjectId
from src.domain.value_objects.user_email import UserEmail
from src.domain.value_objects.user_name import UserName
from src.domain.value_objects.token import Token

__all__ = [
    "UserId",
    "ProjectId",
    "UserEmail",
    "UserName",
    "Token",
]
