"""
DOMAIN EXCEPTIONS - Business rule violations

Use cases never let these escape: they travel inside Failure(...) and the
presentation layer maps each type to a transport error code.
"""

from src.domain.exceptions.domain_error import DomainError
from src.domain.exceptions.validation_error import ValidationCode, ValidationError
from src.domain.exceptions.not_found import NotFoundError
from src.domain.exceptions.conflict import AlreadyExistsError, ConflictError
from src.domain.exceptions.access_denied import AccessDeniedError
from src.domain.exceptions.internal_error import InternalError

__all__ = [
    "DomainError",
    "ValidationCode",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AlreadyExistsError",
    "AccessDeniedError",
    "InternalError",
]
