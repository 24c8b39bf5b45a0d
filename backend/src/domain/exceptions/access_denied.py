"""
AccessDeniedError - Raised when the caller may not act on a resource.
Maps to: permission-denied (HTTP 403)
"""

from src.domain.exceptions.domain_error import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to act on a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
