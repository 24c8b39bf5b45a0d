"""
NotFoundError - Raised when a referenced entity does not exist.
Maps to: not-found (HTTP 404)
"""

from typing import Optional

from src.domain.exceptions.domain_error import DomainError


class NotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{message}: {resource_id}"
        super().__init__(message)
        self.resource = resource
        self.resource_id = resource_id
