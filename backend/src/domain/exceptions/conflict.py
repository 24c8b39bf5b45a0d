"""
ConflictError - Raised when an operation would violate a state invariant.
Maps to: failed-precondition (HTTP 412)

AlreadyExistsError narrows it to duplicates (existing channel, pending
request, already friends).
Maps to: already-exists (HTTP 409)
"""

from src.domain.exceptions.domain_error import DomainError


class ConflictError(DomainError):
    def __init__(self, resource: str, conflicting_state: str, message: str):
        super().__init__(message)
        self.resource = resource
        self.conflicting_state = conflicting_state


class AlreadyExistsError(ConflictError):
    pass
