"""
InternalError - Wraps unexpected failures (storage, runtime).
Maps to: internal (HTTP 500). The message never carries exception text.
"""

from src.domain.exceptions.domain_error import DomainError


class InternalError(DomainError):
    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
