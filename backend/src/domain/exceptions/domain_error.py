"""
DomainError - Common base for every error the core reports.
"""


class DomainError(Exception):
    """Base class for expected business failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
