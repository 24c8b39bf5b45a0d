"""
Result boundary for handlers.

`returns_result` wraps a handler's `execute`-style coroutine so that:
- a DomainError raised inside becomes Failure(error)
- any other exception is logged with traceback, reported to the handler's
  observability port, and becomes Failure(InternalError("Failed to <op>"))
"""

import functools
import logging

from src.domain.exceptions import DomainError, InternalError
from src.domain.ports.observability import NullObservability
from src.domain.result import Failure

logger = logging.getLogger(__name__)

_NULL_OBSERVABILITY = NullObservability()


def returns_result(operation: str):
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            observability = getattr(self, "_observability", _NULL_OBSERVABILITY)
            try:
                return await func(self, *args, **kwargs)
            except DomainError as e:
                logger.info(
                    "%s rejected: %s: %s", operation, type(e).__name__, e.message
                )
                return Failure(e)
            except Exception as e:
                logger.exception("Unexpected error while trying to %s", operation)
                observability.capture_error(e, operation=operation)
                return Failure(InternalError(f"Failed to {operation}"))

        return wrapper

    return decorator
