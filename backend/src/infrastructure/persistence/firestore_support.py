"""Helpers shared by the Firestore repositories."""

import functools
import logging
from typing import Any, Optional

from src.domain.exceptions import InternalError, ValidationError
from src.domain.result import Failure
from src.domain.value_objects.user_name import UserName

logger = logging.getLogger(__name__)


def firestore_guard(operation: str):
    """Turn any exception raised by a repository method into Failure(InternalError)."""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception:
                logger.exception("Firestore error during %s", operation)
                return Failure(InternalError(f"Failed to {operation}"))

        return wrapper

    return decorator


def read_user_name(raw: Any, document_path: str) -> UserName:
    """Parse a stored display name, falling back to UNKNOWN_USER when it no longer validates."""
    try:
        return UserName(raw)
    except (ValidationError, TypeError):
        logger.warning("Invalid user name stored at %s: %r", document_path, raw)
        return UserName.UNKNOWN_USER


def optional_str(raw: Any) -> Optional[str]:
    return raw if isinstance(raw, str) and raw else None
