"""
Maps domain errors to transport error codes and HTTP responses.

Mapping is by error type only; message text is never inspected.
Error body shape: {"error": {"code": ..., "message": ..., "details": {...}}}
"""

from enum import Enum
from typing import TypeVar

from fastapi import HTTPException, status

from src.domain.exceptions import (
    AccessDeniedError,
    AlreadyExistsError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.domain.result import Failure, Result

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = "An internal error occurred"


class ErrorCode(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"
    NOT_FOUND = "not-found"
    ALREADY_EXISTS = "already-exists"
    FAILED_PRECONDITION = "failed-precondition"
    PERMISSION_DENIED = "permission-denied"
    UNAUTHENTICATED = "unauthenticated"
    INTERNAL = "internal"


HTTP_STATUS = {
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.FAILED_PRECONDITION: status.HTTP_412_PRECONDITION_FAILED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_code_for(error: BaseException) -> ErrorCode:
    # AlreadyExistsError before its ConflictError base
    if isinstance(error, ValidationError):
        return ErrorCode.INVALID_ARGUMENT
    if isinstance(error, NotFoundError):
        return ErrorCode.NOT_FOUND
    if isinstance(error, AlreadyExistsError):
        return ErrorCode.ALREADY_EXISTS
    if isinstance(error, ConflictError):
        return ErrorCode.FAILED_PRECONDITION
    if isinstance(error, AccessDeniedError):
        return ErrorCode.PERMISSION_DENIED
    return ErrorCode.INTERNAL


def error_details(error: BaseException) -> dict:
    if isinstance(error, ValidationError):
        return {"field": error.field, "code": error.code.value}
    if isinstance(error, NotFoundError):
        return {"resource": error.resource, "resource_id": error.resource_id}
    if isinstance(error, ConflictError):
        return {"resource": error.resource, "conflicting_state": error.conflicting_state}
    return {}


def error_body(code: ErrorCode, message: str, details: dict | None = None) -> dict:
    return {"code": code.value, "message": message, "details": details or {}}


def to_http_exception(error: DomainError) -> HTTPException:
    code = error_code_for(error)
    if code is ErrorCode.INTERNAL:
        body = error_body(code, INTERNAL_ERROR_MESSAGE)
    else:
        body = error_body(code, error.message, error_details(error))
    return HTTPException(status_code=HTTP_STATUS[code], detail=body)


def unwrap_or_raise(result: Result[T]) -> T:
    """Return the success payload or raise the mapped HTTPException."""
    if isinstance(result, Failure):
        raise to_http_exception(result.error)
    return result.data
