"""
Mapping from core errors to HTTP responses
"""
from fastapi import HTTPException
from ..core.exceptions import (
    TodoAppError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    TaskNotFoundError
)

STATUS_CODES = {
    DuplicateUsernameError: 409,
    InvalidCredentialsError: 401,
    NotAuthenticatedError: 401,
    TaskNotFoundError: 404,
}


def to_http_exception(exc: TodoAppError) -> HTTPException:
    """
    Convert a core error into an HTTPException

    detail = {"code": <error kind>, "message": <text>}
    """
    status_code = STATUS_CODES.get(type(exc), 400)
    return HTTPException(
        status_code=status_code,
        detail={"code": exc.code, "message": exc.message}
    )
