class TodoAppError(Exception):
    """Base class for errors returned to the caller"""
    code = "TodoAppError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateUsernameError(TodoAppError):
    """Raised when registering a username that already exists"""
    code = "DuplicateUsername"


class InvalidCredentialsError(TodoAppError):
    """Raised when login is attempted with an unknown username or wrong credential"""
    code = "InvalidCredentials"


class NotAuthenticatedError(TodoAppError):
    """Raised when the calling identity has no active session"""
    code = "NotAuthenticated"


class TaskNotFoundError(TodoAppError):
    """Raised when no owned task matches the requested title"""
    code = "TaskNotFound"
