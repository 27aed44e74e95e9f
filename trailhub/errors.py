from typing import Any

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


class ApiError(Exception):
    """Error reported to callers for any failed backend request.

    `status_code` is 0 when no response was received. `errors` holds
    field-level validation messages when the backend sends them.
    """

    status_code: int = 0

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: dict[str, list[str]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class NetworkError(ApiError):
    status_code = 0


class RequestValidationError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class ServerError(ApiError):
    status_code = 500


class MissingParentError(LookupError):
    """An edition's competition or a competition's event could not be found."""

    def __init__(self, child: str, child_id: str, parent: str, parent_id: str | None):
        super().__init__(
            f"{child} {child_id} references {parent} {parent_id}, which could not be found"
        )
        self.child = child
        self.child_id = child_id
        self.parent = parent
        self.parent_id = parent_id


def get_error_message(error: Any) -> str:
    if isinstance(error, str):
        return error
    if isinstance(error, ApiError):
        return error.message
    if isinstance(error, MissingParentError):
        return str(error)
    return DEFAULT_ERROR_MESSAGE


def get_validation_errors(error: Any) -> dict[str, list[str]] | None:
    if isinstance(error, ApiError):
        return error.errors
    return None
