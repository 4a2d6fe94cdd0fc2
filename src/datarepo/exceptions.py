"""Exceptions raised by data clients.

Repositories let every one of these through unchanged, so callers can
branch on the concrete type (e.g. turn NotFoundError into a 404).
"""


class HttpError(Exception):
    """Base exception for request failures against the backing store."""

    status_code: int | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class BadRequestError(HttpError):
    """The request was malformed."""

    status_code = 400


class UnauthorizedError(HttpError):
    """Authentication is missing or invalid."""

    status_code = 401


class ForbiddenError(HttpError):
    """Permission denied."""

    status_code = 403


class NotFoundError(HttpError):
    """Resource not found."""

    status_code = 404


class ConflictError(HttpError):
    """The request conflicts with the current state of the resource."""

    status_code = 409


class InvalidInputError(HttpError):
    """The request was well-formed but its content was rejected."""

    status_code = 422


class ServerError(HttpError):
    """The backing store failed to handle the request."""

    status_code = 500


class NetworkError(HttpError):
    """No response was received."""

    pass


class UnknownError(HttpError):
    """Any failure that does not fit the other categories."""

    pass


class DataFormatError(ValueError):
    """A payload could not be deserialized into the item type."""

    pass


_ERRORS_BY_STATUS: dict[int, type[HttpError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: InvalidInputError,
}


def error_for_status(status_code: int, message: str) -> HttpError:
    """Build the HttpError subclass matching an HTTP status code.

    Args:
        status_code: HTTP status code of a failed response
        message: Error message, usually taken from the response body

    Returns:
        An instance of the matching subclass; ServerError for any 5xx and
        UnknownError for codes without a dedicated class.
    """
    if status_code in _ERRORS_BY_STATUS:
        return _ERRORS_BY_STATUS[status_code](message)
    if 500 <= status_code < 600:
        return ServerError(message)
    return UnknownError(f"HTTP {status_code}: {message}")
