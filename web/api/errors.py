"""Errors raised by the context API views; the server turns them into `{success: false, error}` bodies."""


class ApiError(Exception):
    """Error with the HTTP status it is reported under."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ApiError):
    """Unknown context table."""

    status_code = 404

    def __init__(self, message: str = "Table not found"):
        super().__init__(message)


class ValidationError(ApiError):
    """Missing argument, unknown action or malformed request body."""

    status_code = 400

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


def require(value: str | None, message: str) -> str:
    """Return a non-blank query argument or raise ValidationError."""
    if value is None or not value.strip():
        raise ValidationError(message)
    return value
