"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, field: str | None = None):
        """Initialize exception with message, status code and offending field."""
        self.message = message
        self.status_code = status_code
        self.field = field
        super().__init__(self.message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class ConflictException(AppException):
    """Conflict exception."""

    def __init__(self, message: str = "Conflict", field: str | None = None):
        """Initialize with 409 status code."""
        super().__init__(message, status_code=409, field=field)


class DuplicateEmailException(ConflictException):
    """Another patient is already registered with this email."""

    def __init__(self, email: str):
        """Attach the conflict to the email field."""
        self.email = email
        super().__init__(
            f"A patient with email '{email}' is already registered. "
            "Please use a different email address.",
            field="email",
        )
