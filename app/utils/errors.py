"""
FitPulse API - Custom Exception Classes.

Exception hierarchy for application error handling. Every subclass carries
the HTTP status it maps to; ``main.py`` renders them as ``{"detail": ...}``.
"""

from typing import Optional


class FitPulseException(Exception):
    """
    Base exception class for FitPulse application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class AuthenticationError(FitPulseException):
    """
    Exception raised for authentication failures.

    Used when:
    - Missing or malformed token
    - Expired or revoked token
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=401, detail=detail)


class NotFoundError(FitPulseException):
    """
    Exception raised when a resource is not found.

    Used when:
    - User not found
    - Workout id absent from the user's history
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=404, detail=detail)


class ValidationError(FitPulseException):
    """Exception raised for input that passes the schema but breaks a business rule."""

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=400, detail=detail)


class ConflictError(FitPulseException):
    """
    Exception raised for resource conflicts.

    Used when:
    - A concurrent write kept winning the progress compare-and-swap
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=409, detail=detail)


class PersistenceError(FitPulseException):
    """Exception raised when the document store rejects a write."""

    def __init__(
        self,
        message: str = "Server error",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=500, detail=detail)
