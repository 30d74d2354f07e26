"""
Custom exceptions and error handling for the passenger roster.

Defines application-specific exceptions with error codes so that every
operation can report failures the same way, and the tool layer can map
them onto HTTP status codes.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError("Todo 42 not found", code=ErrorCode.NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Record errors
    NOT_FOUND = "NOT_FOUND"

    # Generation errors
    GENERATION_FAILED = "GENERATION_FAILED"

    # Store errors
    STORE_ERROR = "STORE_ERROR"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.NOT_FOUND: "The requested record does not exist.",
    ErrorCode.GENERATION_FAILED: "Unable to generate a todo right now. Please try again.",
    ErrorCode.STORE_ERROR: "The database could not complete the request. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.UNKNOWN_TOOL: "The requested tool does not exist.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class RosterError(Exception):
    """Base exception for all passenger roster errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class AuthenticationError(RosterError):
    """Caller identity is missing or could not be verified."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.AUTH_FAILED):
        super().__init__(message, code)


class NotFoundError(RosterError):
    """Referenced row does not exist."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NOT_FOUND):
        super().__init__(message, code)


class GenerationError(RosterError):
    """Text generation returned no usable content."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.GENERATION_FAILED):
        super().__init__(message, code)


class StoreError(RosterError):
    """Underlying query or mutation failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_ERROR):
        super().__init__(message, code)


class ValidationError(RosterError):
    """Input validation or schema validation failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code)
