"""Authentication exceptions.

These exceptions are raised by the tollgate_auth package and by the
authentication service, and are mapped to HTTP responses by the API's
exception handlers. Messages are safe to show to clients: credential and
token failures are deliberately generic.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # 401
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    MISSING_TOKEN = "MISSING_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    UNAUTHENTICATED = "UNAUTHENTICATED"

    # 403
    INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"

    # 404
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # 409
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, code={self.code.value!r})"
        )


class ValidationError(AuthError):
    """Raised when request input does not have the expected shape."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str = "Validation failed",
        errors: list[dict[str, str]] | None = None,
    ):
        self.errors = errors or []
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements.

    ``errors`` lists every violated rule, in rule order.
    """

    code = ErrorCode.WEAK_PASSWORD

    def __init__(
        self,
        errors: list[str] | None = None,
        message: str = "Password does not meet strength requirements",
    ):
        self.errors = list(errors or [])
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    Used for both unknown emails and wrong passwords.
    """

    code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class MissingTokenError(AuthError):
    """Raised when a request carries no usable bearer token."""

    code = ErrorCode.MISSING_TOKEN

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed.

    ``kind`` is either ``"access"`` or ``"refresh"``. The message never
    reveals which check failed.
    """

    code = ErrorCode.INVALID_TOKEN

    def __init__(self, kind: str = "access", message: str | None = None):
        self.kind = kind
        super().__init__(message or f"Invalid or expired {kind} token")


class UnauthenticatedError(AuthError):
    """Raised when an authorization check runs without an identity."""

    code = ErrorCode.UNAUTHENTICATED

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class InsufficientRoleError(AuthError):
    """Raised when the authenticated user lacks a required role."""

    code = ErrorCode.INSUFFICIENT_ROLE

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class InternalAuthError(AuthError):
    """Generic failure; the underlying cause is only logged server-side."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str = "Authentication failed. Please try again."):
        super().__init__(message)


class HashingError(AuthError):
    """Raised when the password hashing primitive fails."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message)


class ComparisonError(AuthError):
    """Raised when a stored password hash cannot be compared against."""

    def __init__(self, message: str = "Password comparison failed"):
        super().__init__(message)
