"""User domain exceptions.

These share the tollgate_auth error hierarchy so the API renders them
with the same error format.
"""

from tollgate_auth.exceptions import AuthError, ErrorCode


class DuplicateEmailError(AuthError):
    """Email already registered."""

    code = ErrorCode.DUPLICATE_EMAIL

    def __init__(self, email: str) -> None:
        # Kept for server-side logging only; never rendered
        self.email = email
        super().__init__("User with this email already exists")


class UserNotFoundError(AuthError):
    """User not found."""

    code = ErrorCode.USER_NOT_FOUND

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__("User not found")
