"""
Domain-specific exception hierarchy for the users service.

Routes raise these instead of HTTPException so the response body keeps
the service's `{"message": ...}` shape.  Each exception carries the HTTP
status it maps to plus optional structured context for logging.
"""

from __future__ import annotations


class UserServiceError(Exception):
    """Base exception for all users-service errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class UserNotFoundError(UserServiceError):
    """No row exists for the requested user id."""

    status_code = 404

    def __init__(self, user_id: object = None, **kwargs) -> None:
        self.user_id = user_id
        super().__init__("User not found", **kwargs)


class DuplicateEmailError(UserServiceError):
    """A user with the submitted email already exists."""

    status_code = 400

    def __init__(self, email: str | None = None, **kwargs) -> None:
        self.email = email
        super().__init__("User with this email already exists", **kwargs)
