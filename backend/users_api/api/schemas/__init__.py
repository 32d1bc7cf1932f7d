"""API schema package."""

from users_api.api.schemas.users import UserCreated, UserPayload, UserRead

__all__ = ["UserPayload", "UserRead", "UserCreated"]
