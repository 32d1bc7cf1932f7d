"""User request/response schemas.

Field names on the wire are camelCase; Python attributes stay snake_case.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserPayload(BaseModel):
    """Request body for create and update.

    Fields are passed to the table as text; a missing field becomes NULL and
    is rejected by the database.
    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    email: str | None = None
    department: str | None = None

    @field_validator("first_name", "last_name", "email", "department", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> str | None:
        """Store any JSON value the way a TEXT column would receive it."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return json.dumps(value)


class UserRead(BaseModel):
    """One row of the users table."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    department: str


class UserCreated(BaseModel):
    """Response returned after a successful create."""

    id: int
    message: str = "User created successfully"
