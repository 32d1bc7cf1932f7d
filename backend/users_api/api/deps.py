"""Shared dependencies for API routes."""

from __future__ import annotations

import re
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.errors import UserNotFoundError
from users_api.db.session import get_db as _get_db

_USER_ID_RE = re.compile(r"-?[0-9]+")
_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


def parse_user_id(user_id: str) -> int:
    """Convert the `{user_id}` path segment to a primary key.

    Only plain decimal digits (optionally signed with `-`) inside the signed
    64-bit INTEGER range can match a row; anything else is reported as not
    found rather than as a validation error.
    """
    if not _USER_ID_RE.fullmatch(user_id):
        raise UserNotFoundError(user_id)
    value = int(user_id)
    if not _SQLITE_INT_MIN <= value <= _SQLITE_INT_MAX:
        raise UserNotFoundError(user_id)
    return value
