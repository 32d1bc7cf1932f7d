"""
User repository containing all data-access operations for the users table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.db.models.user import User


async def list_users(db: AsyncSession) -> list[User]:
    """Return every user ordered by primary key."""
    result = await db.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by primary key."""
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str | None) -> User | None:
    """Fetch a user by exact email match."""
    stmt = select(User).where(User.email == email)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    *,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    department: str | None,
) -> User:
    """Insert a user and return it with its generated id."""
    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        department=department,
    )
    db.add(user)
    await db.flush()
    return user


async def update_user(
    db: AsyncSession,
    user_id: int,
    *,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    department: str | None,
) -> User | None:
    """Overwrite every column of a user. Returns None when the id is unknown."""
    user = await get_user_by_id(db, user_id)
    if user is None:
        return None

    user.first_name = first_name
    user.last_name = last_name
    user.email = email
    user.department = department
    await db.flush()
    return user


async def delete_user(db: AsyncSession, user_id: int) -> bool:
    """Hard-delete a user. Returns True if a row was deleted."""
    user = await get_user_by_id(db, user_id)
    if user is None:
        return False
    await db.delete(user)
    await db.flush()
    return True
