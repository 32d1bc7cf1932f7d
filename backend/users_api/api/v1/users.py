"""User CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.api.deps import get_db, parse_user_id
from users_api.api.schemas.users import UserCreated, UserPayload, UserRead
from users_api.core.errors import DuplicateEmailError, UserNotFoundError
from users_api.core.logging import get_logger
from users_api.repositories import users as user_repository

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserRead])
async def list_users(db: AsyncSession = Depends(get_db)) -> list[UserRead]:
    """Return every user."""
    users = await user_repository.list_users(db)
    return [UserRead.model_validate(user) for user in users]


@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserPayload = Body(UserPayload()),
    db: AsyncSession = Depends(get_db),
) -> UserCreated:
    """Create a user unless one with the same email already exists."""
    existing = await user_repository.get_user_by_email(db, payload.email)
    if existing is not None:
        logger.info("Rejected duplicate email", email=payload.email, existing_id=existing.id)
        raise DuplicateEmailError(payload.email)

    user = await user_repository.create_user(
        db,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        department=payload.department,
    )
    logger.info("User created", user_id=user.id)
    return UserCreated(id=user.id)


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_user(
    payload: UserPayload = Body(UserPayload()),
    user_pk: int = Depends(parse_user_id),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Replace every field of an existing user."""
    user = await user_repository.update_user(
        db,
        user_pk,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        department=payload.department,
    )
    if user is None:
        raise UserNotFoundError(user_pk)

    logger.info("User updated", user_id=user_pk)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(
    user_pk: int = Depends(parse_user_id),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete an existing user."""
    deleted = await user_repository.delete_user(db, user_pk)
    if not deleted:
        raise UserNotFoundError(user_pk)

    logger.info("User deleted", user_id=user_pk)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
