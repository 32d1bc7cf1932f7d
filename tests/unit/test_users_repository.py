"""Repository functions against a real SQLite session."""

import pytest
from sqlalchemy.exc import IntegrityError

from users_api.repositories import users as user_repository


async def _add(db, email: str, **fields):
    values = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": email,
        "department": "Engineering",
    }
    values.update(fields)
    return await user_repository.create_user(db, **values)


class TestCreateAndLookup:

    async def test_create_assigns_id(self, db):
        user = await _add(db, "ada@example.com")

        assert user.id == 1
        assert await user_repository.get_user_by_id(db, user.id) is user

    async def test_get_by_email_is_exact(self, db):
        await _add(db, "ada@example.com")

        assert await user_repository.get_user_by_email(db, "ada@example.com") is not None
        assert await user_repository.get_user_by_email(db, "Ada@example.com") is None

    async def test_get_by_email_none_matches_nothing(self, db):
        await _add(db, "ada@example.com")

        assert await user_repository.get_user_by_email(db, None) is None

    async def test_unique_email_enforced_by_table(self, db):
        await _add(db, "ada@example.com")

        with pytest.raises(IntegrityError):
            await _add(db, "ada@example.com")

    async def test_null_column_rejected(self, db):
        with pytest.raises(IntegrityError):
            await _add(db, "ada@example.com", last_name=None)


class TestList:

    async def test_list_is_ordered_by_id(self, db):
        await _add(db, "b@example.com")
        await _add(db, "a@example.com")

        users = await user_repository.list_users(db)

        assert [u.email for u in users] == ["b@example.com", "a@example.com"]


class TestUpdateAndDelete:

    async def test_update_overwrites_every_field(self, db):
        user = await _add(db, "ada@example.com")

        updated = await user_repository.update_user(
            db,
            user.id,
            first_name="Grace",
            last_name="Hopper",
            email="grace@example.com",
            department="Navy",
        )

        assert updated is not None
        assert (updated.first_name, updated.last_name, updated.email, updated.department) == (
            "Grace",
            "Hopper",
            "grace@example.com",
            "Navy",
        )

    async def test_update_unknown_id_returns_none(self, db):
        result = await user_repository.update_user(
            db, 42, first_name="x", last_name="y", email="z", department="w"
        )

        assert result is None

    async def test_delete(self, db):
        user = await _add(db, "ada@example.com")

        assert await user_repository.delete_user(db, user.id) is True
        assert await user_repository.get_user_by_id(db, user.id) is None
        assert await user_repository.delete_user(db, user.id) is False
