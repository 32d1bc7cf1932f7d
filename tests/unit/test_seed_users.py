"""Development seed script."""

from scripts import seed_users
from users_api.repositories import users as user_repository


async def test_seed_is_idempotent(monkeypatch, session_factory):
    async def _tables_exist(bind=None):
        return None

    monkeypatch.setattr(seed_users, "async_session", session_factory)
    monkeypatch.setattr(seed_users, "init_models", _tables_exist)

    assert await seed_users.seed() == len(seed_users.SEED_USERS)
    assert await seed_users.seed() == 0

    async with session_factory() as session:
        users = await user_repository.list_users(session)
    assert [u.email for u in users] == [data["email"] for data in seed_users.SEED_USERS]
