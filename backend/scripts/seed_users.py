"""
Seed development users.
Run: python -m scripts.seed_users  (from backend/)
"""

import asyncio

from users_api.db.session import async_session, engine, init_models
from users_api.repositories.users import create_user, get_user_by_email


SEED_USERS = [
    {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada.lovelace@example.com",
        "department": "Engineering",
    },
    {
        "first_name": "Grace",
        "last_name": "Hopper",
        "email": "grace.hopper@example.com",
        "department": "Research",
    },
    {
        "first_name": "Alan",
        "last_name": "Turing",
        "email": "alan.turing@example.com",
        "department": "Operations",
    },
]


async def seed() -> int:
    """Insert seed users whose email is not taken yet. Returns the number inserted."""
    await init_models()
    created = 0
    async with async_session() as session:
        for data in SEED_USERS:
            if await get_user_by_email(session, data["email"]) is not None:
                print(f"  Skipped existing user: {data['email']}")
                continue
            user = await create_user(db=session, **data)
            print(f"  Created user: {user.email} ({user.department})")
            created += 1
        await session.commit()
    print(f"Seeded {created} users.")
    return created


async def main() -> None:
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
