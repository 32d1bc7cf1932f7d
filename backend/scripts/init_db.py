"""
Create the users table if it does not exist.
Run: python -m scripts.init_db  (from backend/)
"""

import asyncio

from users_api.core.config import settings
from users_api.core.logging import setup_logging
from users_api.db.session import engine, init_models


async def main() -> None:
    setup_logging(settings.effective_log_level, settings.LOG_FORMAT)
    await init_models(engine)
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
