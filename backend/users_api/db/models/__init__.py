"""
Models package — re-exports Base and all models.

Import models here so `Base.metadata` picks up every table before
`init_models` runs `create_all`.
"""

from users_api.db.models.base import Base
from users_api.db.models.user import User

__all__ = [
    "Base",
    "User",
]
