"""
User model — one row per person in the directory.

Python attributes are snake_case; the underlying column names keep the
camelCase used on the wire (`firstName`, `lastName`).
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.models.base import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    first_name: Mapped[str] = mapped_column("firstName", Text, nullable=False)
    last_name: Mapped[str] = mapped_column("lastName", Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} {self.email} department={self.department}>"
