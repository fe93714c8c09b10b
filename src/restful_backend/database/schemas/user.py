"""User database schema."""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from restful_backend.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model for service users."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    join_date: Mapped[date] = mapped_column(Date, nullable=False)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ssn: Mapped[str | None] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"UserSchema(id={self.id!r}, name={self.name!r})"
