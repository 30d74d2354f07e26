"""SQLAlchemy ORM model for the todos table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class Todo(Base):
    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str | None] = mapped_column(Text)
    # Stored as 0/1; exposed as a bool by the record operations.
    completed: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
