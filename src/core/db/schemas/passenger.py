"""SQLAlchemy ORM model for the passengers table."""

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class Passenger(Base):
    __tablename__ = "passengers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text)
    passport_number: Mapped[str | None] = mapped_column(Text)
    nationality: Mapped[str | None] = mapped_column(Text)
    date_of_birth: Mapped[str | None] = mapped_column(Text)
    seat_number: Mapped[str | None] = mapped_column(Text)
    flight_number: Mapped[str] = mapped_column(Text, nullable=False)
    departure_city: Mapped[str] = mapped_column(Text, nullable=False)
    arrival_city: Mapped[str] = mapped_column(Text, nullable=False)
    departure_date: Mapped[str] = mapped_column(Text, nullable=False)
    ticket_class: Mapped[str | None] = mapped_column(Text)
    # Decimal kept as text; parsed only when aggregating.
    price: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str | None] = mapped_column(Text, default="confirmed", server_default="confirmed")
    created_at: Mapped[str | None] = mapped_column(Text, server_default=text("CURRENT_TIMESTAMP"))
