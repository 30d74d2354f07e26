"""Equality-filter query over the passengers table.

The query is applied in memory against a full table scan today. It also
renders itself as a SQLAlchemy ``Select`` so callers can push the same
predicates down to the database without changing what they get back.
"""

from dataclasses import dataclass, field
from typing import Iterable

from sqlalchemy import Select, select

from core.db.schemas.passenger import Passenger

FILTERABLE_FIELDS = ("flight_number", "departure_city", "arrival_city", "ticket_class", "status")


@dataclass(frozen=True)
class PassengerQuery:
    filters: dict[str, str] = field(default_factory=dict)
    limit: int | None = None

    @classmethod
    def build(cls, limit: int | None = None, **filters: str | None) -> "PassengerQuery":
        """Drop empty filters; a limit of 0 or None means no truncation."""
        unknown = set(filters) - set(FILTERABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unsupported passenger filters: {sorted(unknown)}")
        active = {name: value for name, value in filters.items() if value}
        return cls(filters=active, limit=limit or None)

    def matches(self, passenger: Passenger) -> bool:
        return all(getattr(passenger, name) == value for name, value in self.filters.items())

    def apply(self, passengers: Iterable[Passenger]) -> list[Passenger]:
        matched = [p for p in passengers if self.matches(p)]
        if self.limit:
            return matched[: self.limit]
        return matched

    def to_select(self) -> Select:
        stmt = select(Passenger).order_by(Passenger.id)
        for name, value in self.filters.items():
            stmt = stmt.where(getattr(Passenger, name) == value)
        if self.limit:
            stmt = stmt.limit(self.limit)
        return stmt
