"""Pydantic models for passenger records, filters, imports and statistics."""

from pydantic import Field

from core.models.base import WireModel


class PassengerOut(WireModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None
    passport_number: str | None
    nationality: str | None
    date_of_birth: str | None
    seat_number: str | None
    flight_number: str
    departure_city: str
    arrival_city: str
    departure_date: str
    ticket_class: str | None
    price: str | None
    status: str | None
    created_at: str | None


class PassengerFilters(WireModel):
    flight_number: str | None = None
    departure_city: str | None = None
    arrival_city: str | None = None
    ticket_class: str | None = None
    status: str | None = None
    limit: int | None = Field(default=None, ge=0)


class PassengerList(WireModel):
    passengers: list[PassengerOut]
    total_count: int
    message: str


class PassengerStats(WireModel):
    total_passengers: int
    by_ticket_class: dict[str, int]
    by_status: dict[str, int]
    by_flight: dict[str, int]
    average_price: float
    message: str


class CsvImportRequest(WireModel):
    csv_content: str = Field(..., description="CSV content as string")


class ImportResult(WireModel):
    success: bool
    imported_count: int
    message: str


class ClearResult(WireModel):
    success: bool
    deleted_count: int
    message: str
