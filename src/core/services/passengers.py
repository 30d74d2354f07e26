"""Record operations for the passengers table: filtered reads, CSV imports and bulk clears."""

import logging
from typing import Any, Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import Passenger, PassengerQuery, Store
from core.errors import StoreError, ValidationError
from core.models import ClearResult, ImportResult, PassengerList, PassengerOut
from core.result import returns_result
from core.services.ingestion import parse_csv
from core.services.sample_data import SAMPLE_PASSENGERS_CSV

logger = logging.getLogger(__name__)

GENERATED_FLIGHT_PREFIX = "BR"


def _generated_flight_number(index: int) -> str:
    return f"{GENERATED_FLIGHT_PREFIX}{index:04d}"


def _insert_rows(session: Session, rows: Iterable[dict[str, Any]]) -> int:
    """Insert and commit one row at a time; rows committed before a failure stay.

    Rows without a flight number get ``BR0001``, ``BR0002``, ... numbered by
    their position in this call. The counter starts over on every call.
    """
    inserted = 0
    for index, row in enumerate(rows, start=1):
        values = dict(row)
        if not values.get("flight_number"):
            values["flight_number"] = _generated_flight_number(index)
        try:
            passenger = Passenger(**values)
        except TypeError as e:
            raise ValidationError(f"Row {index} has an unknown passenger field: {e}") from e
        try:
            session.add(passenger)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Passenger import stopped after %d rows", inserted)
            raise StoreError(f"Error importing passengers after {inserted} rows: {e}") from e
        inserted += 1
    return inserted


def _has_passengers(session: Session) -> bool:
    return session.scalars(select(Passenger.id).limit(1)).first() is not None


@returns_result("Error fetching passengers")
def get_passengers(store: Store, query: PassengerQuery | None = None) -> PassengerList:
    query = query or PassengerQuery()
    with store.session() as session:
        everyone = session.scalars(select(Passenger).order_by(Passenger.id)).all()
        passengers = [PassengerOut.model_validate(p) for p in query.apply(everyone)]

    return PassengerList(
        passengers=passengers,
        total_count=len(passengers),
        message=f"Retrieved {len(passengers)} passengers from database",
    )


@returns_result("Error importing passengers")
def import_passengers(store: Store, rows: Iterable[dict[str, Any]]) -> int:
    with store.session() as session:
        return _insert_rows(session, rows)


@returns_result("Error importing CSV")
def import_passengers_from_csv(store: Store, csv_content: str) -> ImportResult:
    rows = parse_csv(csv_content)
    with store.session() as session:
        imported = _insert_rows(session, rows)

    logger.info("Imported %d passengers from CSV", imported)
    return ImportResult(
        success=True,
        imported_count=imported,
        message=f"Successfully imported {imported} passengers from CSV",
    )


@returns_result("Error populating test data")
def populate_test_data(store: Store) -> ImportResult:
    with store.session() as session:
        if _has_passengers(session):
            return ImportResult(
                success=True,
                imported_count=0,
                message="Database already contains passenger data. Use GET_PASSENGERS to retrieve data.",
            )
        imported = _insert_rows(session, parse_csv(SAMPLE_PASSENGERS_CSV))

    logger.info("Populated database with %d test passengers", imported)
    return ImportResult(
        success=True,
        imported_count=imported,
        message=f"Successfully populated database with {imported} test passengers",
    )


@returns_result("Error clearing database")
def clear_database(store: Store) -> ClearResult:
    with store.session() as session:
        existing = session.scalar(select(func.count()).select_from(Passenger)) or 0
        session.execute(delete(Passenger))
        session.commit()

    logger.info("Cleared %d passengers", existing)
    return ClearResult(
        success=True,
        deleted_count=existing,
        message=f"Deleted {existing} passengers from database",
    )
