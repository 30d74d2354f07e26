"""Passenger statistics computed in a single pass over the table."""

import math
from collections import Counter

from sqlalchemy import select

from core.db import Passenger, Store
from core.models import PassengerStats
from core.result import returns_result

UNKNOWN = "unknown"


def _parse_price(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        price = float(raw)
    except ValueError:
        return None
    return price if math.isfinite(price) else None


@returns_result("Error calculating passenger stats")
def get_passenger_stats(store: Store) -> PassengerStats:
    with store.session() as session:
        passengers = session.scalars(select(Passenger)).all()

    if not passengers:
        return PassengerStats(
            total_passengers=0,
            by_ticket_class={},
            by_status={},
            by_flight={},
            average_price=0,
            message="No passengers found in database",
        )

    by_ticket_class: Counter[str] = Counter()
    by_status: Counter[str] = Counter()
    by_flight: Counter[str] = Counter()
    total_price = 0.0
    valid_prices = 0

    for passenger in passengers:
        by_ticket_class[passenger.ticket_class or UNKNOWN] += 1
        by_status[passenger.status or UNKNOWN] += 1
        by_flight[passenger.flight_number or UNKNOWN] += 1

        price = _parse_price(passenger.price)
        if price is not None:
            total_price += price
            valid_prices += 1

    average_price = total_price / valid_prices if valid_prices else 0.0

    return PassengerStats(
        total_passengers=len(passengers),
        by_ticket_class=dict(by_ticket_class),
        by_status=dict(by_status),
        by_flight=dict(by_flight),
        average_price=round(average_price, 2),
        message=f"Statistics calculated for {len(passengers)} passengers",
    )
