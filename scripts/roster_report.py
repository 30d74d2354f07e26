#!/usr/bin/env python3
"""Print the passenger roster and its statistics from the local database.

Calls the same tools the frontend does, through core.tools.invoke, and
renders the passenger list and stat cards as plain text. Creates the
tables first when pointed at a fresh local database.

Usage:
    DATABASE_URL=sqlite:///./data/roster.db python scripts/roster_report.py [--populate | --import passengers.csv]
        [--flight LA1234] [--departure-city CITY] [--arrival-city CITY] [--ticket-class economy]
        [--status confirmed] [--limit 5]
"""

import argparse
import sys
from pathlib import Path

# Add src to path for core imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db import Store
from core.tools import invoke


def print_passengers(body: dict) -> None:
    print(body["message"])
    print()
    print(f"{'ID':>4}  {'Name':<24} {'Flight':<8} {'Route':<32} {'Class':<9} {'Price':>9}  Status")
    for p in body["passengers"]:
        name = f"{p['firstName']} {p['lastName']}"
        route = f"{p['departureCity']} -> {p['arrivalCity']}"
        print(
            f"{p['id']:>4}  {name:<24} {p['flightNumber']:<8} {route:<32} "
            f"{p['ticketClass'] or '-':<9} {p['price'] or '-':>9}  {p['status'] or '-'}"
        )
    print()


def print_stats(body: dict) -> None:
    print(f"Total passengers: {body['totalPassengers']}")
    print(f"Average price:    {body['averagePrice']:.2f}")
    for title, key in (("By ticket class", "byTicketClass"), ("By status", "byStatus"), ("By flight", "byFlight")):
        print(f"{title}:")
        for group, count in sorted(body[key].items()):
            print(f"  {group:<16} {count}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--populate", action="store_true", help="load the sample passengers if the table is empty")
    parser.add_argument("--import", dest="import_file", type=Path, metavar="FILE", help="import passengers from a CSV file")
    parser.add_argument("--flight", help="filter by flight number")
    parser.add_argument("--departure-city", help="filter by departure city")
    parser.add_argument("--arrival-city", help="filter by arrival city")
    parser.add_argument("--ticket-class", help="filter by ticket class")
    parser.add_argument("--status", help="filter by status")
    parser.add_argument("--limit", type=int, default=0, help="0 = no limit")
    args = parser.parse_args()

    with Store.from_config(get_config()) as store:
        store.create_schema()

        if args.populate:
            result = invoke("POPULATE_TEST_DATA", {}, store=store)
            print(result.value["message"] if result.ok else f"✗ {result.error.message}")
            print()

        if args.import_file:
            result = invoke("IMPORT_PASSENGERS_FROM_CSV", {"csvContent": args.import_file.read_text()}, store=store)
            if not result.ok:
                print(f"✗ {result.error.message}")
                return 1
            print(result.value["message"])
            print()

        result = invoke(
            "GET_PASSENGERS",
            {
                "flightNumber": args.flight,
                "departureCity": args.departure_city,
                "arrivalCity": args.arrival_city,
                "ticketClass": args.ticket_class,
                "status": args.status,
                "limit": args.limit,
            },
            store=store,
        )
        if not result.ok:
            print(f"✗ {result.error.message}")
            return 1
        print_passengers(result.value)

        result = invoke("GET_PASSENGER_STATS", {}, store=store)
        if not result.ok:
            print(f"✗ {result.error.message}")
            return 1
        print_stats(result.value)

    return 0


if __name__ == "__main__":
    sys.exit(main())
