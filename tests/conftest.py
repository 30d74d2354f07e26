"""Shared test fixtures for the passenger roster."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def store(tmp_path):
    """Provide a Store backed by a fresh SQLite file with both tables created."""
    from core.db import Store

    with Store(f"sqlite:///{tmp_path / 'roster.db'}") as s:
        s.create_schema()
        yield s


@pytest.fixture
def seeded_store(store):
    """Store preloaded with a handful of passengers across two flights."""
    from core.db import Passenger

    rows = [
        dict(first_name="Ana", last_name="Costa", email="ana@example.com", flight_number="LA1234",
             departure_city="São Paulo", arrival_city="Los Angeles", departure_date="2024-01-15",
             ticket_class="economy", price="2500.00", status="confirmed"),
        dict(first_name="Pedro", last_name="Ferreira", email="pedro@example.com", flight_number="LA1234",
             departure_city="São Paulo", arrival_city="Los Angeles", departure_date="2024-01-15",
             ticket_class="first", price="6500.00", status="confirmed"),
        dict(first_name="Rita", last_name="Lopes", email="rita@example.com", flight_number="TP0101",
             departure_city="Lisbon", arrival_city="São Paulo", departure_date="2024-02-01",
             ticket_class="economy", price="n/a", status="cancelled"),
        dict(first_name="Hugo", last_name="Reis", email="hugo@example.com", flight_number="TP0101",
             departure_city="Lisbon", arrival_city="São Paulo", departure_date="2024-02-01",
             ticket_class=None, price=None, status=""),
    ]
    with store.session() as session:
        session.add_all(Passenger(**row) for row in rows)
        session.commit()
    return store


# PostgreSQL fixtures
@pytest.fixture
def pg_store():
    """Provide a Store against the configured PostgreSQL database for integration tests."""
    from core.config import get_config
    from core.db import Passenger, Store, Todo

    with Store.from_config(get_config()) as s:
        s.create_schema()
        yield s

        # Cleanup: remove rows created during the test
        with s.session() as session:
            session.query(Passenger).delete()
            session.query(Todo).delete()
            session.commit()
