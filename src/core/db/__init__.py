"""
Database ORM models and the store handle for the passenger roster.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.query import PassengerQuery
from core.db.schemas.base import Base
from core.db.schemas.passenger import Passenger
from core.db.schemas.todo import Todo
from core.db.store import Store, resolve_database_url

__all__ = ["Base", "Passenger", "PassengerQuery", "Store", "Todo", "resolve_database_url"]
