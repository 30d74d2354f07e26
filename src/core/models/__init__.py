"""
Pydantic models for the passenger roster wire format.
"""

from core.models.base import WireModel
from core.models.passenger import (
    ClearResult,
    CsvImportRequest,
    ImportResult,
    PassengerFilters,
    PassengerList,
    PassengerOut,
    PassengerStats,
)
from core.models.todo import DeleteTodoResult, TodoEnvelope, TodoIdRequest, TodoList, TodoOut
from core.models.user import UserOut

__all__ = [
    "ClearResult",
    "CsvImportRequest",
    "DeleteTodoResult",
    "ImportResult",
    "PassengerFilters",
    "PassengerList",
    "PassengerOut",
    "PassengerStats",
    "TodoEnvelope",
    "TodoIdRequest",
    "TodoList",
    "TodoOut",
    "UserOut",
    "WireModel",
]
