"""Unit tests for the tool registry and invoke()."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from core.auth import AuthUser
from core.errors import AuthenticationError, ErrorCode
from core.result import Err, Ok
from core.tools import TOOLS, invoke

TOOL_NAMES = {
    "GET_USER",
    "LIST_TODOS",
    "GENERATE_TODO_WITH_AI",
    "TOGGLE_TODO",
    "DELETE_TODO",
    "GET_PASSENGERS",
    "GET_PASSENGER_STATS",
    "IMPORT_PASSENGERS_FROM_CSV",
    "CLEAR_DATABASE",
    "POPULATE_TEST_DATA",
}


@pytest.fixture
def auth_user():
    return AuthUser(user_id="user_123", email="jane@example.com", name="Jane Doe", avatar_url=None)


@pytest.fixture
def auth_provider(auth_user):
    provider = MagicMock()
    provider.verify_token = AsyncMock(return_value=auth_user)
    return provider


def _generator_factory(title):
    generator = MagicMock()
    generator.generate_title.return_value = title
    return lambda: generator


def test_registry_contains_every_tool():
    assert set(TOOLS) == TOOL_NAMES


def test_private_tools():
    assert {name for name, tool in TOOLS.items() if tool.private} == {
        "GET_USER",
        "GENERATE_TODO_WITH_AI",
        "TOGGLE_TODO",
        "DELETE_TODO",
    }


def test_unknown_tool(store):
    result = invoke("DROP_TABLES", {}, store=store)
    assert isinstance(result, Err)
    assert result.error.code == ErrorCode.UNKNOWN_TOOL


def test_invalid_input(store, auth_provider):
    result = invoke("TOGGLE_TODO", {"id": "not-a-number"}, store=store, token="t", auth_provider=auth_provider)
    assert isinstance(result, Err)
    assert result.error.code == ErrorCode.VALIDATION_ERROR


def test_get_user(store, auth_provider):
    result = invoke("GET_USER", {}, store=store, token="jwt", auth_provider=auth_provider)

    assert result.value == {"id": "user_123", "name": "Jane Doe", "avatar": None, "email": "jane@example.com"}
    auth_provider.verify_token.assert_awaited_once_with("jwt")


def test_private_tool_without_token(store, auth_provider):
    result = invoke("GET_USER", {}, store=store, auth_provider=auth_provider)

    assert isinstance(result, Err)
    assert result.error.code == ErrorCode.AUTH_FAILED
    auth_provider.verify_token.assert_not_called()


def test_private_tool_with_rejected_token(store, auth_provider):
    auth_provider.verify_token = AsyncMock(side_effect=AuthenticationError("expired", code=ErrorCode.INVALID_TOKEN))

    result = invoke("DELETE_TODO", {"id": 1}, store=store, token="old", auth_provider=auth_provider)

    assert isinstance(result, Err)
    assert result.error.code == ErrorCode.INVALID_TOKEN


def test_private_tool_without_auth_configured(store, monkeypatch):
    from core.config import _reset_config

    _reset_config()
    monkeypatch.setenv("CLERK_SECRET_KEY", "")
    monkeypatch.delenv("CLERK_SECRET_ARN", raising=False)
    try:
        result = invoke("GET_USER", {}, store=store, token="jwt")
    finally:
        _reset_config()

    assert isinstance(result, Err)
    assert result.error.code == ErrorCode.AUTH_FAILED


def test_public_tool_needs_no_token(store):
    result = invoke("LIST_TODOS", {}, store=store)
    assert result.value == {"todos": []}


def test_todo_lifecycle(store, auth_provider):
    created = invoke(
        "GENERATE_TODO_WITH_AI",
        {},
        store=store,
        token="jwt",
        auth_provider=auth_provider,
        generator_factory=_generator_factory("Alphabetize the spice rack"),
    )
    todo = created.value["todo"]
    assert todo["title"] == "Alphabetize the spice rack"
    assert todo["completed"] is False

    toggled = invoke("TOGGLE_TODO", {"id": todo["id"]}, store=store, token="jwt", auth_provider=auth_provider)
    assert toggled.value == {"todo": {**todo, "completed": True}}

    deleted = invoke("DELETE_TODO", {"id": todo["id"]}, store=store, token="jwt", auth_provider=auth_provider)
    assert deleted.value == {"success": True, "deletedId": todo["id"]}

    missing = invoke("DELETE_TODO", {"id": todo["id"]}, store=store, token="jwt", auth_provider=auth_provider)
    assert missing.error.code == ErrorCode.NOT_FOUND


def test_get_passengers_camel_case_round_trip(seeded_store):
    result = invoke("GET_PASSENGERS", {"flightNumber": "TP0101", "limit": 1}, store=seeded_store)

    assert isinstance(result, Ok)
    body = result.value
    assert body["totalCount"] == 1
    assert len(body["passengers"]) == 1
    assert body["passengers"][0]["flightNumber"] == "TP0101"
    assert "createdAt" in body["passengers"][0]


def test_get_passengers_empty_filter_strings_ignored(seeded_store):
    result = invoke("GET_PASSENGERS", {"flightNumber": "", "status": "", "limit": 0}, store=seeded_store)
    assert result.value["totalCount"] == 4


def test_passenger_workflow(store):
    populated = invoke("POPULATE_TEST_DATA", {}, store=store)
    assert populated.value["importedCount"] == 10

    imported = invoke(
        "IMPORT_PASSENGERS_FROM_CSV",
        {"csvContent": "header\nRita,Lopes,rita@example.com"},
        store=store,
    )
    assert imported.value == {
        "success": True,
        "importedCount": 1,
        "message": "Successfully imported 1 passengers from CSV",
    }

    stats = invoke("GET_PASSENGER_STATS", {}, store=store).value
    assert stats["totalPassengers"] == 11
    assert stats["byFlight"] == {"LA1234": 10, "BR0001": 1}
    assert stats["byTicketClass"]["unknown"] == 1

    cleared = invoke("CLEAR_DATABASE", {}, store=store).value
    assert cleared["success"] is True
    assert cleared["deletedCount"] == 11

    assert invoke("GET_PASSENGER_STATS", {}, store=store).value["totalPassengers"] == 0
