"""
Named, schema-validated remote calls.

Each tool pairs a pydantic input model and output model with an operation
from ``core.services``. ``invoke`` is the single entry point used by the
Lambda handler and the local report script:

    result = invoke("GET_PASSENGERS", {"flightNumber": "LA1234"}, store=store)
    if result.ok:
        print(result.value["totalCount"])

Private tools require a bearer token verified by the configured
``AuthProvider`` before they run.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

import pydantic
from pydantic import BaseModel

from core.auth import AuthProvider, AuthUser, get_auth_provider
from core.db import PassengerQuery, Store
from core.errors import AuthenticationError, ErrorCode, RosterError, ValidationError
from core.models import (
    ClearResult,
    CsvImportRequest,
    DeleteTodoResult,
    ImportResult,
    PassengerFilters,
    PassengerList,
    PassengerStats,
    TodoEnvelope,
    TodoIdRequest,
    TodoList,
    UserOut,
)
from core.result import Err, Ok, Result
from core.services import passengers, stats, todos, users
from core.services.generation import TitleGenerator

logger = logging.getLogger(__name__)


class EmptyInput(BaseModel):
    pass


@dataclass
class ToolContext:
    store: Store
    user: AuthUser | None = None
    generator_factory: Callable[[], TitleGenerator] | None = None

    def generator(self) -> TitleGenerator:
        if self.generator_factory is None:
            from core.clients import get_title_generator

            return get_title_generator()
        return self.generator_factory()


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    execute: Callable[[ToolContext, Any], Result[Any]]
    private: bool = False


def _wrap_todo(result: Result[Any]) -> Result[Any]:
    return Ok(TodoEnvelope(todo=result.value)) if isinstance(result, Ok) else result


def _get_passengers(ctx: ToolContext, request: PassengerFilters) -> Result[Any]:
    query = PassengerQuery.build(
        limit=request.limit,
        flight_number=request.flight_number,
        departure_city=request.departure_city,
        arrival_city=request.arrival_city,
        ticket_class=request.ticket_class,
        status=request.status,
    )
    return passengers.get_passengers(ctx.store, query)


_TOOL_LIST = [
    Tool(
        name="GET_USER",
        description="Get the current logged in user",
        input_model=EmptyInput,
        output_model=UserOut,
        execute=lambda ctx, _: users.get_current_user(ctx.user),
        private=True,
    ),
    Tool(
        name="LIST_TODOS",
        description="List all todos",
        input_model=EmptyInput,
        output_model=TodoList,
        execute=lambda ctx, _: todos.list_todos(ctx.store),
    ),
    Tool(
        name="GENERATE_TODO_WITH_AI",
        description="Generate a todo with AI",
        input_model=EmptyInput,
        output_model=TodoEnvelope,
        execute=lambda ctx, _: _wrap_todo(todos.generate_todo(ctx.store, ctx.generator())),
        private=True,
    ),
    Tool(
        name="TOGGLE_TODO",
        description="Toggle a todo's completion status",
        input_model=TodoIdRequest,
        output_model=TodoEnvelope,
        execute=lambda ctx, req: _wrap_todo(todos.toggle_todo(ctx.store, req.id)),
        private=True,
    ),
    Tool(
        name="DELETE_TODO",
        description="Delete a todo",
        input_model=TodoIdRequest,
        output_model=DeleteTodoResult,
        execute=lambda ctx, req: todos.delete_todo(ctx.store, req.id),
        private=True,
    ),
    Tool(
        name="GET_PASSENGERS",
        description="Get all passengers from the database with optional filtering",
        input_model=PassengerFilters,
        output_model=PassengerList,
        execute=_get_passengers,
    ),
    Tool(
        name="GET_PASSENGER_STATS",
        description="Get statistics about passengers in the database",
        input_model=EmptyInput,
        output_model=PassengerStats,
        execute=lambda ctx, _: stats.get_passenger_stats(ctx.store),
    ),
    Tool(
        name="IMPORT_PASSENGERS_FROM_CSV",
        description="Import passenger data from CSV file into the database",
        input_model=CsvImportRequest,
        output_model=ImportResult,
        execute=lambda ctx, req: passengers.import_passengers_from_csv(ctx.store, req.csv_content),
    ),
    Tool(
        name="CLEAR_DATABASE",
        description="Delete every passenger from the database",
        input_model=EmptyInput,
        output_model=ClearResult,
        execute=lambda ctx, _: passengers.clear_database(ctx.store),
    ),
    Tool(
        name="POPULATE_TEST_DATA",
        description="Populate the database with test passenger data from the sample CSV",
        input_model=EmptyInput,
        output_model=ImportResult,
        execute=lambda ctx, _: passengers.populate_test_data(ctx.store),
    ),
]

TOOLS: dict[str, Tool] = {tool.name: tool for tool in _TOOL_LIST}


def _authenticate(token: str | None, auth_provider: AuthProvider | None) -> AuthUser:
    if not token:
        raise AuthenticationError("Missing bearer token")
    try:
        provider = auth_provider or get_auth_provider()
    except ValueError as e:
        raise AuthenticationError(str(e)) from e
    # Provider methods are async; the tool path is synchronous.
    return asyncio.run(provider.verify_token(token))


def invoke(
    name: str,
    payload: dict[str, Any] | None,
    *,
    store: Store,
    token: str | None = None,
    auth_provider: AuthProvider | None = None,
    generator_factory: Callable[[], TitleGenerator] | None = None,
) -> Result[dict[str, Any]]:
    """Validate ``payload``, run tool ``name`` and return its camelCase output."""
    tool = TOOLS.get(name)
    if tool is None:
        return Err(ValidationError(f"Unknown tool: {name}", code=ErrorCode.UNKNOWN_TOOL))

    try:
        request = tool.input_model.model_validate(payload or {})
    except pydantic.ValidationError as e:
        return Err(ValidationError(f"Invalid input for {name}: {e}"))

    ctx = ToolContext(store=store, generator_factory=generator_factory)
    if tool.private:
        try:
            ctx.user = _authenticate(token, auth_provider)
        except RosterError as e:
            logger.warning("Rejected %s: %s", name, e.message)
            return Err(e)

    result = tool.execute(ctx, request)
    if isinstance(result, Err):
        return result

    output = tool.output_model.model_validate(result.value.model_dump())
    return Ok(output.model_dump(by_alias=True, mode="json"))
