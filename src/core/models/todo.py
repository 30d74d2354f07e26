from core.models.base import WireModel


class TodoOut(WireModel):
    id: int
    title: str | None
    completed: bool


class TodoList(WireModel):
    todos: list[TodoOut]


class TodoEnvelope(WireModel):
    todo: TodoOut


class TodoIdRequest(WireModel):
    id: int


class DeleteTodoResult(WireModel):
    success: bool
    deleted_id: int
