"""Record operations for the todos table."""

import logging

from sqlalchemy import select

from core.db import Store, Todo
from core.errors import GenerationError, NotFoundError
from core.models import DeleteTodoResult, TodoList, TodoOut
from core.result import returns_result
from core.services.generation import TitleGenerator

logger = logging.getLogger(__name__)


def _to_out(todo: Todo) -> TodoOut:
    return TodoOut(id=todo.id, title=todo.title, completed=todo.completed == 1)


@returns_result("Error listing todos")
def list_todos(store: Store) -> TodoList:
    with store.session() as session:
        todos = session.scalars(select(Todo).order_by(Todo.id)).all()
        return TodoList(todos=[_to_out(t) for t in todos])


@returns_result("Error generating todo")
def generate_todo(store: Store, generator: TitleGenerator) -> TodoOut:
    title = generator.generate_title()
    if not title or not title.strip():
        raise GenerationError("Failed to generate todo")

    with store.session() as session:
        todo = Todo(title=title, completed=0)
        session.add(todo)
        session.commit()
        logger.info("Created todo %d", todo.id)
        return _to_out(todo)


@returns_result("Error toggling todo")
def toggle_todo(store: Store, todo_id: int) -> TodoOut:
    with store.session() as session:
        todo = session.get(Todo, todo_id)
        if todo is None:
            raise NotFoundError(f"Todo {todo_id} not found")

        todo.completed = 0 if todo.completed == 1 else 1
        session.commit()
        return _to_out(todo)


@returns_result("Error deleting todo")
def delete_todo(store: Store, todo_id: int) -> DeleteTodoResult:
    with store.session() as session:
        todo = session.get(Todo, todo_id)
        if todo is None:
            raise NotFoundError(f"Todo {todo_id} not found")

        session.delete(todo)
        session.commit()
        logger.info("Deleted todo %d", todo_id)
        return DeleteTodoResult(success=True, deleted_id=todo_id)
