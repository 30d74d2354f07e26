"""
Uniform success/failure result for every roster operation.

Operations raise ``RosterError`` subclasses internally; ``returns_result``
turns those (and any SQLAlchemy failure) into ``Err`` at the operation
boundary so callers never have to mix exceptions with success flags.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from sqlalchemy.exc import SQLAlchemyError

from core.errors import RosterError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: RosterError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def returns_result(label: str) -> Callable[[Callable[..., Any]], Callable[..., Result[Any]]]:
    """Wrap an operation so it returns ``Ok``/``Err`` instead of raising.

    ``label`` prefixes the message of wrapped store failures, e.g.
    ``"Error fetching passengers: <driver message>"``.
    """

    def decorator(operation: Callable[..., Any]) -> Callable[..., Result[Any]]:
        @functools.wraps(operation)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any]:
            try:
                return Ok(operation(*args, **kwargs))
            except RosterError as e:
                return Err(e)
            except SQLAlchemyError as e:
                logger.exception("%s failed", label)
                return Err(StoreError(f"{label}: {e}"))

        return wrapper

    return decorator
