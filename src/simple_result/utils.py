from __future__ import annotations

from typing import Any, TypeVar

from typing_extensions import TypeIs

from simple_result.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")


def ok(value: T) -> Result[T, Any]:
    """Wrap `value` in an `Ok` result. Any value, `None` included, is accepted."""
    return Ok(value)


def err(value: E) -> Result[Any, E]:
    """Wrap `value` in an `Err` result. Any value, `None` included, is accepted."""
    return Err(value)


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
