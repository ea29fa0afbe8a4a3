from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, Generic, Literal, NoReturn, TypeAlias, TypeVar, Union, final

from simple_result.errors import UnwrapError
from simple_result.logging import logger

T_co = TypeVar("T_co", covariant=True)  # Success type
E_co = TypeVar("E_co", covariant=True)  # Error type
U = TypeVar("U")
F = TypeVar("F")

# values of these types compare by value under strict equality, everything else by identity
_PRIMITIVES: Final = (complex, str, bytes, type(None))
_NUMBERS: Final = (int, float)


def _strict_equals(a: object, b: object) -> bool:
    # int and float form one number type, bool stays apart, nan never equals itself
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, _NUMBERS) and isinstance(b, _NUMBERS):
        return a == b
    if isinstance(a, _PRIMITIVES):
        return type(a) is type(b) and a == b
    return a is b


def _fault(result: Result[Any, Any], op: str, message: str, cause: object) -> NoReturn:
    logger.debug("Called `Result.%s()` on an `%s` value", op, type(result).__name__)
    exc = UnwrapError(result, message)
    if isinstance(cause, BaseException):
        raise exc from cause
    raise exc


@final
class Ok(Generic[T_co]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T_co) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = "Ok is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = "Ok is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Ok, (self._value,))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    @property
    def ok_value(self) -> T_co:
        """
        Return the inner value.
        """
        return self._value

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def and_(self, res: Result[U, F]) -> Result[U, F]:
        """
        Return `res`, discarding this value.
        """
        return res

    def and_then(self, fn: ControlFlowFn[U, F]) -> Result[U, F]:
        """
        Call `fn` once and return its result.
        """
        return fn()

    def or_(self, res: object) -> Ok[T_co]:  # noqa: ARG002
        """
        Return self, `res` is ignored.
        """
        return self

    def or_else(self, fn: object) -> Ok[T_co]:  # noqa: ARG002
        """
        Return self without calling `fn`.
        """
        return self

    def unwrap(self) -> T_co:
        """
        Return the value.
        """
        return self._value

    def unwrap_err(self) -> NoReturn:
        """
        Raise an `UnwrapError` whose message is the string form of the value.
        """
        _fault(self, "unwrap_err", str(self._value), self._value)

    def unwrap_or(self, default: object) -> T_co:  # noqa: ARG002
        """
        Return the value, `default` is ignored.
        """
        return self._value

    def expect(self, message: str) -> T_co:  # noqa: ARG002
        """
        Return the value.
        """
        return self._value

    def contains(self, value: object) -> bool:
        """
        Return `True` if the value strictly equals `value`.
        """
        return _strict_equals(self._value, value)

    def contains_err(self, value: object) -> Literal[False]:  # noqa: ARG002
        return False


@final
class Err(Generic[E_co]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __slots__ = ("_value",)

    def __init__(self, value: E_co) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = "Err is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = "Err is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Err, (self._value,))

    def __repr__(self) -> str:
        return f"Err({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    @property
    def err_value(self) -> E_co:
        """
        Return the inner error.
        """
        return self._value

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def and_(self, res: object) -> Err[E_co]:  # noqa: ARG002
        """
        Return self, `res` is ignored.
        """
        return self

    def and_then(self, fn: object) -> Err[E_co]:  # noqa: ARG002
        """
        Return self without calling `fn`.
        """
        return self

    def or_(self, res: Result[U, F]) -> Result[U, F]:
        """
        Return `res`, discarding this error.
        """
        return res

    def or_else(self, fn: ControlFlowFn[U, F]) -> Result[U, F]:
        """
        Call `fn` once and return its result.
        """
        return fn()

    def unwrap(self) -> NoReturn:
        """
        Raise an `UnwrapError` whose message is the string form of the error.
        """
        _fault(self, "unwrap", str(self._value), self._value)

    def unwrap_err(self) -> E_co:
        """
        Return the error.
        """
        return self._value

    def unwrap_or(self, default: U) -> U:
        """
        Return `default`.
        """
        return default

    def expect(self, message: str) -> NoReturn:
        """
        Raise an `UnwrapError` carrying exactly `message`. The error itself is
        left out of the message and only kept as the exception cause.
        """
        _fault(self, "expect", message, self._value)

    def contains(self, value: object) -> Literal[False]:  # noqa: ARG002
        return False

    def contains_err(self, value: object) -> bool:
        """
        Return `True` if the error strictly equals `value`.
        """
        return _strict_equals(self._value, value)


# define Result as a generic type alias for use
# in type annotations
"""
Alternative error handling modelled on Rust's `std::result::Result`.

A result is either `Ok`, carrying a success value, or `Err`, carrying an error
value. Combinators never raise; only `unwrap`, `unwrap_err` and `expect` do,
and only when called on the wrong variant.
"""
Result: TypeAlias = Union[Ok[T_co], Err[E_co]]

"""
Callback taken by `and_then` and `or_else`.
"""
ControlFlowFn: TypeAlias = Callable[[], Result[T_co, E_co]]

"""
A type to use in `isinstance` checks.
This is purely for convenience sake, as you could also just write `isinstance(res, (Ok, Err))`
"""  # noqa: E501
OkErr: Final = (Ok, Err)
