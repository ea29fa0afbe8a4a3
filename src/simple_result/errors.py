from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from simple_result.result import Result


class UnwrapError(Exception):
    """
    Exception raised from ``unwrap``, ``unwrap_err`` and ``expect`` calls made
    on the wrong variant.

    This signals a programmer error, never a domain error. The original
    ``Result`` can be accessed via the ``.result`` attribute.
    """

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.message = message
        self._result = result

    @property
    def result(self) -> Result[Any, Any]:
        """
        Returns the original result.
        """
        return self._result

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self._result, self.message))
