from __future__ import annotations

from simple_result.errors import UnwrapError
from simple_result.result import ControlFlowFn, Err, Ok, OkErr, Result
from simple_result.utils import err, is_err, is_ok, ok

__all__ = [
    "ControlFlowFn",
    "Err",
    "Ok",
    "OkErr",
    "Result",
    "UnwrapError",
    "err",
    "is_err",
    "is_ok",
    "ok",
]
