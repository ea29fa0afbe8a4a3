from __future__ import annotations

import pickle

import pytest

from simple_result import UnwrapError, err, ok


def test_unwrap_error_attributes() -> None:
    r = err("foo")
    e = UnwrapError(r, "bar")
    assert str(e) == "bar"
    assert e.message == "bar"
    assert e.result is r


def test_unwrap_error_is_not_raised_by_combinators() -> None:
    for r in (ok("foo"), err("foo")):
        r.and_(ok("bar"))
        r.and_then(lambda: err("bar"))
        r.or_(err("bar"))
        r.or_else(lambda: ok("bar"))
        r.unwrap_or("bar")
        r.contains("bar")
        r.contains_err("bar")


def test_unwrap_error_pickle() -> None:
    e = UnwrapError(ok("foo"), "bar")
    restored = pickle.loads(pickle.dumps(e))  # noqa: S301
    assert isinstance(restored, UnwrapError)
    assert restored.message == "bar"
    assert restored.result == ok("foo")


def test_unwrap_error_is_an_exception() -> None:
    with pytest.raises(Exception, match="foo"):
        ok("foo").unwrap_err()
