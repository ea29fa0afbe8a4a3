from __future__ import annotations

from simple_result import Err, Ok, err, is_err, is_ok, ok


def test_factories() -> None:
    assert isinstance(ok("foo"), Ok)
    assert isinstance(err("foo"), Err)
    assert isinstance(ok(None), Ok)
    assert isinstance(err(None), Err)


def test_factories_do_not_copy() -> None:
    value = ["foo"]
    assert ok(value).unwrap() is value
    assert err(value).unwrap_err() is value


def test_type_guards() -> None:
    assert is_ok(ok(1))
    assert not is_ok(err(1))
    assert is_err(err(1))
    assert not is_err(ok(1))
