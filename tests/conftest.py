from __future__ import annotations

import logging

import pytest

from simple_result.logging import logger


def pytest_configure() -> None:
    logger.setLevel(logging.ERROR)  # set log levels very high for tests


@pytest.fixture
def debug_logs(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    monkeypatch.setattr(logger, "propagate", True)
    caplog.set_level(logging.DEBUG, logger="simple_result")
    return caplog
