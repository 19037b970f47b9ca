"""
Shared pytest fixtures for the design pattern exercises.

This file contains reusable fixtures for:
- Environment setup
- A manually advanced clock and services driven by it
- Capturing warnings logged by the monitoring proxy
"""

import asyncio
import logging
import os
from typing import Any, Callable, Iterator, List, Optional

import pytest

from designpatterns.monitoring.service import Service

PROXY_LOGGER = "designpatterns.monitoring.proxy"


# ============================================================================
# Environment Setup
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables before any tests run."""
    os.environ["ENV"] = "test"
    os.environ["LOG_LEVEL"] = "DEBUG"
    yield


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Drop handlers added to the root logger during the test and restore its level."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


# ============================================================================
# Clock and Services
# ============================================================================


class FakeClock:
    """Clock that only moves when advance() is called."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ClockedService(Service):
    """Service whose calls take `duration` seconds on a FakeClock."""

    def __init__(self, clock: FakeClock, duration: float, result: Any = True):
        self.clock = clock
        self.duration = duration
        self.result = result
        self.error: Optional[Exception] = None
        self.calls: List[str] = []

    def _run(self, name: str) -> None:
        self.calls.append(name)
        self.clock.advance(self.duration)
        if self.error is not None:
            raise self.error

    def do_something(self) -> None:
        self._run("do_something")

    async def do_something_async(self) -> None:
        await asyncio.sleep(0)
        self._run("do_something_async")

    async def get_result_async(self) -> bool:
        await asyncio.sleep(0)
        self._run("get_result_async")
        return self.result


class ScriptedDelayService(Service):
    """Service whose successive calls sleep for the given delays (seconds)."""

    def __init__(self, delays: List[float]):
        self._delays = iter(delays)

    def do_something(self) -> None:
        pass

    async def do_something_async(self) -> None:
        await asyncio.sleep(next(self._delays))

    async def get_result_async(self) -> bool:
        await asyncio.sleep(next(self._delays))
        return True


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def clocked_service(fake_clock) -> Callable[..., ClockedService]:
    """Factory for ClockedService instances bound to fake_clock."""

    def _make(duration: float, result: Any = True) -> ClockedService:
        return ClockedService(fake_clock, duration, result)

    return _make


@pytest.fixture
def scripted_service() -> Callable[[List[float]], ScriptedDelayService]:
    return ScriptedDelayService


# ============================================================================
# Log Capture
# ============================================================================


@pytest.fixture
def proxy_warnings(caplog) -> Callable[[], List[str]]:
    """Return a callable listing the proxy's warning messages so far."""
    caplog.set_level(logging.WARNING, logger=PROXY_LOGGER)

    def _messages() -> List[str]:
        return [
            record.getMessage()
            for record in caplog.records
            if record.name == PROXY_LOGGER and record.levelno == logging.WARNING
        ]

    return _messages
