"""
Service capability set monitored by the performance proxy.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional

from designpatterns.settings import settings


class Service(ABC):
    """One synchronous operation and two asynchronous ones."""

    @abstractmethod
    def do_something(self) -> None:
        """Run synchronously, no result."""
        pass

    @abstractmethod
    async def do_something_async(self) -> None:
        """Complete asynchronously with no result."""
        pass

    @abstractmethod
    async def get_result_async(self) -> bool:
        """Complete asynchronously with a result."""
        pass


class SlowService(Service):
    """Service whose operations take a fixed amount of time."""

    def __init__(self, delay: Optional[timedelta] = None):
        """Initialize service.

        Args:
            delay: How long each operation takes (defaults to the configured demo delay)
        """
        self._delay = delay if delay is not None else settings.monitoring.demo_delay

    @property
    def delay(self) -> timedelta:
        return self._delay

    def do_something(self) -> None:
        time.sleep(self._delay.total_seconds())

    async def do_something_async(self) -> None:
        await asyncio.sleep(self._delay.total_seconds())

    async def get_result_async(self) -> bool:
        await asyncio.sleep(self._delay.total_seconds())
        return True
