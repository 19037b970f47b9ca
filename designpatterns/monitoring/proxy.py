"""
Performance Monitoring Proxy - Execution timing for a wrapped Service

Wraps a Service, forwards every call unchanged and logs a warning when a
call (sync or async) takes longer than the configured threshold.
"""

import logging
import time
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Awaitable, Callable, Dict, Iterator, Optional, Tuple, TypeVar

from designpatterns.exceptions import InvalidProxyState
from designpatterns.monitoring.service import Service
from designpatterns.monitoring.timer import Clock, InterceptedCall
from designpatterns.settings import settings

logger = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)

T = TypeVar("T")


class PerformanceMonitoringProxy(Service):
    """Service that times every call forwarded to another Service.

    Each operation is forwarded explicitly. Async operations are coroutines
    themselves, so the caller awaits the proxy exactly as it would await the
    target, and the threshold check runs once the target completes.
    """

    def __init__(
        self,
        target: Service,
        threshold: timedelta,
        clock: Clock = time.perf_counter,
    ):
        """Initialize proxy.

        Args:
            target: Service to monitor
            threshold: Calls slower than this are logged
            clock: Monotonic clock returning seconds

        Raises:
            InvalidProxyState: If target is not a Service or threshold is invalid
        """
        if not isinstance(target, Service):
            raise InvalidProxyState(
                f"Cannot monitor {type(target).__name__}: it does not implement Service"
            )
        if not isinstance(threshold, timedelta) or threshold < timedelta(0):
            raise InvalidProxyState(f"Invalid threshold: {threshold!r}")

        self._target = target
        self._threshold = threshold
        self._clock = clock

    @property
    def target(self) -> Service:
        return self._target

    @property
    def threshold(self) -> timedelta:
        return self._threshold

    def do_something(self) -> None:
        self._forward(self._target.do_something)

    async def do_something_async(self) -> None:
        await self._forward_async(self._target.do_something_async)

    async def get_result_async(self) -> bool:
        return await self._forward_async(self._target.get_result_async)

    def _forward(self, method: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call a target method synchronously under the threshold check."""
        with self._monitor(method, args, kwargs):
            return method(*args, **kwargs)

    async def _forward_async(
        self, method: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
    ) -> T:
        """Await a target coroutine method under the threshold check."""
        with self._monitor(method, args, kwargs):
            return await method(*args, **kwargs)

    @contextmanager
    def _monitor(
        self, method: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]
    ) -> Iterator[InterceptedCall]:
        """Time the enclosed forwarding call and check it against the threshold.

        Exceptions from the target pass through unchanged.

        Raises:
            InvalidProxyState: If the method has no resolvable name
        """
        call = InterceptedCall(
            getattr(method, "__name__", None), args, kwargs, clock=self._clock
        )
        failed = True
        try:
            yield call
            failed = False
        finally:
            self._check_threshold(call, failed=failed)

    def _check_threshold(self, call: InterceptedCall, failed: bool = False) -> bool:
        """Stop the call's clock and log if it ran strictly longer than the threshold.

        Returns:
            True if a line was logged
        """
        elapsed = call.stop()
        if elapsed <= self._threshold:
            return False

        threshold_ms = self._threshold / _ONE_MS
        outcome = "failed after" if failed else "took"
        logger.warning(
            f"Method {call.method_name} {outcome} {call.elapsed_ms}ms, "
            f"exceeding the threshold of {threshold_ms:.15g}ms."
        )
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(target={self._target!r}, "
            f"threshold={self._threshold!r})"
        )


def create(
    target: Service,
    threshold: Optional[timedelta] = None,
    clock: Clock = time.perf_counter,
) -> Service:
    """Wrap a Service in a performance monitoring proxy.

    Args:
        target: Service to monitor
        threshold: Calls slower than this are logged (defaults to MONITORING_THRESHOLD_MS)
        clock: Monotonic clock returning seconds

    Returns:
        Service forwarding to target

    Raises:
        InvalidProxyState: If the proxy cannot be built for target
    """
    if threshold is None:
        threshold = settings.monitoring.threshold

    proxy = PerformanceMonitoringProxy(target, threshold, clock=clock)
    logger.debug(f"Monitoring {type(target).__name__} with threshold {threshold}")
    return proxy
