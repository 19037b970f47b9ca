"""
Per-call timing state for the performance proxy.
"""

import time
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Sequence

from designpatterns.exceptions import InvalidProxyState

Clock = Callable[[], float]

_ONE_MS = timedelta(milliseconds=1)


class InterceptedCall:
    """One invocation seen by the proxy: method, arguments and start time.

    The clock starts on construction and stops on the first call to stop().
    """

    def __init__(
        self,
        method_name: Optional[str],
        args: Sequence[Any] = (),
        kwargs: Optional[Dict[str, Any]] = None,
        clock: Clock = time.perf_counter,
    ):
        """Start timing a call.

        Args:
            method_name: Name of the invoked operation
            args: Positional arguments forwarded to the target
            kwargs: Keyword arguments forwarded to the target
            clock: Monotonic clock returning seconds

        Raises:
            InvalidProxyState: If the method name is missing
        """
        if not method_name:
            raise InvalidProxyState("Cannot resolve the invoked method")

        self.method_name = method_name
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self._clock = clock
        self.start_time: float = clock()
        self.end_time: Optional[float] = None

    def stop(self) -> timedelta:
        """Stop the clock (once) and return the elapsed time."""
        if self.end_time is None:
            self.end_time = self._clock()
        return self.elapsed

    @property
    def elapsed(self) -> timedelta:
        """Elapsed time, up to now if the call is still running."""
        end = self.end_time if self.end_time is not None else self._clock()
        return timedelta(seconds=end - self.start_time)

    @property
    def elapsed_ms(self) -> int:
        """Elapsed time in whole milliseconds."""
        return self.elapsed // _ONE_MS

    def __repr__(self) -> str:
        return f"InterceptedCall(method_name={self.method_name!r}, elapsed_ms={self.elapsed_ms})"
