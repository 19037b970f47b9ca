"""
Tests for InterceptedCall timing state.
"""

from datetime import timedelta

import pytest

from designpatterns.exceptions import InvalidProxyState
from designpatterns.monitoring.timer import InterceptedCall


@pytest.mark.unit
class TestInterceptedCall:
    """Tests for InterceptedCall."""

    def test_records_call_details(self, fake_clock):
        fake_clock.advance(5.0)

        call = InterceptedCall("get_result_async", (1, "a"), {"flag": True}, clock=fake_clock)

        assert call.method_name == "get_result_async"
        assert call.args == (1, "a")
        assert call.kwargs == {"flag": True}
        assert call.start_time == 5.0
        assert call.end_time is None

    def test_missing_method_name_fails_fast(self, fake_clock):
        with pytest.raises(InvalidProxyState):
            InterceptedCall("", clock=fake_clock)

    def test_stop_returns_elapsed(self, fake_clock):
        call = InterceptedCall("do_something", clock=fake_clock)
        fake_clock.advance(0.25)

        assert call.stop() == timedelta(milliseconds=250)
        assert call.end_time == 0.25

    def test_stop_only_once(self):
        """Test a second stop() does not read the clock again."""
        clock = iter([1.0, 1.25]).__next__
        call = InterceptedCall("do_something", clock=clock)

        first = call.stop()
        second = call.stop()

        assert first == second == timedelta(milliseconds=250)

    def test_elapsed_ms_truncates(self, fake_clock):
        call = InterceptedCall("do_something", clock=fake_clock)
        fake_clock.advance(0.1509)
        call.stop()

        assert call.elapsed_ms == 150

    def test_elapsed_while_running(self, fake_clock):
        call = InterceptedCall("do_something", clock=fake_clock)
        fake_clock.advance(0.03)

        assert call.elapsed_ms == 30
        assert call.end_time is None
