from unittest.mock import patch

import pytest

from gpplan.timer import Timer


def test_elapsed_converts_nanoseconds():
    with patch("time.perf_counter_ns", side_effect=[1_000_000, 3_500_000]):
        timer = Timer()
        assert timer.elapsed_ms() == pytest.approx(2_500_000 / 1e6)


def test_lap_restarts():
    with patch("time.perf_counter_ns", side_effect=[0, 4_000_000, 4_000_000]):
        timer = Timer()
        assert timer.lap_ms() == pytest.approx(4_000_000 / 1e6)
        assert timer.elapsed_ms() == 0.0


def test_start_resets_origin():
    with patch("time.perf_counter_ns", side_effect=[0, 7_000_000, 7_000_000]):
        timer = Timer()
        timer.start()
        assert timer.elapsed_ms() == 0.0


def test_timed_out():
    with patch("time.perf_counter_ns", side_effect=[0, 500_000, 2_000_000]):
        timer = Timer(timeout=1.0)
        assert timer.timed_out() is False
        assert timer.timed_out() is True


def test_timeout_is_strict():
    with patch("time.perf_counter_ns", side_effect=[0, 1_000_000]):
        timer = Timer(timeout=1.0)
        assert timer.timed_out() is False


def test_timeout_can_be_changed():
    with patch("time.perf_counter_ns", side_effect=[0, 3_000_000]):
        timer = Timer(timeout=5.0)
        timer.timeout = 2.0
        assert timer.timed_out() is True


def test_real_clock_is_monotonic():
    timer = Timer()
    first = timer.elapsed_ms()
    second = timer.elapsed_ms()
    assert 0.0 <= first <= second