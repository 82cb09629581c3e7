import pytest

from optimalgo.benchmark import (
    determine_fastest,
    format_duration,
    mean_ns,
    summarize_samples,
    timed,
)
from optimalgo.results import PQ_COST, PQ_TIME, RADIX_COST, RADIX_TIME, BELLMAN_FORD_COST, TimedRun


def clock_from(readings):
    values = iter(readings)
    return lambda: next(values)


class TestTimed:
    def test_returns_result_and_elapsed(self):
        result, elapsed = timed(lambda: "done", clock_from([100, 350]))
        assert result == "done"
        assert elapsed == 250

    def test_real_clock_is_non_negative(self):
        _, elapsed = timed(lambda: sum(range(1000)))
        assert elapsed >= 0


class TestFormatDuration:
    def test_sub_millisecond_uses_nanoseconds(self):
        assert format_duration(999_999) == "999999 ns"

    def test_milliseconds(self):
        assert format_duration(5_400_000) == "5 ms"

    def test_zero_is_reported_in_nanoseconds(self):
        assert format_duration(0) == "0 ns"

    def test_custom_threshold(self):
        assert format_duration(2_000, millisecond_threshold_ns=1_000) == "2 ms"


class TestSummaries:
    def test_mean_is_integer_division(self):
        assert mean_ns([10, 20, 31]) == 20

    def test_mean_of_empty_rejected(self):
        with pytest.raises(ValueError, match="samples must not be empty"):
            mean_ns([])

    def test_summarize_samples(self):
        summary = summarize_samples([4, 1, 7])
        assert summary == {"mean": 4, "median": 4, "min": 1, "max": 7}


class TestDetermineFastest:
    def test_strictly_faster(self):
        runs = [TimedRun(PQ_TIME, None, 30), TimedRun(RADIX_TIME, None, 10)]
        assert determine_fastest(runs) == "Dijkstra radix heap is faster"

    def test_tie_between_two(self):
        runs = [TimedRun(PQ_TIME, None, 10), TimedRun(RADIX_TIME, None, 10)]
        assert determine_fastest(runs) == "Both are equally fast"

    def test_partial_tie_among_three(self):
        runs = [
            TimedRun(PQ_COST, None, 5),
            TimedRun(RADIX_COST, None, 5),
            TimedRun(BELLMAN_FORD_COST, None, 9),
        ]
        assert determine_fastest(runs) == (
            "Dijkstra priority queue and Dijkstra radix heap are equally fast"
        )

    def test_failed_runs_are_excluded(self):
        runs = [
            TimedRun(PQ_COST, None, 0, error="Error: negative weights"),
            TimedRun(RADIX_COST, None, 0, error="Error: negative weights"),
            TimedRun(BELLMAN_FORD_COST, None, 9),
        ]
        assert determine_fastest(runs) == "Not enough successful runs to compare"
