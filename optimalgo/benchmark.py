from __future__ import annotations

import statistics
import time
from typing import Callable, Dict, List, Sequence, Tuple, TypeVar

from .results import TimedRun

T = TypeVar("T")

Clock = Callable[[], int]


def timed(func: Callable[[], T], clock: Clock = time.perf_counter_ns) -> Tuple[T, int]:
    """Call ``func`` once and return its result with the elapsed nanoseconds."""

    start = clock()
    result = func()
    end = clock()
    return result, end - start


def mean_ns(samples: Sequence[int]) -> int:
    if not samples:
        raise ValueError("samples must not be empty")
    return sum(samples) // len(samples)


def summarize_samples(samples: Sequence[int]) -> Dict[str, float]:
    if not samples:
        raise ValueError("samples must not be empty")
    return {
        "mean": statistics.mean(samples),
        "median": statistics.median(samples),
        "min": min(samples),
        "max": max(samples),
    }


def format_duration(elapsed_ns: int, millisecond_threshold_ns: int = 1_000_000) -> str:
    """Render in whole milliseconds, falling back to nanoseconds below one millisecond."""

    millis = elapsed_ns // millisecond_threshold_ns
    if millis == 0:
        return f"{elapsed_ns} ns"
    return f"{millis} ms"


def determine_fastest(runs: Sequence[TimedRun]) -> str:
    """Name the strictly fastest successful run, or report a tie."""

    succeeded: List[TimedRun] = [run for run in runs if run.ok]
    if len(succeeded) < 2:
        return "Not enough successful runs to compare"
    best = min(run.elapsed_ns for run in succeeded)
    winners = [run for run in succeeded if run.elapsed_ns == best]
    if len(winners) > 1:
        if len(winners) == len(succeeded):
            return "Both are equally fast" if len(winners) == 2 else "All are equally fast"
        names = " and ".join(run.choice.algorithm.label for run in winners)
        return f"{names} are equally fast"
    return f"{winners[0].choice.algorithm.label} is faster"
