from __future__ import annotations

from typing import List, Sequence

from .benchmark import format_duration
from .enums import RouteStatus, WeightDimension
from .results import AverageRuntime, Comparison, RouteResult, TimedRun

_ROUTE_NAMES = {
    WeightDimension.TIME: "fastest",
    WeightDimension.COST: "cheapest",
    WeightDimension.HOPS: "most direct",
}


def format_route(result: RouteResult) -> str:
    if result.status is RouteStatus.UNREACHABLE:
        return f"No path found ({result.algorithm.label})"
    if result.status is RouteStatus.NEGATIVE_CYCLE:
        return f"Negative cycle reachable from the source ({result.algorithm.label})"
    route = " -> ".join(result.path)
    if result.dimension is WeightDimension.HOPS:
        return f"Route: {route} | hops={result.distance}"
    return f"Route: {route} | {result.dimension.value}={result.distance:.2f}"


def format_timed_run(run: TimedRun, millisecond_threshold_ns: int = 1_000_000) -> str:
    if not run.ok:
        return run.error or "Unknown error"
    name = _ROUTE_NAMES[run.choice.dimension].capitalize()
    lines = [format_route(run.result)] if run.result is not None else []
    lines.append(
        f"{name} route completed in {format_duration(run.elapsed_ns, millisecond_threshold_ns)}"
    )
    return "\n".join(lines)


def format_average(average: AverageRuntime, millisecond_threshold_ns: int = 1_000_000) -> str:
    if average.mean_ns is None:
        return f"{average.choice.label}: {average.error}"
    duration = format_duration(average.mean_ns, millisecond_threshold_ns)
    return (
        f"{average.choice.label}: average over {len(average.samples_ns)} runs = {duration}"
    )


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Left-align the first column, right-align the rest."""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    rule = "-" * (sum(widths) + (len(headers) - 1) * 3)
    lines: List[str] = [" | ".join(h.ljust(w) for h, w in zip(headers, widths)), rule]
    for row in rows:
        cells = [
            cell.ljust(widths[i]) if i == 0 else cell.rjust(widths[i])
            for i, cell in enumerate(row)
        ]
        lines.append(" | ".join(cells))
    lines.append(rule)
    return "\n".join(lines)


def format_comparison(comparison: Comparison, millisecond_threshold_ns: int = 1_000_000) -> str:
    rows = []
    for index, run in enumerate(comparison.runs, start=1):
        runtime = (
            format_duration(run.elapsed_ns, millisecond_threshold_ns) if run.ok else "failed"
        )
        rows.append([str(index), run.choice.algorithm.label, runtime])

    lines = [f"Comparing {comparison.kind} routes"]
    lines.append(format_table(["ID", "Algorithm", "Runtime"], rows))
    for run in comparison.runs:
        if not run.ok:
            lines.append(f"{run.choice.algorithm.label}: {run.error}")
        elif run.result is not None and not run.result.found:
            lines.append(format_route(run.result))
    lines.append(comparison.verdict)
    return "\n".join(lines)
