"""Report data models.

A Report is the immutable, validated form of one profiler export. Per-tick
call counts live in MethodCounts, which owns the "missing key means zero"
rule so callers never have to remember it.

Usage:
    counts = MethodCounts({"org.foo.Bar.run": 3})
    counts.count("org.foo.Bar.run")  # 3
    counts.count("never.seen")  # 0
    "never.seen" in counts  # False
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


class MethodCounts(Mapping[str, int]):
    """Immutable method id -> call count mapping for a single tick.

    Standard Mapping access follows the Mapping contract (``counts[m]`` raises
    KeyError for unknown ids). ``count(m)`` is the zero-fill accessor: a method
    absent from the tick was called zero times during it.

    Key order is the order the profiler wrote the keys in.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts: dict[str, int] = dict(counts) if counts else {}

    def count(self, method_id: str) -> int:
        """Call count for method_id, 0 if the tick did not record it."""
        return self._counts.get(method_id, 0)

    def __getitem__(self, method_id: str) -> int:
        return self._counts[method_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, method_id: object) -> bool:
        return method_id in self._counts

    def __repr__(self) -> str:
        return f"MethodCounts({self._counts!r})"


@dataclass(frozen=True, slots=True)
class TopMethod:
    """One row of the report's top-K summary table."""

    method_name: str
    avg_calls_per_tick: float
    max_calls: int
    total_calls: int


@dataclass(frozen=True, slots=True)
class SummaryStatistics:
    """Upstream-computed summary. Never recomputed or cross-checked here.

    Attributes:
        unique_method_count: Distinct methods the profiler saw.
        avg_calls_per_tick: Mean total calls per tick.
        top_methods: Ranked descending by total_calls; not exhaustive.
    """

    unique_method_count: int
    avg_calls_per_tick: float
    top_methods: tuple[TopMethod, ...] = ()


@dataclass(frozen=True, slots=True)
class SamplingMetadata:
    """How the profiler sampled the server."""

    sampling_rate_ms: float
    excessive_call_threshold: float
    method_filters: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Tick:
    """One sampling interval.

    Attributes:
        tick: Sequence key, unique within a report.
        timestamp: Epoch-like timestamp, assumed non-decreasing for display.
        tick_duration_ms: Wall time of the tick.
        method_counts: Calls per method during this tick.
        method_trends: Opaque trend indicators, passed through unchanged.
        is_problem_tick: Flag computed by the profiler.
    """

    tick: int
    timestamp: int
    tick_duration_ms: float
    method_counts: MethodCounts = field(default_factory=MethodCounts)
    method_trends: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    is_problem_tick: bool = False


@dataclass(frozen=True, slots=True)
class Report:
    """Validated method call frequency report.

    Immutable once built. Derived views (method catalog, series) are computed
    from it and never stored on it.
    """

    server_name: str
    server_version: str
    metadata: SamplingMetadata
    summary: SummaryStatistics
    ticks: tuple[Tick, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the JSON-serializable export shape."""
        return {
            "server_name": self.server_name,
            "server_version": self.server_version,
            "ticks": [
                {
                    "tick": t.tick,
                    "timestamp": t.timestamp,
                    "method_counts": dict(t.method_counts),
                    "method_trends": dict(t.method_trends),
                    "tick_duration_ms": t.tick_duration_ms,
                    "is_problem_tick": t.is_problem_tick,
                }
                for t in self.ticks
            ],
            "metadata": {
                "sampling_rate_ms": self.metadata.sampling_rate_ms,
                "excessive_call_threshold": self.metadata.excessive_call_threshold,
                "method_filters": list(self.metadata.method_filters),
            },
            "summary": {
                "unique_method_count": self.summary.unique_method_count,
                "top_methods": [
                    {
                        "method_name": m.method_name,
                        "avg_calls_per_tick": m.avg_calls_per_tick,
                        "max_calls": m.max_calls,
                        "total_calls": m.total_calls,
                    }
                    for m in self.summary.top_methods
                ],
                "avg_calls_per_tick": self.summary.avg_calls_per_tick,
            },
        }
