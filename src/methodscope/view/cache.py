"""Memoization of derived report views.

Entries are keyed by report identity. Seeing a different Report object drops
everything cached for the previous one, so a new ingestion invalidates all
derived state. Caching is an optimization only: with ``enabled=False`` every
call recomputes and results are identical.
"""

from __future__ import annotations

from methodscope.catalog import all_methods
from methodscope.report import Report
from methodscope.series import DEFAULT_TICK_LABEL, SeriesPoint, extract_series


class DerivedCache:
    """Per-snapshot cache for the method catalog and per-method series."""

    def __init__(self, enabled: bool = True, label_format: str = DEFAULT_TICK_LABEL) -> None:
        self.enabled = enabled
        self.label_format = label_format
        self._report: Report | None = None
        self._catalog: tuple[str, ...] | None = None
        self._series: dict[str, tuple[SeriesPoint, ...]] = {}

    def _bind(self, report: Report) -> None:
        if report is not self._report:
            self.clear()
            self._report = report

    def clear(self) -> None:
        """Drop all cached values."""
        self._report = None
        self._catalog = None
        self._series = {}

    def catalog(self, report: Report) -> tuple[str, ...]:
        """all_methods(report), memoized per snapshot."""
        if not self.enabled:
            return all_methods(report)
        self._bind(report)
        if self._catalog is None:
            self._catalog = all_methods(report)
        return self._catalog

    def series(self, report: Report, method_id: str) -> tuple[SeriesPoint, ...]:
        """extract_series(report, method_id), memoized per (snapshot, method)."""
        if not self.enabled:
            return extract_series(report, method_id, self.label_format)
        self._bind(report)
        points = self._series.get(method_id)
        if points is None:
            points = extract_series(report, method_id, self.label_format)
            self._series[method_id] = points
        return points

    @property
    def cached_series_count(self) -> int:
        """Number of method series currently held."""
        return len(self._series)
