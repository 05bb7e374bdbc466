"""Per-method time-series extraction.

Usage:
    points = extract_series(report, "org.foo.Bar.run")
    chart = build_chart(report, "org.foo.Bar.run")
"""

from __future__ import annotations

from collections.abc import Sequence

from methodscope.report import Report
from methodscope.series.models import ChartData, ChartSeries, SeriesPoint

DEFAULT_TICK_LABEL = "Tick {tick}"
DEFAULT_SERIES_LABEL = "Calls per tick for {method}"


def tick_label(tick: int, label_format: str = DEFAULT_TICK_LABEL) -> str:
    """Presentation label for a tick number."""
    return label_format.format(tick=tick)


def extract_series(
    report: Report,
    method_id: str,
    label_format: str = DEFAULT_TICK_LABEL,
) -> tuple[SeriesPoint, ...]:
    """Tick-aligned call counts for one method.

    Returns one point per tick in report order. Ticks that did not record the
    method count as zero, so a method missing from every tick yields an
    all-zero series of full length rather than an error.

    Args:
        report: Report to project.
        method_id: Method to extract; need not appear in the report.
        label_format: Format string for tick labels, receives ``tick``.

    Returns:
        Tuple of SeriesPoint, ``len(report.ticks)`` long.
    """
    return tuple(
        SeriesPoint(
            label=tick_label(t.tick, label_format),
            count=t.method_counts.count(method_id),
        )
        for t in report.ticks
    )


def series_to_chart(
    method_id: str,
    points: Sequence[SeriesPoint],
    series_label_format: str = DEFAULT_SERIES_LABEL,
) -> ChartData:
    """Wrap extracted points as a single-dataset chart render request."""
    return ChartData(
        labels=tuple(p.label for p in points),
        series=(
            ChartSeries(
                label=series_label_format.format(method=method_id),
                points=tuple(p.count for p in points),
            ),
        ),
    )


def build_chart(
    report: Report,
    method_id: str,
    label_format: str = DEFAULT_TICK_LABEL,
    series_label_format: str = DEFAULT_SERIES_LABEL,
) -> ChartData:
    """Extract a method's series and build its chart render request."""
    points = extract_series(report, method_id, label_format)
    return series_to_chart(method_id, points, series_label_format)
