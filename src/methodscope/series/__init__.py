"""Time-series extraction and chart payloads."""

from methodscope.series.models import ChartData, ChartSeries, SeriesPoint
from methodscope.series.operations import (
    DEFAULT_SERIES_LABEL,
    DEFAULT_TICK_LABEL,
    build_chart,
    extract_series,
    series_to_chart,
    tick_label,
)

__all__ = [
    # Models
    "SeriesPoint",
    "ChartSeries",
    "ChartData",
    # Operations
    "DEFAULT_TICK_LABEL",
    "DEFAULT_SERIES_LABEL",
    "tick_label",
    "extract_series",
    "series_to_chart",
    "build_chart",
]
