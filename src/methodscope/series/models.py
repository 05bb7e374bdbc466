"""Time-series and chart payload models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """Call count of one method during one tick."""

    label: str
    count: int


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """One dataset of a line chart."""

    label: str
    points: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class ChartData:
    """Chart render request: x-axis labels plus aligned datasets.

    Every series has exactly one point per label.
    """

    labels: tuple[str, ...]
    series: tuple[ChartSeries, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{labels, series: [{label, points}]}`` shape."""
        return {
            "labels": list(self.labels),
            "series": [{"label": s.label, "points": list(s.points)} for s in self.series],
        }
