"""Method catalog operations.

The catalog is derived from a Report on demand and never stored on it.

Usage:
    catalog = all_methods(report)
    visible = filter_methods(catalog, "tick")
"""

from __future__ import annotations

from collections.abc import Sequence

from methodscope.report import Report


def all_methods(report: Report) -> tuple[str, ...]:
    """Distinct method ids seen in any tick, in first-seen order.

    Ticks are walked in report order (ascending tick); within a tick the
    mapping's own key order is used. Repeated calls on the same Report
    return identical sequences.

    Args:
        report: Report to index.

    Returns:
        Method ids without duplicates.
    """
    seen: dict[str, None] = {}
    for tick in report.ticks:
        for method_id in tick.method_counts:
            seen.setdefault(method_id, None)
    return tuple(seen)


def filter_methods(catalog: Sequence[str], query: str) -> tuple[str, ...]:
    """Case-insensitive substring filter that keeps catalog order.

    An empty query returns the whole catalog. No match returns an empty
    tuple; that is a displayable state, not an error.
    """
    if not query:
        return tuple(catalog)
    needle = query.casefold()
    return tuple(m for m in catalog if needle in m.casefold())
