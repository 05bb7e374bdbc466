"""Explore a method call frequency report from the command line.

Usage:
    python explore_report.py method-calls.json
    python explore_report.py method-calls.json --filter tick
    python explore_report.py method-calls.json --method net.minecraft.server.MinecraftServer.tick
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from methodscope import Blob, Failed, IngestError, ReportViewer, ViewerSettings
from methodscope.logging import configure_logging


def print_summary(viewer: ReportViewer) -> None:
    view = viewer.summary_view()
    if view is None:
        return
    print(f"Server:            {view.server_name} ({view.server_version})")
    print(f"Sampling rate:     {view.metadata.sampling_rate_ms}ms")
    print(f"Ticks analyzed:    {view.tick_count}")
    print(f"Unique methods:    {view.summary.unique_method_count}")
    print(f"Avg calls/tick:    {view.summary.avg_calls_per_tick:.2f}")
    print(f"Threshold:         {view.metadata.excessive_call_threshold} calls")
    filters = ", ".join(view.metadata.method_filters) or "None"
    print(f"Method filters:    {filters}")

    if view.summary.top_methods:
        print("\nTop methods by call frequency:")
        print(f"  {'Avg/Tick':>10} {'Max':>8} {'Total':>10}  Method")
        for m in view.summary.top_methods:
            print(
                f"  {m.avg_calls_per_tick:>10.2f} {m.max_calls:>8} {m.total_calls:>10}"
                f"  {m.method_name}"
            )


def print_catalog(viewer: ReportViewer, limit: int) -> None:
    view = viewer.catalog_view()
    if view is None:
        return
    header = f"Methods matching {view.filter_query!r}" if view.filter_query else "Methods"
    print(f"\n{header}:")
    if view.is_empty:
        print("  No methods match the filter")
        return
    for method in view.methods[:limit]:
        marker = "*" if method == view.selected_method else " "
        print(f" {marker} {method}")
    if len(view.methods) > limit:
        print(f"  ... {len(view.methods) - limit} more")


def print_chart(viewer: ReportViewer) -> None:
    chart = viewer.chart_view()
    if chart is None:
        return
    series = chart.series[0]
    peak = max(series.points, default=0) or 1
    print(f"\n{series.label}:")
    for label, count in zip(chart.labels, series.points, strict=True):
        bar = "#" * round(40 * count / peak)
        print(f"  {label:>12} {count:>8} {bar}")


async def run(args: argparse.Namespace) -> int:
    settings = ViewerSettings()
    configure_logging(settings.log_level)
    viewer = ReportViewer(settings=settings)

    try:
        blob = Blob.from_path(args.path)
    except IngestError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    state = await viewer.load(blob)
    if isinstance(state, Failed):
        print(f"error: {state.message}", file=sys.stderr)
        return 1

    if args.filter:
        viewer.set_filter(args.filter)
    if args.method:
        viewer.select_method(args.method)

    print_summary(viewer)
    print_catalog(viewer, limit=args.limit)
    print_chart(viewer)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="explore-report",
        description="Explore a method call frequency report",
    )
    parser.add_argument("path", help="Report export (.json; .bin/.data are not decodable yet)")
    parser.add_argument("--filter", default="", help="Case-insensitive method substring")
    parser.add_argument("--method", default=None, help="Method to chart across ticks")
    parser.add_argument("--limit", type=int, default=50, help="Max catalog entries to print")
    args = parser.parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
