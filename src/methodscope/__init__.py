"""methodscope: explore per-tick method call frequency reports.

Usage:
    from methodscope import Blob, ReportViewer

    viewer = ReportViewer()
    await viewer.load(Blob.from_path("method-calls.json"))
    viewer.select_method("net.minecraft.server.MinecraftServer.tick")
    chart = viewer.chart_view()

Pure helpers work on a Report directly:

    from methodscope import all_methods, extract_series, filter_methods, ingest

    report = ingest(Blob.from_path("method-calls.json"))
    catalog = filter_methods(all_methods(report), "tick")
    points = extract_series(report, catalog[0])
"""

__version__ = "0.1.0"

# Catalog
from methodscope.catalog import all_methods, filter_methods

# Configuration
from methodscope.config import ViewerSettings

# Errors
from methodscope.errors import (
    DecodeError,
    IngestError,
    InvalidTransitionError,
    MethodscopeError,
    SchemaError,
    UnsupportedFormatError,
)

# Ingestion
from methodscope.ingestion import Blob, MediaType, ingest, ingest_async, media_type_for

# Report model
from methodscope.report import (
    MethodCounts,
    Report,
    SamplingMetadata,
    SummaryStatistics,
    Tick,
    TopMethod,
    validate_report,
)

# Series
from methodscope.series import ChartData, ChartSeries, SeriesPoint, build_chart, extract_series

# View
from methodscope.view import (
    CatalogView,
    Empty,
    Failed,
    Loaded,
    Loading,
    ReportViewer,
    SummaryView,
    ViewState,
    transition,
)

__all__ = [
    # Version
    "__version__",
    # Report
    "Report",
    "Tick",
    "MethodCounts",
    "SamplingMetadata",
    "SummaryStatistics",
    "TopMethod",
    "validate_report",
    # Ingestion
    "Blob",
    "MediaType",
    "media_type_for",
    "ingest",
    "ingest_async",
    # Catalog
    "all_methods",
    "filter_methods",
    # Series
    "SeriesPoint",
    "ChartSeries",
    "ChartData",
    "extract_series",
    "build_chart",
    # View
    "ReportViewer",
    "ViewState",
    "Empty",
    "Loading",
    "Loaded",
    "Failed",
    "CatalogView",
    "SummaryView",
    "transition",
    # Config
    "ViewerSettings",
    # Errors
    "MethodscopeError",
    "IngestError",
    "DecodeError",
    "SchemaError",
    "UnsupportedFormatError",
    "InvalidTransitionError",
]
