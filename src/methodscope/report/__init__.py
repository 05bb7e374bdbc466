"""Report data model and validation."""

from methodscope.report.models import (
    MethodCounts,
    Report,
    SamplingMetadata,
    SummaryStatistics,
    Tick,
    TopMethod,
)
from methodscope.report.operations import validate_report

__all__ = [
    # Models
    "Report",
    "Tick",
    "MethodCounts",
    "SamplingMetadata",
    "SummaryStatistics",
    "TopMethod",
    # Operations
    "validate_report",
]
