"""View state machine, render requests and the ReportViewer coordinator."""

from methodscope.view.cache import DerivedCache
from methodscope.view.models import (
    CatalogView,
    Dismiss,
    Empty,
    Failed,
    IngestFailed,
    IngestSucceeded,
    Loaded,
    Loading,
    SelectMethod,
    SetFilter,
    Submit,
    SummaryView,
    ViewEvent,
    ViewState,
)
from methodscope.view.operations import previous_report, transition
from methodscope.view.viewer import ReportViewer

__all__ = [
    # States
    "ViewState",
    "Empty",
    "Loading",
    "Loaded",
    "Failed",
    # Events
    "ViewEvent",
    "Submit",
    "IngestSucceeded",
    "IngestFailed",
    "SelectMethod",
    "SetFilter",
    "Dismiss",
    # Render requests
    "CatalogView",
    "SummaryView",
    # Operations
    "transition",
    "previous_report",
    "DerivedCache",
    "ReportViewer",
]
