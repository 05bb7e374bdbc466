"""View state, events and render requests.

The view state is a tagged union of four immutable states, so combinations
such as "a method selected while nothing is loaded" cannot be expressed.

Usage:
    state: ViewState = Empty()
    state = transition(state, Submit(token=1))
    state = transition(state, IngestSucceeded(token=1, report=report))
    state = transition(state, SelectMethod("org.foo.Bar.run"))
"""

from __future__ import annotations

from dataclasses import dataclass

from methodscope.errors import IngestError
from methodscope.report import Report, SamplingMetadata, SummaryStatistics

# --- States ---


@dataclass(frozen=True, slots=True)
class Empty:
    """No report has been submitted yet."""

    pass


@dataclass(frozen=True, slots=True)
class Loaded:
    """A report is held and can be explored.

    Attributes:
        report: The current report snapshot.
        selected_method: Method whose series is charted, if any. Independent of
            the filter: it may be hidden by the current filter query.
        filter_query: Catalog substring filter; empty shows everything.
    """

    report: Report
    selected_method: str | None = None
    filter_query: str = ""


@dataclass(frozen=True, slots=True)
class Loading:
    """An ingestion is in flight.

    Attributes:
        token: Submission token; only a completion carrying it is applied.
        previous: Report that was loaded when the submission started, kept
            untouched so a failed replace does not lose it.
    """

    token: int
    previous: Loaded | None = None


@dataclass(frozen=True, slots=True)
class Failed:
    """The last ingestion failed.

    Attributes:
        message: Human-readable failure message.
        kind: IngestError kind ("decode", "schema", "unsupported_format").
        previous: Report that was loaded before the failed replace, if any.
    """

    message: str
    kind: str = "ingest"
    previous: Loaded | None = None


ViewState = Empty | Loading | Loaded | Failed


# --- Events ---


@dataclass(frozen=True, slots=True)
class Submit:
    """A blob was submitted; ingestion starts under ``token``."""

    token: int


@dataclass(frozen=True, slots=True)
class IngestSucceeded:
    token: int
    report: Report


@dataclass(frozen=True, slots=True)
class IngestFailed:
    token: int
    error: IngestError


@dataclass(frozen=True, slots=True)
class SelectMethod:
    method_id: str


@dataclass(frozen=True, slots=True)
class SetFilter:
    query: str


@dataclass(frozen=True, slots=True)
class Dismiss:
    """Acknowledge a failure and return to the previous report (or Empty)."""

    pass


ViewEvent = Submit | IngestSucceeded | IngestFailed | SelectMethod | SetFilter | Dismiss


# --- Render requests ---


@dataclass(frozen=True, slots=True)
class CatalogView:
    """Catalog render request: visible method ids plus the highlight."""

    methods: tuple[str, ...]
    selected_method: str | None = None
    filter_query: str = ""

    @property
    def is_empty(self) -> bool:
        """True when nothing matches the filter (or the report has no methods)."""
        return not self.methods


@dataclass(frozen=True, slots=True)
class SummaryView:
    """Summary render request.

    ``summary`` and ``metadata`` are the report's own objects, passed through
    unmodified even when they disagree with the per-tick data.
    """

    summary: SummaryStatistics
    metadata: SamplingMetadata
    server_name: str
    server_version: str
    tick_count: int
