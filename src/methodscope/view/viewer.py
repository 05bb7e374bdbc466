"""ReportViewer: long-lived coordinator between user events and report views.

Usage:
    viewer = ReportViewer()

    state = await viewer.load(Blob.from_path("report.json"))
    viewer.set_filter("tick")
    viewer.select_method("net.minecraft.server.MinecraftServer.tick")

    catalog = viewer.catalog_view()
    chart = viewer.chart_view()
    summary = viewer.summary_view()

Concurrency:
    Everything runs on one asyncio event loop. submit() enters Loading
    synchronously and schedules ingestion as a task. Ingestions are queued
    behind a lock so only one decodes at a time, and every submit takes a new
    token: when an older ingestion finishes (or reaches the front of the
    queue) after a newer submit, its result is discarded. The final state
    always reflects the most recent submission. drain() waits for every
    pending ingestion.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from methodscope.catalog import filter_methods
from methodscope.config import ViewerSettings
from methodscope.errors import IngestError
from methodscope.ingestion import Blob, ingest_async
from methodscope.report import Report
from methodscope.series import ChartData, series_to_chart
from methodscope.view.cache import DerivedCache
from methodscope.view.models import (
    CatalogView,
    Dismiss,
    Empty,
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
from methodscope.view.operations import transition

logger = logging.getLogger(__name__)

StateListener = Callable[[ViewState], None]


class ReportViewer:
    """Holds the current view state and derives render requests from it.

    Args:
        settings: Viewer configuration. Defaults to ViewerSettings().
    """

    def __init__(self, settings: ViewerSettings | None = None) -> None:
        self.settings = settings if settings is not None else ViewerSettings()
        self._state: ViewState = Empty()
        self._last_token = 0
        self._lock = asyncio.Lock()
        self._cache = DerivedCache(
            enabled=self.settings.memoize_derived,
            label_format=self.settings.tick_label_format,
        )
        self._listeners: list[StateListener] = []
        # the event loop only keeps weak references to tasks
        self._tasks: set[asyncio.Task[ViewState]] = set()

    @property
    def state(self) -> ViewState:
        """Current view state."""
        return self._state

    @property
    def report(self) -> Report | None:
        """Report being explored, None unless Loaded."""
        if isinstance(self._state, Loaded):
            return self._state.report
        return None

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call listener with the new state after every state change.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _dispatch(self, event: ViewEvent) -> ViewState:
        old = self._state
        new = transition(old, event)
        if new is old:
            return new
        logger.debug(
            "View state %s -> %s on %s",
            type(old).__name__,
            type(new).__name__,
            type(event).__name__,
        )
        if isinstance(event, IngestSucceeded):
            self._cache.clear()
        self._state = new
        for listener in list(self._listeners):
            listener(new)
        return new

    def _is_current(self, token: int) -> bool:
        return isinstance(self._state, Loading) and self._state.token == token

    # --- Events ---

    def submit(self, blob: Blob) -> asyncio.Task[ViewState]:
        """Start ingesting blob, replacing whatever is loaded on success.

        Must be called from a running event loop. The state is Loading when
        this returns. The viewer holds on to the task until it finishes, so
        callers may drop the returned task.

        Returns:
            Task resolving to the view state after this ingestion is handled.
        """
        loop = asyncio.get_running_loop()
        self._last_token += 1
        token = self._last_token
        if isinstance(self._state, Loading):
            logger.info(
                "Submission %d supersedes in-flight submission %d", token, self._state.token
            )
        self._dispatch(Submit(token=token))
        task = loop.create_task(self._ingest(token, blob), name=f"methodscope-ingest-{token}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def load(self, blob: Blob) -> ViewState:
        """Submit blob and wait for its ingestion to be handled."""
        return await self.submit(blob)

    @property
    def pending(self) -> int:
        """Number of submitted ingestions not yet handled."""
        return len(self._tasks)

    async def drain(self) -> ViewState:
        """Wait until every submitted ingestion has been handled.

        Exceptions raised by the tasks are left on the tasks themselves.

        Returns:
            The view state once no ingestion is pending.
        """
        while self._tasks:
            await asyncio.wait(set(self._tasks))
        return self._state

    async def _ingest(self, token: int, blob: Blob) -> ViewState:
        async with self._lock:
            if not self._is_current(token):
                logger.debug("Skipping superseded submission %d (%s)", token, blob.describe())
                return self._state
            try:
                report = await ingest_async(blob)
            except IngestError as exc:
                if self._is_current(token):
                    logger.warning("Failed to ingest %s: %s", blob.describe(), exc)
                return self._dispatch(IngestFailed(token=token, error=exc))
            except Exception as exc:
                # Leave Loading before the bug surfaces from the task
                logger.exception("Unexpected error while ingesting %s", blob.describe())
                error = IngestError(f"{blob.describe()}: unexpected error while ingesting: {exc}")
                self._dispatch(IngestFailed(token=token, error=error))
                raise
            if not self._is_current(token):
                logger.debug("Discarding result of superseded submission %d", token)
            return self._dispatch(IngestSucceeded(token=token, report=report))

    def select_method(self, method_id: str) -> ViewState:
        """Select the method to chart. It need not be in the catalog."""
        return self._dispatch(SelectMethod(method_id=method_id))

    def set_filter(self, query: str) -> ViewState:
        """Change the catalog filter. The selected method is kept."""
        return self._dispatch(SetFilter(query=query))

    def dismiss(self) -> ViewState:
        """Leave the failed state, restoring the previous report if there was one."""
        return self._dispatch(Dismiss())

    # --- Render requests ---

    def catalog_view(self) -> CatalogView | None:
        """Visible method ids and highlight, None unless Loaded."""
        state = self._state
        if not isinstance(state, Loaded):
            return None
        catalog = self._cache.catalog(state.report)
        return CatalogView(
            methods=filter_methods(catalog, state.filter_query),
            selected_method=state.selected_method,
            filter_query=state.filter_query,
        )

    def chart_view(self) -> ChartData | None:
        """Chart for the selected method, None when nothing is selected."""
        state = self._state
        if not isinstance(state, Loaded) or state.selected_method is None:
            return None
        points = self._cache.series(state.report, state.selected_method)
        return series_to_chart(state.selected_method, points, self.settings.series_label_format)

    def summary_view(self) -> SummaryView | None:
        """Summary and metadata passthrough, None unless Loaded."""
        state = self._state
        if not isinstance(state, Loaded):
            return None
        report = state.report
        return SummaryView(
            summary=report.summary,
            metadata=report.metadata,
            server_name=report.server_name,
            server_version=report.server_version,
            tick_count=len(report.ticks),
        )
