"""View state transitions.

transition() is pure: it never mutates a state, it returns the next one.
Events that make no sense in the current state raise InvalidTransitionError.
"""

from __future__ import annotations

from methodscope.errors import InvalidTransitionError
from methodscope.view.models import (
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
    ViewEvent,
    ViewState,
)


def previous_report(state: ViewState) -> Loaded | None:
    """The last successfully loaded snapshot reachable from state, if any."""
    if isinstance(state, Loaded):
        return state
    if isinstance(state, (Loading, Failed)):
        return state.previous
    return None


def _on_submit(state: ViewState, event: Submit) -> ViewState:
    # Selection and filter of the replaced report are reset on success; the
    # snapshot itself is only kept for recovery after a failed replace.
    return Loading(token=event.token, previous=previous_report(state))


def _is_current(state: ViewState, token: int) -> bool:
    return isinstance(state, Loading) and state.token == token


def _on_ingest_succeeded(state: ViewState, event: IngestSucceeded) -> ViewState:
    if not _is_current(state, event.token):
        return state  # superseded submission
    return Loaded(report=event.report)


def _on_ingest_failed(state: ViewState, event: IngestFailed) -> ViewState:
    if not isinstance(state, Loading) or state.token != event.token:
        return state
    return Failed(message=str(event.error), kind=event.error.kind, previous=state.previous)


def _on_select_method(state: ViewState, event: SelectMethod) -> ViewState:
    if not isinstance(state, Loaded):
        raise InvalidTransitionError(f"Cannot select a method while {type(state).__name__}")
    return Loaded(
        report=state.report,
        selected_method=event.method_id,
        filter_query=state.filter_query,
    )


def _on_set_filter(state: ViewState, event: SetFilter) -> ViewState:
    if not isinstance(state, Loaded):
        raise InvalidTransitionError(f"Cannot filter methods while {type(state).__name__}")
    return Loaded(
        report=state.report,
        selected_method=state.selected_method,
        filter_query=event.query,
    )


def _on_dismiss(state: ViewState, event: Dismiss) -> ViewState:
    if not isinstance(state, Failed):
        raise InvalidTransitionError(f"Nothing to dismiss while {type(state).__name__}")
    return state.previous if state.previous is not None else Empty()


def transition(state: ViewState, event: ViewEvent) -> ViewState:
    """Compute the next view state.

    Args:
        state: Current state.
        event: Event to apply.

    Returns:
        The next state. Stale ingestion completions (token mismatch) return
        ``state`` itself.

    Raises:
        InvalidTransitionError: If event is not valid in state.
        TypeError: If event is not a ViewEvent.
    """
    if isinstance(event, Submit):
        return _on_submit(state, event)
    if isinstance(event, IngestSucceeded):
        return _on_ingest_succeeded(state, event)
    if isinstance(event, IngestFailed):
        return _on_ingest_failed(state, event)
    if isinstance(event, SelectMethod):
        return _on_select_method(state, event)
    if isinstance(event, SetFilter):
        return _on_set_filter(state, event)
    if isinstance(event, Dismiss):
        return _on_dismiss(state, event)
    raise TypeError(f"Invalid view event: {event!r}")
