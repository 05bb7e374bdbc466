"""Error types raised by ingestion and the view state machine.

Usage:
    try:
        report = ingest(blob)
    except IngestError as e:
        print(e.kind, e)
"""

from __future__ import annotations


class MethodscopeError(Exception):
    """Base class for all methodscope errors."""

    pass


class IngestError(MethodscopeError):
    """Input blob could not be turned into a Report.

    Recoverable: the viewer moves to the failed state and accepts another submit.
    """

    kind = "ingest"


class DecodeError(IngestError):
    """Bytes are not valid UTF-8 text or the text is not valid JSON."""

    kind = "decode"


class SchemaError(IngestError):
    """JSON parsed but required fields are missing or mis-typed.

    Attributes:
        errors: One human-readable line per offending field path.
    """

    kind = "schema"

    def __init__(self, message: str, errors: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.errors = errors


class UnsupportedFormatError(IngestError):
    """Declared media type (or file extension) is not decodable."""

    kind = "unsupported_format"


class InvalidTransitionError(MethodscopeError):
    """Raised when an event is not valid in the current view state."""

    pass
