"""Ingestion input models.

Usage:
    blob = Blob(data=b'{"server_name": ...}', media_type=MediaType.JSON)
    blob = Blob.from_path("exports/tick-report.json")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from methodscope.errors import UnsupportedFormatError


class MediaType(Enum):
    """Declared media type of a submitted blob."""

    JSON = "application/json"
    OCTET_STREAM = "application/octet-stream"
    """Binary protobuf framing. Accepted for selection, never decoded."""


EXTENSION_MEDIA_TYPES: dict[str, MediaType] = {
    ".json": MediaType.JSON,
    ".bin": MediaType.OCTET_STREAM,
    ".data": MediaType.OCTET_STREAM,
}


def media_type_for(filename: str | Path) -> MediaType:
    """Infer the media type of an export from its file extension.

    Args:
        filename: File name or path; only the suffix is inspected.

    Returns:
        The MediaType registered for the suffix (case-insensitive).

    Raises:
        UnsupportedFormatError: If the suffix is not an accepted export extension.
    """
    suffix = Path(filename).suffix.lower()
    try:
        return EXTENSION_MEDIA_TYPES[suffix]
    except KeyError:
        accepted = ", ".join(sorted(EXTENSION_MEDIA_TYPES))
        raise UnsupportedFormatError(
            f"Unsupported file extension {suffix or '<none>'!r} (accepted: {accepted})"
        ) from None


@dataclass(frozen=True, slots=True)
class Blob:
    """A single submitted input unit.

    Attributes:
        data: Raw bytes, or text the collaborator already decoded.
        media_type: Declared media type.
        name: Original file name, for messages only.
    """

    data: bytes | str
    media_type: MediaType = MediaType.JSON
    name: str | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> Blob:
        """Read a file and infer its media type from the extension."""
        p = Path(path)
        media_type = media_type_for(p)
        return cls(data=p.read_bytes(), media_type=media_type, name=p.name)

    def describe(self) -> str:
        """Short label for log lines and error messages."""
        return self.name or f"<{self.media_type.value} blob>"
