"""Ingestion: raw blob -> validated Report.

Decoding is UTF-8 text then JSON. Binary framing is not implemented and fails
with UnsupportedFormatError before any byte is inspected.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from methodscope.errors import DecodeError, UnsupportedFormatError
from methodscope.ingestion.models import Blob, MediaType
from methodscope.report import Report, validate_report

logger = logging.getLogger(__name__)


def decode_text(blob: Blob) -> str:
    """Decode blob data as UTF-8 text.

    Raises:
        UnsupportedFormatError: If the blob is declared binary.
        DecodeError: If the bytes are not valid UTF-8.
    """
    if blob.media_type is MediaType.OCTET_STREAM:
        raise UnsupportedFormatError(
            f"{blob.describe()}: binary ({blob.media_type.value}) reports are not supported; "
            "export the report as JSON"
        )
    if isinstance(blob.data, str):
        return blob.data
    try:
        # utf-8-sig tolerates a leading byte order mark
        return blob.data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"{blob.describe()}: not valid UTF-8 text (byte {exc.start}: {exc.reason})"
        ) from exc


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN and Infinity, which are not JSON
    raise ValueError(f"non-standard constant {name}")


def parse_json(text: str, source: str = "<text>") -> Any:
    """Parse JSON text into a generic value.

    NaN, Infinity and -Infinity are rejected. Nesting deeper than the
    interpreter recursion limit and integers longer than the int string
    conversion limit are decode failures too.

    Raises:
        DecodeError: If the text is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DecodeError(
            f"{source}: invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        ) from exc
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"{source}: invalid JSON: {exc}") from exc


def ingest(blob: Blob) -> Report:
    """Turn exactly one blob into a validated Report.

    Idempotent: the same bytes always produce an equal Report, nothing is
    injected (no counters, no load timestamps).

    Args:
        blob: The submitted input unit.

    Returns:
        Validated Report.

    Raises:
        UnsupportedFormatError: Declared media type is binary.
        DecodeError: Not UTF-8 or not JSON.
        SchemaError: JSON does not have the Report shape.
    """
    logger.debug("Ingesting %s", blob.describe())
    text = decode_text(blob)
    value = parse_json(text, source=blob.describe())
    report = validate_report(value)
    logger.info(
        "Ingested %s: server=%s version=%s ticks=%d",
        blob.describe(),
        report.server_name,
        report.server_version,
        len(report.ticks),
    )
    return report


async def ingest_async(blob: Blob) -> Report:
    """Run ingest() off the event loop so large exports never block it."""
    return await asyncio.to_thread(ingest, blob)
