"""Tests for blob ingestion.

Critical Invariants:
- Binary blobs fail as unsupported without any decoding attempt
- Decode, parse and schema failures raise distinct error kinds
- Ingestion is idempotent
"""

import json

import pytest

from methodscope import (
    Blob,
    DecodeError,
    IngestError,
    MediaType,
    SchemaError,
    UnsupportedFormatError,
    ingest,
    ingest_async,
)
from factories import json_blob, make_report_dict


def test_ingest_json_bytes(two_tick_dict) -> None:
    report = ingest(json_blob(two_tick_dict))
    assert [t.tick for t in report.ticks] == [0, 1]
    assert report.ticks[1].is_problem_tick is True


def test_ingest_accepts_text_data(two_tick_dict) -> None:
    report = ingest(Blob(data=json.dumps(two_tick_dict), media_type=MediaType.JSON))
    assert len(report.ticks) == 2


def test_ingest_tolerates_byte_order_mark(two_tick_dict) -> None:
    data = b"\xef\xbb\xbf" + json.dumps(two_tick_dict).encode("utf-8")
    report = ingest(Blob(data=data))
    assert report.server_name == "survival-1"


def test_ingest_is_idempotent(two_tick_dict) -> None:
    """Same bytes, equal reports: nothing like load time is injected."""
    blob = json_blob(two_tick_dict)
    assert ingest(blob) == ingest(blob)


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "",
        "   ",
        '{"server_name": "x",}',
        "[1, 2",
        '{"x": NaN}',
        '{"x": -Infinity}',
        "[" * 200_000,
        '{"x": ' + "1" * 5000 + "}",
    ],
    ids=[
        "unquoted",
        "empty",
        "blank",
        "trailing-comma",
        "truncated",
        "nan",
        "infinity",
        "deeply-nested",
        "oversized-integer",
    ],
)
def test_malformed_json_raises_decode_error(text) -> None:
    """Every parser failure is a DecodeError, including the ones json.loads
    reports as RecursionError or a plain ValueError."""
    with pytest.raises(DecodeError) as exc_info:
        ingest(Blob(data=text.encode("utf-8"), name="broken.json"))
    assert exc_info.value.kind == "decode"
    assert "broken.json" in str(exc_info.value)


def test_invalid_utf8_raises_decode_error() -> None:
    with pytest.raises(DecodeError, match="UTF-8"):
        ingest(Blob(data=b'{"server_name": "\xff\xfe"}'))


def test_schema_mismatch_raises_schema_error() -> None:
    data = make_report_dict()
    del data["metadata"]
    with pytest.raises(SchemaError):
        ingest(json_blob(data))


def test_wrapped_report_is_rejected(two_tick_dict) -> None:
    """The export is a single top-level object, never an envelope or array."""
    with pytest.raises(SchemaError):
        ingest(json_blob([two_tick_dict]))
    with pytest.raises(SchemaError):
        ingest(json_blob({"report": two_tick_dict}))


@pytest.mark.parametrize(
    "data",
    [b"\x08\x96\x01\x12\x07testing", b'{"server_name": "valid json, wrong type"}'],
    ids=["protobuf-bytes", "json-bytes"],
)
def test_binary_media_type_is_unsupported(data) -> None:
    """CRITICAL: binary blobs never reach the JSON parser.

    Why: silently misparsing protobuf framing would produce garbage reports.
    """
    blob = Blob(data=data, media_type=MediaType.OCTET_STREAM, name="report.bin")
    with pytest.raises(UnsupportedFormatError) as exc_info:
        ingest(blob)
    assert exc_info.value.kind == "unsupported_format"


def test_all_failures_share_ingest_error_base() -> None:
    for exc_type in (DecodeError, SchemaError, UnsupportedFormatError):
        assert issubclass(exc_type, IngestError)


@pytest.mark.asyncio
async def test_ingest_async_matches_sync(two_tick_dict) -> None:
    blob = json_blob(two_tick_dict)
    assert await ingest_async(blob) == ingest(blob)


@pytest.mark.asyncio
async def test_ingest_async_propagates_errors() -> None:
    with pytest.raises(DecodeError):
        await ingest_async(Blob(data=b"{not json"))
