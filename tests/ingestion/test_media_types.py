"""Tests for media type inference and file loading."""

import json
from pathlib import Path

import pytest

from methodscope import Blob, MediaType, UnsupportedFormatError, ingest, media_type_for
from factories import make_report_dict


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("report.json", MediaType.JSON),
        ("REPORT.JSON", MediaType.JSON),
        ("exports/tick-report.bin", MediaType.OCTET_STREAM),
        ("method-calls.data", MediaType.OCTET_STREAM),
    ],
)
def test_media_type_for_accepted_extensions(filename, expected) -> None:
    assert media_type_for(filename) is expected


@pytest.mark.parametrize("filename", ["report.txt", "report", "report.json.gz"])
def test_media_type_for_rejects_other_extensions(filename) -> None:
    with pytest.raises(UnsupportedFormatError):
        media_type_for(filename)


def test_blob_from_path_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "calls.json"
    path.write_text(json.dumps(make_report_dict(ticks=[{"method_counts": {"a": 1}}])))

    blob = Blob.from_path(path)

    assert blob.media_type is MediaType.JSON
    assert blob.name == "calls.json"
    assert ingest(blob).ticks[0].method_counts.count("a") == 1


def test_blob_from_path_binary_is_selectable_but_not_decodable(tmp_path: Path) -> None:
    path = tmp_path / "calls.bin"
    path.write_bytes(b"\x00\x01\x02")

    blob = Blob.from_path(path)

    assert blob.media_type is MediaType.OCTET_STREAM
    with pytest.raises(UnsupportedFormatError):
        ingest(blob)


def test_describe_falls_back_to_media_type() -> None:
    assert Blob(data=b"{}").describe() == "<application/json blob>"
    assert Blob(data=b"{}", name="x.json").describe() == "x.json"
