"""Ingestion of raw report blobs."""

from methodscope.ingestion.models import EXTENSION_MEDIA_TYPES, Blob, MediaType, media_type_for
from methodscope.ingestion.operations import decode_text, ingest, ingest_async, parse_json

__all__ = [
    # Models
    "Blob",
    "MediaType",
    "EXTENSION_MEDIA_TYPES",
    "media_type_for",
    # Operations
    "decode_text",
    "parse_json",
    "ingest",
    "ingest_async",
]
