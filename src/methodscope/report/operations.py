"""Report validation operations."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from methodscope.errors import SchemaError
from methodscope.report.models import Report
from methodscope.report.schema import ReportPayload

logger = logging.getLogger(__name__)


def _format_error_location(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return "<root>"
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            parts.append(f".{part}" if parts else part)
    return "".join(parts)


def validate_report(value: Any) -> Report:
    """Validate a parsed JSON value and build a Report.

    Validation is structural only. Cross-field consistency (summary counts vs
    per-tick data, tick ordering, top methods missing from ticks) is accepted
    as-is, since the report is an upstream artifact.

    Args:
        value: Result of parsing the export's JSON text.

    Returns:
        The validated, immutable Report.

    Raises:
        SchemaError: If any required field is missing or has the wrong type.
    """
    try:
        payload = ReportPayload.model_validate(value)
    except ValidationError as exc:
        errors = tuple(
            f"{_format_error_location(err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        logger.debug("Report failed schema validation with %d error(s)", len(errors))
        raise SchemaError(
            f"Report does not match the expected schema ({len(errors)} error(s)): {errors[0]}",
            errors=errors,
        ) from exc
    return payload.to_domain()
