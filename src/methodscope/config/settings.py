"""Viewer configuration using Pydantic Settings.

Usage:
    from methodscope.config import ViewerSettings

    # Load from environment variables (METHODSCOPE_*)
    settings = ViewerSettings()

    # Or override with explicit values
    settings = ViewerSettings(tick_label_format="#{tick}", memoize_derived=False)
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for ReportViewer.

    Attributes:
        tick_label_format: Chart x-axis label, formatted with ``tick``.
        series_label_format: Chart dataset label, formatted with ``method``.
        memoize_derived: Cache catalog and series per report snapshot.
        log_level: Level used by configure_logging().

    Environment Variables:
        METHODSCOPE_TICK_LABEL_FORMAT
        METHODSCOPE_SERIES_LABEL_FORMAT
        METHODSCOPE_MEMOIZE_DERIVED
        METHODSCOPE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="METHODSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tick_label_format: str = "Tick {tick}"
    series_label_format: str = "Calls per tick for {method}"
    memoize_derived: bool = True
    log_level: str = "INFO"

    @field_validator("tick_label_format")
    @classmethod
    def _check_tick_label_format(cls, value: str) -> str:
        try:
            value.format(tick=0)
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"tick_label_format may only reference {{tick}}: {exc}") from exc
        return value

    @field_validator("series_label_format")
    @classmethod
    def _check_series_label_format(cls, value: str) -> str:
        try:
            value.format(method="")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"series_label_format may only reference {{method}}: {exc}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level
