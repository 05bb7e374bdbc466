"""Tests for viewer settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from methodscope import ViewerSettings
from methodscope.logging import LOG_FORMAT, configure_logging


def test_defaults() -> None:
    settings = ViewerSettings()
    assert settings.tick_label_format == "Tick {tick}"
    assert settings.series_label_format == "Calls per tick for {method}"
    assert settings.memoize_derived is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("METHODSCOPE_TICK_LABEL_FORMAT", "T{tick}")
    monkeypatch.setenv("METHODSCOPE_MEMOIZE_DERIVED", "false")
    monkeypatch.setenv("METHODSCOPE_LOG_LEVEL", "debug")

    settings = ViewerSettings()

    assert settings.tick_label_format == "T{tick}"
    assert settings.memoize_derived is False
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tick_label_format": "Tick {n}"},
        {"tick_label_format": "Tick {"},
        {"series_label_format": "{name}"},
        {"log_level": "verbose"},
    ],
    ids=["unknown-tick-field", "broken-format", "unknown-series-field", "bad-level"],
)
def test_invalid_settings_rejected(kwargs) -> None:
    with pytest.raises(ValidationError):
        ViewerSettings(**kwargs)


def test_configure_logging(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging("debug")

    assert calls == [{"level": "DEBUG", "format": LOG_FORMAT}]
