"""Shared test fixtures."""

import pytest

from methodscope import Report, validate_report
from factories import make_report_dict


@pytest.fixture
def two_tick_dict():
    """tick0 calls a three times, tick1 calls b five times."""
    return make_report_dict(
        ticks=[
            {"tick": 0, "method_counts": {"a": 3}},
            {"tick": 1, "method_counts": {"b": 5}, "is_problem_tick": True},
        ]
    )


@pytest.fixture
def two_tick_report(two_tick_dict) -> Report:
    return validate_report(two_tick_dict)


@pytest.fixture
def other_report() -> Report:
    return validate_report(
        make_report_dict(
            ticks=[
                {"tick": 10, "method_counts": {"org.foo.Bar": 1, "com.baz.Qux": 2}},
                {"tick": 12, "method_counts": {"com.baz.Qux": 4}},
                {"tick": 15, "method_counts": {}},
            ],
            server_name="lobby",
        )
    )
