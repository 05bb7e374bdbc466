"""Tests for the method catalog index.

Critical Invariants:
- Catalog is the first-seen-ordered union of per-tick keys, deterministic
- Filtering is a case-insensitive, order-preserving subsequence
- Empty query is the identity; no match is an empty result, not an error
"""

from hypothesis import given

from methodscope import Report, all_methods, filter_methods, validate_report
from factories import make_report_dict, queries, reports


def test_all_methods_two_tick_scenario(two_tick_report: Report) -> None:
    assert all_methods(two_tick_report) == ("a", "b")


def test_all_methods_first_seen_order(other_report: Report) -> None:
    assert all_methods(other_report) == ("org.foo.Bar", "com.baz.Qux")


def test_all_methods_ignores_summary() -> None:
    """Catalog comes from tick data only; top_methods may disagree."""
    data = make_report_dict(ticks=[{"method_counts": {"a": 1}}])
    data["summary"]["top_methods"][0]["method_name"] = "ghost.Method"
    assert all_methods(validate_report(data)) == ("a",)


def test_filter_is_case_insensitive() -> None:
    assert filter_methods(["org.foo.Bar", "com.baz.Qux"], "BAZ") == ("com.baz.Qux",)


def test_filter_empty_query_returns_catalog() -> None:
    catalog = ("z", "a", "m")
    assert filter_methods(catalog, "") == catalog


def test_filter_no_match_is_empty() -> None:
    assert filter_methods(["org.foo.Bar"], "nothing") == ()


def test_filter_does_not_mutate_input() -> None:
    catalog = ["b", "a"]
    filter_methods(catalog, "a")
    assert catalog == ["b", "a"]


@given(report=reports())
def test_all_methods_is_deterministic_and_complete(report) -> None:
    """PROPERTY: repeated calls agree and every recorded key is present once."""
    first = all_methods(report)
    assert all_methods(report) == first
    assert len(set(first)) == len(first)
    expected = {m for t in report.ticks for m in t.method_counts}
    assert set(first) == expected


@given(report=reports(), query=queries)
def test_filter_is_ordered_subsequence(report, query) -> None:
    """PROPERTY: filtered catalog keeps relative order and only matching ids."""
    catalog = all_methods(report)
    filtered = filter_methods(catalog, query)

    it = iter(catalog)
    assert all(m in it for m in filtered), "not an order-preserving subsequence"
    assert all(query.casefold() in m.casefold() for m in filtered)
    # nothing matching was dropped
    assert len(filtered) == sum(1 for m in catalog if query.casefold() in m.casefold())


@given(report=reports())
def test_filter_empty_query_is_identity(report) -> None:
    catalog = all_methods(report)
    assert filter_methods(catalog, "") == catalog
