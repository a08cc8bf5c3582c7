# tests/test_query.py

from __future__ import annotations

from taskboard.transport.query import serialize_query


def test_filter_and_sort_use_bracket_notation() -> None:
    qs = serialize_query({"where": {"uid": {"id": "u1"}}, "orderBy": {"createdAt": "asc"}})
    assert qs == "where[uid][id]=u1&orderBy[createdAt]=asc"


def test_lists_booleans_and_none() -> None:
    qs = serialize_query({"ids": ["a", "b"], "done": False, "skip": None})
    assert qs == "ids[0]=a&ids[1]=b&done=false"


def test_values_are_percent_encoded() -> None:
    assert serialize_query({"q": "milk & eggs/2"}) == "q=milk%20%26%20eggs%2F2"


def test_empty_params() -> None:
    assert serialize_query({}) == ""
