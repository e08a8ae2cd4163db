"""Filter-map matching for KPI tiles and saved views."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def _get_by_path(record: dict, path: str) -> Any:
    if not isinstance(record, dict):
        return None
    if path in record:
        return record.get(path)
    cur: Any = record
    for part in path.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur.get(part)
        else:
            return None
    return cur


def _match_value(actual: Any, expected: Any) -> bool:
    if isinstance(expected, (set, frozenset)):
        expected = list(expected)
    if isinstance(expected, (list, tuple)):
        if isinstance(actual, list):
            return any(item in expected for item in actual)
        return actual in expected
    if isinstance(actual, list):
        return expected in actual
    return actual == expected


def matches_filters(record: dict, filters: Mapping[str, Any] | None) -> bool:
    """Every key in ``filters`` must match the record.

    A list value means membership, a scalar means equality. List-valued
    record fields match when they contain the expected value.
    """
    if not filters:
        return True
    if not isinstance(record, dict):
        return False
    for field, expected in filters.items():
        if not _match_value(_get_by_path(record, field), expected):
            return False
    return True


def filter_rows(rows: Iterable[dict], filters: Mapping[str, Any] | None) -> list[dict]:
    return [row for row in rows or [] if matches_filters(row, filters)]


def count_matching(rows: Iterable[dict], filters: Mapping[str, Any] | None) -> int:
    return sum(1 for row in rows or [] if matches_filters(row, filters))
