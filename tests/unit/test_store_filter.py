from __future__ import annotations

import pytest

from po_split.models.order_row import OrderRow
from po_split.services.store_filter import filter_rows, key_matches


def _row(po: str, upc: str = "111") -> OrderRow:
    return OrderRow(po, "ST1", "001", "M", "TEE", "BLACK", upc, "", "1")


@pytest.mark.parametrize(
    "key, identifier, expected",
    [
        ("X-014", "014", True),
        ("014", "014", True),
        ("4500-0145", "014", True),
        ("1140", "014", False),
        ("4500014", "014", False),
        ("S1", "S1", True),
        ("S1", "", False),
    ],
)
def test_key_matches_separator_prefixed(key: str, identifier: str, expected: bool):
    assert key_matches(key, identifier) is expected


def test_key_matches_empty_separator_is_plain_substring():
    assert key_matches("1140", "014", separator="") is False
    assert key_matches("4500014", "014", separator="") is True
    assert key_matches("A-1014", "014", separator="") is True
    assert key_matches("A-1014", "014") is False


def test_filter_identifier_major_order():
    rows = [_row("A-071", "1"), _row("A-014", "2"), _row("A-071", "3")]
    out = filter_rows(rows, ["014", "071"])
    assert [r.upc for r in out] == ["2", "1", "3"]


def test_filter_duplicate_identifier_duplicates_rows():
    rows = [_row("A-01", "1")]
    out = filter_rows(rows, ["01", "01"])
    assert out == [rows[0], rows[0]]


def test_filter_row_matching_two_identifiers_appears_twice():
    rows = [_row("014-071", "1")]
    out = filter_rows(rows, ["014", "071"])
    assert len(out) == 2


def test_filter_only_matching_rows():
    rows = [_row("A-014"), _row("A-1014"), _row("B-200")]
    out = filter_rows(rows, ["014", "999"])
    assert [r.po for r in out] == ["A-014"]
    assert all(key_matches(r.po, "014") for r in out)


def test_filter_empty_inputs():
    assert filter_rows([], ["014"]) == []
    assert filter_rows([_row("A-014")], []) == []
    assert filter_rows([_row("A-014")], ["", ""]) == []


def test_filter_trailing_empty_identifier_adds_nothing():
    # "014," in the store list parses to ["014", ""]
    rows = [_row("A-014", "1"), _row("B-200", "2")]
    assert [r.upc for r in filter_rows(rows, ["014", ""])] == ["1"]
