"""Ordering: tests for sort_records, paginate, page_count and rank_records."""

import pytest

from srms.core.domain_types import SortKey
from srms.core.errors import InvalidInputError
from srms.core.ordering import page_count, paginate, rank_records, sort_records
from srms.core.record import Record


def _rec(roll, name="x", marks=(50,)):
    return Record.create(roll, name, list(marks))


# ─── sort_records ───────────────────────────────────────────────

def test_sort_by_roll_ascending():
    snapshot = [_rec(5), _rec(1), _rec(3)]
    assert [r.roll_number for r in sort_records(snapshot, SortKey.ROLL)] == [1, 3, 5]


def test_sort_does_not_mutate_snapshot():
    snapshot = [_rec(5), _rec(1), _rec(3)]
    sort_records(snapshot, SortKey.ROLL)
    assert [r.roll_number for r in snapshot] == [5, 1, 3]


def test_sort_by_name_is_case_insensitive():
    snapshot = [_rec(1, "zed"), _rec(2, "Amy"), _rec(3, "bob")]
    assert [r.name for r in sort_records(snapshot, SortKey.NAME)] == ["Amy", "Bob", "Zed"]


def test_sort_by_percentage_descending_is_stable():
    snapshot = [
        _rec(5, marks=(70,)),
        _rec(1, marks=(90,)),
        _rec(3, marks=(70,)),
        _rec(4, marks=(90,)),
        _rec(2, marks=(70,)),
    ]
    ordered = sort_records(snapshot, SortKey.PERCENTAGE)
    assert [r.roll_number for r in ordered] == [1, 4, 5, 3, 2]


def test_unsorted_keeps_original_order():
    snapshot = [_rec(5), _rec(1), _rec(3)]
    assert sort_records(snapshot, SortKey.NONE) == snapshot


# ─── paginate ───────────────────────────────────────────────────

def test_paginate_last_page_partial():
    records = [_rec(i) for i in range(12)]
    pages = paginate(records, 5)
    assert [len(p) for p in pages] == [5, 5, 2]
    assert [r.roll_number for r in pages[2]] == [10, 11]


def test_paginate_exact_multiple():
    assert [len(p) for p in paginate([_rec(i) for i in range(10)], 5)] == [5, 5]


def test_paginate_empty_yields_zero_pages():
    assert paginate([], 5) == []


def test_paginate_rejects_non_positive_page_size():
    with pytest.raises(InvalidInputError) as exc:
        paginate([_rec(1)], 0)
    assert exc.value.field == "page_size"


@pytest.mark.parametrize("total, size, expected", [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2)])
def test_page_count(total, size, expected):
    assert page_count(total, size) == expected


# ─── rank_records ───────────────────────────────────────────────

def test_rank_records_topper_first():
    ranked = rank_records([_rec(1, marks=(60,)), _rec(2, marks=(95,)), _rec(3, marks=(80,))])
    assert [(r.rank, r.record.roll_number) for r in ranked] == [(1, 2), (2, 3), (3, 1)]


def test_rank_records_empty():
    assert rank_records([]) == []
