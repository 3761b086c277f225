import pytest
from hypothesis import given
from hypothesis import strategies as st

from algos.sort import count_sort, heap_sort, insert_sort, merge_sort, quick_sort, radix_sort

SLICE = [3, 2, 8, 1, 7, 6, 4, 5]
EXPECTED = [1, 2, 3, 4, 5, 6, 7, 8]


def test_insert_sort_source_case():
    items = list(SLICE)
    insert_sort(items)
    assert items == EXPECTED


def test_merge_sort_source_case():
    items = list(SLICE)
    merge_sort(items)
    assert items == EXPECTED


def test_quick_sort_source_case():
    items = list(SLICE)
    quick_sort(items, 0, 7)
    assert items == EXPECTED


def test_count_sort_source_case():
    items = list(SLICE)
    out = count_sort(items, 8)
    assert out == EXPECTED
    assert items == SLICE


def test_radix_sort_source_case():
    items = [30, 242, 8, 112, 13, 57, 1, 88]
    assert radix_sort(items, 242) == [1, 8, 13, 30, 57, 88, 112, 242]


def test_heap_sort_source_case():
    items = list(SLICE)
    heap_sort(items)
    assert items == EXPECTED


def test_quick_sort_default_bounds():
    items = [5, 5, 2, 9, 2, 0]
    quick_sort(items)
    assert items == [0, 2, 2, 5, 5, 9]


def test_quick_sort_partial_range():
    items = [9, 4, 3, 2, 1, 0]
    quick_sort(items, 1, 4)
    assert items == [9, 1, 2, 3, 4, 0]


def test_quick_sort_negative_bound_does_nothing():
    items = [3, 1, 2]
    quick_sort(items, -1, 2)
    assert items == [3, 1, 2]


def test_count_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        count_sort([1, 9], 8)
    with pytest.raises(ValueError):
        count_sort([-1, 2], 8)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -4], 4)


def test_radix_sort_zero_k_leaves_order():
    assert radix_sort([3, 1, 2], 0) == [3, 1, 2]


def test_empty_inputs():
    for sorter in (insert_sort, merge_sort, quick_sort, heap_sort):
        items = []
        sorter(items)
        assert items == []
    assert count_sort([], 3) == []
    assert radix_sort([], 10) == []


@pytest.mark.parametrize("sorter", [insert_sort, merge_sort, quick_sort, heap_sort])
@given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_in_place_sorts_match_sorted(sorter, values):
    items = list(values)
    sorter(items)
    assert items == sorted(values)


@given(values=st.lists(st.integers(min_value=0, max_value=50), max_size=60))
def test_count_sort_matches_sorted(values):
    assert count_sort(values, 50) == sorted(values)


@given(values=st.lists(st.integers(min_value=0, max_value=100000), min_size=1, max_size=60))
def test_radix_sort_matches_sorted(values):
    assert radix_sort(values, max(values)) == sorted(values)