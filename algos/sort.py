"""Classic comparison and counting sorts over lists of integers."""

from __future__ import annotations

from heapq import merge
from itertools import accumulate, chain
from typing import List, MutableSequence, Optional, Sequence

__all__ = [
    "insert_sort",
    "merge_sort",
    "quick_sort",
    "count_sort",
    "radix_sort",
    "heap_sort",
]


def insert_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by insertion."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def _merge_sorted(items: Sequence[int]) -> List[int]:
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    # heapq.merge keeps items from the left run first on ties, so this is stable.
    return list(merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:])))


def merge_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    items[:] = _merge_sorted(list(items))


def _partition(items: MutableSequence[int], lo: int, hi: int) -> int:
    pivot = items[lo]
    i = lo - 1
    j = hi + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def quick_sort(items: MutableSequence[int], lo: int = 0, hi: Optional[int] = None) -> None:
    """Sort ``items[lo:hi + 1]`` in place using Hoare partitioning.

    ``hi`` is an inclusive index and defaults to the last index. Nothing
    happens when either bound is negative or ``lo >= hi``.
    """
    if hi is None:
        hi = len(items) - 1
    if lo >= 0 and hi >= 0 and lo < hi:
        p = _partition(items, lo, hi)
        quick_sort(items, lo, p)
        quick_sort(items, p + 1, hi)


def count_sort(items: Sequence[int], k: int) -> List[int]:
    """Return a stably sorted copy of ``items``, whose values lie in ``0..k``."""
    counts = [0] * (k + 1)
    for value in items:
        if not 0 <= value <= k:
            raise ValueError(f"value {value} outside the range 0..{k}")
        counts[value] += 1
    counts = list(accumulate(counts))

    out = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        out[counts[value]] = value
    return out


def _digit_pass(items: Sequence[int], exp: int) -> List[int]:
    buckets: List[List[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // exp) % 10].append(value)
    return list(chain.from_iterable(buckets))


def radix_sort(items: Sequence[int], k: int) -> List[int]:
    """Return a copy of ``items`` sorted by decimal digits, least significant first.

    ``k`` is the largest value; one pass is made for each of its digits.
    """
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative values")
    result = list(items)
    exp = 1
    while k // exp > 0:
        result = _digit_pass(result, exp)
        exp *= 10
    return result


def _sift_down(items: MutableSequence[int], start: int, end: int) -> None:
    j = start
    while True:
        child = 2 * j + 1
        if child >= end:
            return
        if child + 1 < end and items[child] < items[child + 1]:
            child += 1
        if items[j] >= items[child]:
            return
        items[j], items[child] = items[child], items[j]
        j = child


def heap_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place with an iterative heap sort using O(1) extra space."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] > items[(j - 1) // 2]:
            parent = (j - 1) // 2
            items[j], items[parent] = items[parent], items[j]
            j = parent

    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)