import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quicksort,
    selection_sort,
    sort012,
    sort_descending,
)

SORT_COUNT = 6


def test_heap_sort_example_data():
    data = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        heap_sort(data),
        quicksort(data),
        merge_sort(data),
    ]
    assert results == [expected] * SORT_COUNT


def test_selection_example_with_negatives():
    data = [-2, 3, 4, -1, 5, -12, 6, 1, 3]
    expected = [-12, -2, -1, 1, 3, 3, 4, 5, 6]
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        heap_sort(data),
        quicksort(data),
        merge_sort(data),
    ]
    assert results == [expected] * SORT_COUNT


def test_reverse_input():
    data = [5, 4, 3, 2, 1]
    expected = [1, 2, 3, 4, 5]
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        heap_sort(data),
        quicksort(data),
        merge_sort(data),
    ]
    assert results == [expected] * SORT_COUNT


@pytest.mark.parametrize("data", [[], [42]])
def test_empty_and_single(data):
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        heap_sort(data),
        quicksort(data),
        merge_sort(data),
    ]
    assert results == [list(data)] * SORT_COUNT


def test_input_not_modified():
    data = [3, 1, 2]
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        heap_sort(data),
        quicksort(data),
        merge_sort(data),
    ]
    assert results == [[1, 2, 3]] * SORT_COUNT
    assert data == [3, 1, 2]


def test_accepts_iterables():
    source = (9, 7, 8)
    results = [
        bubble_sort(x for x in source),
        insertion_sort(x for x in source),
        selection_sort(x for x in source),
        heap_sort(x for x in source),
        quicksort(x for x in source),
        merge_sort(x for x in source),
    ]
    assert results == [[7, 8, 9]] * SORT_COUNT


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        heap_sort(data),
        quicksort(data),
        merge_sort(data),
    ]
    assert results == [expected] * SORT_COUNT


def test_quicksort_large_sorted_input_no_recursion_error():
    data = list(range(5000))
    assert quicksort(data) == data


def test_sort_descending_example():
    data = [2, 4, 9, 6, 3, 8, 3, 1]
    assert sort_descending(data) == [9, 8, 6, 4, 3, 3, 2, 1]


@given(st.lists(st.integers()))
def test_sort_descending_is_non_increasing(data):
    result = sort_descending(data)
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(data)


def test_sort012_example():
    data = [0, 1, 1, 0, 1, 2, 1, 2, 0, 0, 0, 1]
    assert sort012(data) == [0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 2, 2]


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort012_matches_sorted(data):
    assert sort012(data) == sorted(data)


@pytest.mark.parametrize("data", [[0, 3, 1], [-1], [2, 2, 5, 0]])
def test_sort012_rejects_other_values(data):
    with pytest.raises(ValueError):
        sort012(data)