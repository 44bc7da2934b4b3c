import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    format_list,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


@pytest.mark.parametrize(
    "data",
    [
        [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
        [3, 1, 5, 2, 4],
        [],
        [42],
        [2, 2, 1, 1, 3, 3],
    ],
)
def test_sorts_samples(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


@given(data=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_input_is_not_modified():
    data = [5, 3, 9, 1]
    snapshot = list(data)
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        merge_sort(data),
        quick_sort(data),
    ]
    assert data == snapshot
    assert all(result == [1, 3, 5, 9] for result in results)


def test_accepts_any_iterable():
    data = (4, 2, 8, 6)
    expected = [2, 4, 6, 8]
    assert bubble_sort(iter(data)) == expected
    assert insertion_sort(iter(data)) == expected
    assert selection_sort(iter(data)) == expected
    assert merge_sort(iter(data)) == expected
    assert quick_sort(iter(data)) == expected


@given(words=st.lists(st.text(alphabet="abc", max_size=3), max_size=20))
def test_sorts_strings(words):
    expected = sorted(words)
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


def test_already_sorted_large_input():
    small = list(range(300))
    large = list(range(1500))
    assert bubble_sort(small) == small
    assert insertion_sort(small) == small
    assert selection_sort(small) == small
    assert merge_sort(large) == large
    assert quick_sort(large) == large


def test_format_list_separates_with_comma_space():
    assert format_list([9, 8, 7]) == "[9, 8, 7]"


def test_format_list_empty():
    assert format_list([]) == "[]"


@given(data=st.lists(st.integers(), max_size=20))
def test_format_list_round_trip(data):
    text = format_list(data)
    assert text.startswith("[") and text.endswith("]")
    inner = text[1:-1]
    parsed = [int(part) for part in inner.split(", ")] if inner else []
    assert parsed == data