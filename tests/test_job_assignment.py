import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.job_assignment import find_min_cost, lower_bound

SAMPLE = [
    [9, 2, 7, 8],
    [6, 4, 3, 7],
    [5, 8, 1, 8],
    [7, 6, 9, 4],
]


def test_sample_matrix():
    assert find_min_cost(SAMPLE) == 13


def test_root_lower_bound_sums_row_minima():
    bound = lower_bound(SAMPLE, -1, [True] * 4, 0)
    assert bound == sum(min(row) for row in SAMPLE)


def test_lower_bound_respects_taken_workers():
    available = [True, False, True, True]
    bound = lower_bound(SAMPLE, 0, available, 2)
    assert bound == 2 + min(6, 3, 7) + min(5, 1, 8) + min(7, 9, 4)


def test_lower_bound_after_last_job_is_cost():
    assert lower_bound(SAMPLE, 3, [False] * 4, 17) == 17


def test_single_job():
    assert find_min_cost([[5]]) == 5


def test_empty_matrix_costs_nothing():
    assert find_min_cost([]) == 0


def test_non_square_raises():
    with pytest.raises(ValueError):
        find_min_cost([[1, 2], [3]])


matrices = st.integers(min_value=1, max_value=5).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(min_value=0, max_value=50), min_size=n, max_size=n),
        min_size=n,
        max_size=n,
    )
)


@given(matrices)
def test_matches_exhaustive_search(matrix):
    n = len(matrix)
    best = min(
        sum(matrix[job][worker] for job, worker in enumerate(perm))
        for perm in itertools.permutations(range(n))
    )
    assert find_min_cost(matrix) == best