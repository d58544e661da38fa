import pytest

from algonotes.dp_intervals import (
    longest_increasing_path,
    matrix_chain_cost,
    min_cut_cost,
)


def test_matrix_chain_worked_example():
    assert matrix_chain_cost([10, 30, 5, 60]) == 4500


def test_matrix_chain_single_matrix_is_free():
    assert not matrix_chain_cost([3, 7])


@pytest.mark.parametrize("dims", [[2, 3, 4], [5, 1, 9], [40, 20, 30]])
def test_matrix_chain_two_matrices(dims):
    a, b, c = dims
    assert matrix_chain_cost(dims) == a * b * c


@pytest.mark.parametrize("dims", [[40, 20, 30, 10, 30], [1, 2, 3, 4, 3], [10, 30, 5, 60]])
def test_matrix_chain_reverse_and_scale(dims):
    cost = matrix_chain_cost(dims)
    assert matrix_chain_cost(dims[::-1]) == cost
    assert matrix_chain_cost([2 * d for d in dims]) == 8 * cost


@pytest.mark.parametrize("dims", [[], [5]])
def test_matrix_chain_too_short(dims):
    with pytest.raises(ValueError):
        matrix_chain_cost(dims)


def test_min_cut_worked_example():
    assert min_cut_cost(7, [1, 3, 4, 5]) == 16


def test_min_cut_without_cuts():
    assert not min_cut_cost(7, [])


@pytest.mark.parametrize("n,cut", [(7, 3), (10, 1), (4, 2)])
def test_min_cut_single_cut_costs_stick_length(n, cut):
    assert min_cut_cost(n, [cut]) == n


@pytest.mark.parametrize("n,cuts", [(9, [5, 6, 1, 4, 2]), (20, [3, 17, 8]), (7, [5, 4, 3, 1])])
def test_min_cut_order_free_and_bounded(n, cuts):
    original = list(cuts)
    cost = min_cut_cost(n, cuts)
    assert cuts == original
    assert min_cut_cost(n, sorted(cuts)) == cost
    assert n <= cost <= len(cuts) * n


def test_increasing_path_worked_example():
    assert longest_increasing_path([[9, 9, 4], [6, 6, 8], [2, 1, 1]]) == 4


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_increasing_path_empty(matrix):
    assert not longest_increasing_path(matrix)


@pytest.mark.parametrize("row", [[1, 2, 3, 4], [5], [9, 3, 1]])
def test_increasing_path_single_row_sorted(row):
    assert longest_increasing_path([row]) == len(row)


def test_increasing_path_flat_matrix():
    assert longest_increasing_path([[5, 5], [5, 5]]) == longest_increasing_path([[5]])


@pytest.mark.parametrize(
    "matrix", [[[3, 4, 5], [3, 2, 6], [2, 2, 1]], [[9, 9, 4], [6, 6, 8], [2, 1, 1]]]
)
def test_increasing_path_invariant_under_transpose_and_negation(matrix):
    value = longest_increasing_path(matrix)
    transposed = [list(col) for col in zip(*matrix)]
    negated = [[-x for x in row] for row in matrix]
    assert longest_increasing_path(transposed) == value
    assert longest_increasing_path(negated) == value
    assert 1 <= value <= sum(len(row) for row in matrix)