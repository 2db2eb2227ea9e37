"""Assignment solver tests."""

from __future__ import annotations

import itertools
import random

import pytest
from field_repack.field_matching.assignment_solver import build_cost_matrix, solve_assignment


def _total(matrix: list[list[int]], assignment: list[int]) -> int:
    return sum(matrix[row][column] for row, column in enumerate(assignment))


def _brute_force_best(matrix: list[list[int]]) -> int:
    size = len(matrix)
    return max(
        _total(matrix, list(permutation)) for permutation in itertools.permutations(range(size))
    )


def test_empty_matrix_yields_empty_assignment() -> None:
    assert solve_assignment([]) == []


def test_single_cell_matrix() -> None:
    assert solve_assignment([[-4]]) == [0]


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[7, 1], [2, 9]], [0, 1]),
        ([[1, 9], [8, 2]], [1, 0]),
        ([[-8, -21], [-15, -8]], [0, 1]),
        ([[3, 0, 0], [0, 0, 5], [0, 4, 0]], [0, 2, 1]),
    ],
)
def test_solver_picks_maximum_total(matrix: list[list[int]], expected: list[int]) -> None:
    assert solve_assignment(matrix) == expected


def test_greedy_trap_is_avoided() -> None:
    # Row 0 prefers column 0, but giving column 0 to row 1 is worth more overall.
    matrix = [[10, 9], [10, 1]]

    assert solve_assignment(matrix) == [1, 0]


def test_non_square_matrix_is_rejected() -> None:
    with pytest.raises(ValueError, match="square"):
        solve_assignment([[1, 2], [3]])


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
@pytest.mark.parametrize("seed", [3, 17, 42, 2024])
def test_solver_matches_brute_force_optimum(size: int, seed: int) -> None:
    rng = random.Random(seed * 100 + size)
    matrix = [[-rng.randint(0, 30) for _ in range(size)] for _ in range(size)]

    assignment = solve_assignment(matrix)

    assert sorted(assignment) == list(range(size))
    assert _total(matrix, assignment) == _brute_force_best(matrix)


def test_solver_handles_many_ties() -> None:
    matrix = [[0] * 5 for _ in range(5)]

    assignment = solve_assignment(matrix)

    assert sorted(assignment) == list(range(5))


def test_solver_is_deterministic() -> None:
    rng = random.Random(7)
    matrix = [[-rng.randint(0, 50) for _ in range(8)] for _ in range(8)]

    assert solve_assignment(matrix) == solve_assignment(matrix)


def test_solver_does_not_mutate_input() -> None:
    matrix = [[1, 5], [4, 2]]
    snapshot = [row[:] for row in matrix]

    solve_assignment(matrix)

    assert matrix == snapshot


def test_build_cost_matrix_pads_with_zeros() -> None:
    matrix = build_cost_matrix(["a", "b", "c"], ["a"], lambda row, column: -len(row + column))

    assert matrix == [[-2, 0, 0], [-2, 0, 0], [-2, 0, 0]]


def test_build_cost_matrix_pads_missing_rows() -> None:
    matrix = build_cost_matrix(["a"], ["b", "c"], lambda row, column: -1)

    assert matrix == [[-1, -1], [0, 0]]
