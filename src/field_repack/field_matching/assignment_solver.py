"""Optimal one-to-one assignment (Kuhn-Munkres / Hungarian method)."""

from __future__ import annotations

from collections.abc import Callable, Sequence

UNASSIGNED = -1


def build_cost_matrix(
    rows: Sequence[str],
    columns: Sequence[str],
    score: Callable[[str, str], int],
) -> list[list[int]]:
    """Score every (row, column) pair into a square matrix.

    The matrix dimension is the larger of the two counts; cells that touch a
    padding row or column are 0.
    """
    size = max(len(rows), len(columns))
    matrix = [[0] * size for _ in range(size)]
    for row_index, row_label in enumerate(rows):
        for column_index, column_label in enumerate(columns):
            matrix[row_index][column_index] = score(row_label, column_label)
    return matrix


def solve_assignment(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return ``row -> column`` maximizing the total of the chosen cells.

    Runs in O(n^3) on an n x n integer matrix. Row potentials start at the
    row maximum and column potentials at 0, which is a feasible dual; each
    root row grows an alternating tree over tight edges, lowering potentials
    by the minimum frontier slack whenever the tree cannot grow.
    """
    size = len(matrix)
    for row in matrix:
        if len(row) != size:
            raise ValueError("Assignment matrix must be square.")
    if size == 0:
        return []

    row_potential = [max(row) for row in matrix]
    column_potential = [0] * size
    column_of_row = [UNASSIGNED] * size
    row_of_column = [UNASSIGNED] * size

    for root in range(size):
        _augment_from(
            root,
            matrix,
            row_potential,
            column_potential,
            column_of_row,
            row_of_column,
        )
    return column_of_row


# pylint: disable=too-many-arguments,too-many-locals
def _augment_from(
    root: int,
    matrix: Sequence[Sequence[int]],
    row_potential: list[int],
    column_potential: list[int],
    column_of_row: list[int],
    row_of_column: list[int],
) -> None:
    size = len(matrix)
    rows_in_tree = [False] * size
    columns_in_tree = [False] * size
    # Reaching row of each tree column, used to walk the augmenting path back.
    parent_row = [UNASSIGNED] * size
    slack = [0] * size
    slack_row = [root] * size

    def add_row(row: int) -> None:
        rows_in_tree[row] = True
        for column in range(size):
            if columns_in_tree[column]:
                continue
            candidate = row_potential[row] + column_potential[column] - matrix[row][column]
            if row == root or candidate < slack[column]:
                slack[column] = candidate
                slack_row[column] = row

    add_row(root)
    while True:
        column = _first_tight_column(slack, columns_in_tree)
        if column == UNASSIGNED:
            delta = min(
                slack[candidate] for candidate in range(size) if not columns_in_tree[candidate]
            )
            for row in range(size):
                if rows_in_tree[row]:
                    row_potential[row] -= delta
            for candidate in range(size):
                if columns_in_tree[candidate]:
                    column_potential[candidate] += delta
                else:
                    slack[candidate] -= delta
            continue

        columns_in_tree[column] = True
        parent_row[column] = slack_row[column]
        matched_row = row_of_column[column]
        if matched_row == UNASSIGNED:
            _flip_path(column, parent_row, column_of_row, row_of_column)
            return
        add_row(matched_row)


# pylint: enable=too-many-arguments,too-many-locals


def _first_tight_column(slack: Sequence[int], columns_in_tree: Sequence[bool]) -> int:
    for column, value in enumerate(slack):
        if not columns_in_tree[column] and value == 0:
            return column
    return UNASSIGNED


def _flip_path(
    column: int,
    parent_row: Sequence[int],
    column_of_row: list[int],
    row_of_column: list[int],
) -> None:
    while column != UNASSIGNED:
        row = parent_row[column]
        previous_column = column_of_row[row]
        column_of_row[row] = column
        row_of_column[column] = row
        column = previous_column
