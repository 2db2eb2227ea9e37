"""Cost model tests."""

from __future__ import annotations

import pytest
from field_repack.field_matching.cost_model import CostModel, edit_distance


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("same", "same", 0),
        ("kitten", "sitting", 5),
        ("x.ID", "y.Id", 4),
    ],
)
def test_edit_distance_weights_substitution_as_two(a: str, b: str, expected: int) -> None:
    assert edit_distance(a, b) == expected


def test_edit_distance_honours_custom_costs() -> None:
    assert edit_distance("kitten", "sitting", substitution_cost=1) == 3
    assert edit_distance("", "abc", indel_cost=2) == 6


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("x.Profile.Name", "y.FullName"),
        ("x.CreatedAt", "y.Meta.Created"),
        ("", "y.ID"),
        ("x.a.b.c", "y.c"),
    ],
)
def test_edit_distance_is_symmetric(a: str, b: str) -> None:
    assert edit_distance(a, b) == edit_distance(b, a)


def test_path_cost_double_counts_trailing_characters() -> None:
    model = CostModel()

    assert model.path_cost("x.ID", "y.Id") == 8
    assert model.path_cost("x.Name", "y.FullName") == 8
    assert model.path_cost("x.ID", "y.FullName") == 21
    assert model.path_cost("x.Name", "y.Id") == 15


def test_suffix_weight_prefers_matching_leaf_names_across_depths() -> None:
    model = CostModel()
    destination = "x.Owner.Email"

    assert model.path_cost(destination, "y.Email") < model.path_cost(destination, "y.Owner.Name")


def test_zero_suffix_length_uses_full_path_only() -> None:
    model = CostModel(suffix_length=0)

    assert model.path_cost("x.ID", "y.Id") == edit_distance("x.ID", "y.Id")


def test_score_is_negated_path_cost() -> None:
    model = CostModel()

    assert model.score("x.ID", "y.Id") == -8
