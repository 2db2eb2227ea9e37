"""Field matching exports."""

from .assignment_solver import build_cost_matrix, solve_assignment
from .cost_model import CostModel, edit_distance
from .field_matcher import filter_ignored, is_ignored, match_fields, order_destination
from .matching_outcomes import FieldMatch, MatchResult, MatchStrategy

__all__ = [
    "CostModel",
    "FieldMatch",
    "MatchResult",
    "MatchStrategy",
    "build_cost_matrix",
    "edit_distance",
    "filter_ignored",
    "is_ignored",
    "match_fields",
    "order_destination",
    "solve_assignment",
]
