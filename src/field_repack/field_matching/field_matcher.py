"""Destination-to-source leaf matching service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from field_repack.schema_management.schema_models import FieldPath

from .assignment_solver import build_cost_matrix, solve_assignment
from .cost_model import CostModel
from .matching_outcomes import FieldMatch, MatchResult, MatchStrategy

logger = logging.getLogger(__name__)


def is_ignored(path: FieldPath, ignores: Iterable[str]) -> bool:
    """True when any name token of ``path`` equals an ignore token."""
    tokens = set(path.names)
    return any(ignore in tokens for ignore in ignores)


def filter_ignored(paths: Sequence[FieldPath], ignores: Iterable[str]) -> list[FieldPath]:
    ignore_tokens = {token for token in ignores if token}
    if not ignore_tokens:
        return list(paths)
    return [path for path in paths if not is_ignored(path, ignore_tokens)]


def order_destination(paths: Sequence[FieldPath]) -> list[FieldPath]:
    """Longest rendered path first; declaration order breaks ties."""
    return sorted(paths, key=lambda path: len(str(path)), reverse=True)


def match_fields(
    destination: Sequence[FieldPath],
    source: Sequence[FieldPath],
    *,
    cost_model: CostModel | None = None,
    strategy: MatchStrategy = MatchStrategy.OPTIMAL,
    ignores: Iterable[str] = (),
) -> MatchResult:
    """Pair destination leaves with source leaves by name similarity."""
    resolved_cost_model = cost_model or CostModel()
    ignore_tokens = tuple(ignores)
    destination_paths = order_destination(filter_ignored(destination, ignore_tokens))
    source_paths = filter_ignored(source, ignore_tokens)
    logger.debug(
        "Matching %d destination leaves against %d source leaves (%s)",
        len(destination_paths),
        len(source_paths),
        strategy.value,
    )

    if strategy is MatchStrategy.GREEDY:
        chosen = _greedy_assignment(destination_paths, source_paths, resolved_cost_model)
    else:
        chosen = _optimal_assignment(destination_paths, source_paths, resolved_cost_model)

    matches = []
    for destination_path, source_index in zip(destination_paths, chosen):
        if source_index is None:
            matches.append(FieldMatch(destination=destination_path, source=None))
            continue
        source_path = source_paths[source_index]
        matches.append(
            FieldMatch(
                destination=destination_path,
                source=source_path,
                cost=resolved_cost_model.path_cost(str(destination_path), str(source_path)),
            )
        )
    used = {index for index in chosen if index is not None}
    unmatched_sources = tuple(
        path for index, path in enumerate(source_paths) if index not in used
    )
    return MatchResult(matches=tuple(matches), unmatched_sources=unmatched_sources)


def _optimal_assignment(
    destination: Sequence[FieldPath],
    source: Sequence[FieldPath],
    cost_model: CostModel,
) -> list[int | None]:
    if not destination or not source:
        return [None] * len(destination)
    matrix = build_cost_matrix(
        [str(path) for path in destination],
        [str(path) for path in source],
        cost_model.score,
    )
    columns = solve_assignment(matrix)
    # Rows past len(destination) are padding; columns past len(source) mean "no source".
    return [
        column if column < len(source) else None for column in columns[: len(destination)]
    ]


def _greedy_assignment(
    destination: Sequence[FieldPath],
    source: Sequence[FieldPath],
    cost_model: CostModel,
) -> list[int | None]:
    remaining = list(range(len(source)))
    chosen: list[int | None] = []
    for destination_path in destination:
        if not remaining:
            chosen.append(None)
            continue
        best = min(
            remaining,
            key=lambda index: cost_model.path_cost(str(destination_path), str(source[index])),
        )
        remaining.remove(best)
        chosen.append(best)
    return chosen
