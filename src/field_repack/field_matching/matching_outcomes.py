"""Field matching entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from field_repack.schema_management.schema_models import FieldPath


class MatchStrategy(str, Enum):
    """How destination leaves are paired with source leaves."""

    OPTIMAL = "optimal"
    GREEDY = "greedy"


@dataclass(frozen=True)
class FieldMatch:
    """One destination leaf and the source leaf chosen for it, if any."""

    destination: FieldPath
    source: FieldPath | None
    cost: int | None = None

    @property
    def matched(self) -> bool:
        return self.source is not None


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one destination schema against one source schema."""

    matches: tuple[FieldMatch, ...]
    unmatched_sources: tuple[FieldPath, ...]

    @property
    def matched_count(self) -> int:
        return sum(1 for match in self.matches if match.matched)

    @property
    def total_cost(self) -> int:
        return sum(match.cost for match in self.matches if match.cost is not None)

    def source_by_destination(self) -> Mapping[FieldPath, FieldPath | None]:
        return {match.destination: match.source for match in self.matches}
