"""Name dissimilarity scoring between destination and source field paths."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SUFFIX_LENGTH = 5
DEFAULT_INDEL_COST = 1
DEFAULT_SUBSTITUTION_COST = 2


def edit_distance(
    a: str,
    b: str,
    *,
    indel_cost: int = DEFAULT_INDEL_COST,
    substitution_cost: int = DEFAULT_SUBSTITUTION_COST,
) -> int:
    """Weighted Levenshtein distance between ``a`` and ``b``."""
    previous = [column * indel_cost for column in range(len(b) + 1)]
    for row, a_char in enumerate(a, start=1):
        current = [row * indel_cost]
        for column, b_char in enumerate(b, start=1):
            replace = 0 if a_char == b_char else substitution_cost
            current.append(
                min(
                    current[column - 1] + indel_cost,
                    previous[column] + indel_cost,
                    previous[column - 1] + replace,
                )
            )
        previous = current
    return previous[-1]


@dataclass(frozen=True)
class CostModel:
    """Suffix-weighted path dissimilarity.

    The trailing ``suffix_length`` characters are scored a second time so
    agreement in a leaf's own name outweighs differences in its ancestry.
    """

    suffix_length: int = DEFAULT_SUFFIX_LENGTH
    indel_cost: int = DEFAULT_INDEL_COST
    substitution_cost: int = DEFAULT_SUBSTITUTION_COST

    def distance(self, a: str, b: str) -> int:
        return edit_distance(
            a, b, indel_cost=self.indel_cost, substitution_cost=self.substitution_cost
        )

    def path_cost(self, destination: str, source: str) -> int:
        total = self.distance(destination, source)
        if self.suffix_length > 0:
            total += self.distance(
                destination[-self.suffix_length :], source[-self.suffix_length :]
            )
        return total

    def score(self, destination: str, source: str) -> int:
        """Matrix entry for a real pair; higher is better."""
        return -self.path_cost(destination, source)
