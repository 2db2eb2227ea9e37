"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from field_repack.field_matching.cost_model import (
    DEFAULT_INDEL_COST,
    DEFAULT_SUBSTITUTION_COST,
    DEFAULT_SUFFIX_LENGTH,
)
from field_repack.field_matching.matching_outcomes import MatchStrategy
from field_repack.mapping_rendering.mapping_renderer import DEFAULT_BLANK, DEFAULT_INDENT
from field_repack.schema_management.schema_walker import DEFAULT_MAX_DEPTH

DEFAULT_MAX_FIELDS = 500


@dataclass(frozen=True)
class MatchingSettings:
    """Cost model tunables and matching limits."""

    strategy: MatchStrategy = MatchStrategy.OPTIMAL
    suffix_length: int = DEFAULT_SUFFIX_LENGTH
    indel_cost: int = DEFAULT_INDEL_COST
    substitution_cost: int = DEFAULT_SUBSTITUTION_COST
    max_fields: int = DEFAULT_MAX_FIELDS
    ignore: tuple[str, ...] = ()


@dataclass(frozen=True)
class SchemaSettings:
    """Which nested records are flattened and how deep."""

    local_namespaces: tuple[str, ...] | None = None
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class RenderSettings:
    """Skeleton output formatting."""

    style: str = "python"
    blank: str = DEFAULT_BLANK
    indent: str = DEFAULT_INDENT


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    matching: MatchingSettings = field(default_factory=MatchingSettings)
    schema: SchemaSettings = field(default_factory=SchemaSettings)
    render: RenderSettings = field(default_factory=RenderSettings)
