"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from field_repack.field_matching.matching_outcomes import MatchResult


@dataclass(frozen=True)
class RepackRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for one repack run.

    ``None`` overrides leave the configured value in place.
    """

    source: str
    destination: str
    config_path: str | None = None
    ignores: tuple[str, ...] = ()
    strategy: str | None = None
    style: str | None = None
    local_namespaces: tuple[str, ...] | None = None
    flat: bool = False
    report_path: str | None = None


@dataclass(frozen=True)
class RepackOutcome:
    """Output contract for one completed run."""

    text: str
    result: MatchResult
    report_path: Path | None = None
