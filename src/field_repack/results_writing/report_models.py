"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MappingStatus(str, Enum):
    """Rendered status in the mapping report status column."""

    MATCHED = "MATCHED"
    UNMATCHED = "UNMATCHED"
    UNUSED_SOURCE = "UNUSED_SOURCE"


@dataclass(frozen=True)
class ReportMetadata:
    """Metadata rendered into the RunInfo sheet."""

    generated_at: datetime
    source_locator: str
    destination_locator: str
    strategy: str
    ignored: tuple[str, ...]
