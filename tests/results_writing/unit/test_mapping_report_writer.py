"""Mapping report writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from field_repack.field_matching.matching_outcomes import FieldMatch, MatchResult
from field_repack.results_writing import (
    MAPPING_COLUMNS,
    MAPPING_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    ReportMetadata,
    write_mapping_workbook,
)
from field_repack.schema_management.schema_models import FieldPath
from openpyxl import load_workbook


def _metadata() -> ReportMetadata:
    return ReportMetadata(
        generated_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        source_locator="models.yaml#Row",
        destination_locator="models.yaml#Dto",
        strategy="optimal",
        ignored=("CreatedAt",),
    )


def test_writes_mapping_and_run_info_sheets(tmp_path: Path) -> None:
    result = MatchResult(
        matches=(
            FieldMatch(
                destination=FieldPath("x", ("Name",)),
                source=FieldPath("y", ("FullName",)),
                cost=8,
            ),
            FieldMatch(destination=FieldPath("x", ("ID",)), source=None),
        ),
        unmatched_sources=(FieldPath("y", ("Extra",)),),
    )
    output_path = tmp_path / "reports" / "mapping.xlsx"

    written = write_mapping_workbook(output_path, result, _metadata())

    assert written == output_path.resolve()
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [MAPPING_SHEET_NAME, RUN_INFO_SHEET_NAME]
    rows = list(workbook[MAPPING_SHEET_NAME].iter_rows(values_only=True))
    assert rows[0] == MAPPING_COLUMNS
    assert rows[1] == ("x.Name", "y.FullName", 8, "MATCHED")
    assert rows[2] == ("x.ID", None, None, "UNMATCHED")
    assert rows[3] == (None, "y.Extra", None, "UNUSED_SOURCE")

    info = dict(workbook[RUN_INFO_SHEET_NAME].iter_rows(values_only=True))
    assert info["source"] == "models.yaml#Row"
    assert info["destination"] == "models.yaml#Dto"
    assert info["strategy"] == "optimal"
    assert info["ignored"] == "CreatedAt"
    assert info["destination_leaves"] == 2
    assert info["matched"] == 1
    assert info["unused_sources"] == 1
    assert info["total_cost"] == 8
    assert info["generated_at"].startswith("2024-05-01T12:00:00")
