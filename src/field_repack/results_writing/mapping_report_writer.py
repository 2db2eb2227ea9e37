"""Mapping report workbook writer service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from field_repack.field_matching.matching_outcomes import MatchResult

from .report_models import MappingStatus, ReportMetadata

MAPPING_SHEET_NAME = "Mapping"
RUN_INFO_SHEET_NAME = "RunInfo"
MAPPING_COLUMNS: tuple[str, ...] = ("Destination", "Source", "Cost", "Status")

_MappingRow = tuple[str | None, str | None, int | None, MappingStatus]


def write_mapping_workbook(
    output_path: Path | str,
    result: MatchResult,
    metadata: ReportMetadata,
) -> Path:
    """Write the proposed mapping as a reviewable Excel workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = MAPPING_SHEET_NAME

    rows: list[_MappingRow] = []
    for match in result.matches:
        status = MappingStatus.MATCHED if match.matched else MappingStatus.UNMATCHED
        source = str(match.source) if match.source is not None else None
        rows.append((str(match.destination), source, match.cost, status))
    for source_path in result.unmatched_sources:
        rows.append((None, str(source_path), None, MappingStatus.UNUSED_SOURCE))

    _write_mapping_sheet(sheet, rows)
    _write_run_info_sheet(workbook, result, metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_mapping_sheet(sheet: Worksheet, rows: list[_MappingRow]) -> None:
    for column_index, name in enumerate(MAPPING_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 4"
    widths = [len(name) for name in MAPPING_COLUMNS]
    for row_index, (destination, source, cost, status) in enumerate(rows, start=2):
        values = (destination, source, cost, status.value)
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
            if value is not None:
                widths[column_index - 1] = max(widths[column_index - 1], len(str(value)))
    for column_index, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(width + 4, 60)
        )
    sheet.freeze_panes = "A2"


def _write_run_info_sheet(
    workbook: Workbook, result: MatchResult, metadata: ReportMetadata
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = [
        ("generated_at", metadata.generated_at.isoformat()),
        ("source", metadata.source_locator),
        ("destination", metadata.destination_locator),
        ("strategy", metadata.strategy),
        ("ignored", ", ".join(metadata.ignored)),
        ("destination_leaves", len(result.matches)),
        ("matched", result.matched_count),
        ("unused_sources", len(result.unmatched_sources)),
        ("total_cost", result.total_cost),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
