"""Results writing domain exports."""

from .mapping_report_writer import (
    MAPPING_COLUMNS,
    MAPPING_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_mapping_workbook,
)
from .report_models import MappingStatus, ReportMetadata

__all__ = [
    "MAPPING_COLUMNS",
    "MAPPING_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "MappingStatus",
    "ReportMetadata",
    "write_mapping_workbook",
]
