"""Boundary tests for field_matching internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_matching_core_does_not_import_outer_layers() -> None:
    matching_dir = _project_root() / "src" / "field_repack" / "field_matching"
    core_modules = (
        matching_dir / "cost_model.py",
        matching_dir / "assignment_solver.py",
        matching_dir / "field_matcher.py",
    )
    forbidden_import_fragments = (
        "field_repack.cli",
        "field_repack.configuration",
        "field_repack.mapping_rendering",
        "field_repack.results_writing",
        "field_repack.run_execution",
        "import yaml",
        "import click",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
