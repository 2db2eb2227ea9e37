"""Mapping rendering exports."""

from .mapping_renderer import (
    BRACE_STYLE,
    DEFAULT_BLANK,
    DEFAULT_INDENT,
    LITERAL_STYLES,
    PYTHON_STYLE,
    LiteralStyle,
    render_assignment_lines,
    render_mapping,
)

__all__ = [
    "BRACE_STYLE",
    "DEFAULT_BLANK",
    "DEFAULT_INDENT",
    "LITERAL_STYLES",
    "PYTHON_STYLE",
    "LiteralStyle",
    "render_assignment_lines",
    "render_mapping",
]
