"""Nested literal skeleton rendering for a computed field mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from field_repack.field_matching.matching_outcomes import MatchResult
from field_repack.schema_management.schema_models import FieldPath, SchemaField, SchemaNode
from field_repack.schema_management.schema_walker import (
    DESTINATION_ROOT,
    RecursionPolicy,
    walk_schema,
)

DEFAULT_BLANK = "..."
DEFAULT_INDENT = "    "


@dataclass(frozen=True)
class LiteralStyle:
    """Tokens used to spell a record literal."""

    name: str
    open_token: str
    close_token: str
    assign_token: str
    reference_prefix: str = ""


PYTHON_STYLE = LiteralStyle(name="python", open_token="(", close_token=")", assign_token="=")
BRACE_STYLE = LiteralStyle(
    name="brace", open_token="{", close_token="}", assign_token=": ", reference_prefix="&"
)
LITERAL_STYLES: Mapping[str, LiteralStyle] = {
    style.name: style for style in (PYTHON_STYLE, BRACE_STYLE)
}


def render_assignment_lines(result: MatchResult) -> list[str]:
    """Flat ``<destination> = <source>`` lines for every matched leaf."""
    return [f"{match.destination} = {match.source}" for match in result.matches if match.matched]


class _SkeletonWriter:
    def __init__(
        self,
        root_type: str,
        sources: Mapping[FieldPath, FieldPath | None],
        *,
        style: LiteralStyle,
        blank: str,
        indent: str,
    ) -> None:
        self._root_type = root_type
        self._sources = sources
        self._style = style
        self._blank = blank
        self._indent = indent
        self._depth = 0
        # Record paths that still hold at least one participating leaf.
        self._populated = {
            destination.names[:length]
            for destination in sources
            for length in range(1, len(destination.names))
        }
        self.lines: list[str] = []

    def enter_record(self, schema_field: SchemaField | None, path: FieldPath) -> None:
        if not self._keeps(schema_field, path):
            return
        if schema_field is None:
            self._emit(f"{self._root_type}{self._style.open_token}")
        else:
            prefix = self._style.reference_prefix if schema_field.optional else ""
            self._emit(
                f"{schema_field.name}{self._style.assign_token}"
                f"{prefix}{schema_field.type_name}{self._style.open_token}"
            )
        self._depth += 1

    def visit_leaf(self, schema_field: SchemaField, path: FieldPath) -> None:
        if path not in self._sources:
            # Ignored leaves take no part in the mapping.
            return
        source = self._sources[path]
        value = str(source) if source is not None else self._blank
        self._emit(f"{schema_field.name}{self._style.assign_token}{value},")

    def exit_record(self, schema_field: SchemaField | None, path: FieldPath) -> None:
        if not self._keeps(schema_field, path):
            return
        self._depth -= 1
        separator = "" if schema_field is None else ","
        self._emit(f"{self._style.close_token}{separator}")

    def _keeps(self, schema_field: SchemaField | None, path: FieldPath) -> bool:
        return schema_field is None or path.names in self._populated

    def _emit(self, text: str) -> None:
        self.lines.append(f"{self._indent * self._depth}{text}")


def render_mapping(
    schema: SchemaNode,
    result: MatchResult,
    *,
    style: LiteralStyle = PYTHON_STYLE,
    policy: RecursionPolicy | None = None,
    blank: str = DEFAULT_BLANK,
    indent: str = DEFAULT_INDENT,
    root: str = DESTINATION_ROOT,
) -> str:
    """Render ``schema`` as a nested literal with matched source paths at its leaves.

    ``policy`` and ``root`` must be the ones used to flatten ``schema`` so the
    walked paths line up with the destination paths in ``result``.
    """
    writer = _SkeletonWriter(
        schema.name,
        result.source_by_destination(),
        style=style,
        blank=blank,
        indent=indent,
    )
    walk_schema(schema, writer, root=root, policy=policy)
    return "\n".join(writer.lines)
