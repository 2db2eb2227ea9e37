"""Mapping renderer tests."""

from __future__ import annotations

from field_repack.field_matching.matching_outcomes import FieldMatch, MatchResult
from field_repack.mapping_rendering.mapping_renderer import (
    BRACE_STYLE,
    render_assignment_lines,
    render_mapping,
)
from field_repack.schema_management.schema_models import FieldPath, SchemaField, SchemaNode
from field_repack.schema_management.schema_walker import RecursionPolicy

PROFILE = SchemaNode(
    name="Profile",
    namespace="app.domain",
    fields=(
        SchemaField(name="Name", type_name="str"),
        SchemaField(name="Email", type_name="str"),
    ),
)
USER = SchemaNode(
    name="UserDTO",
    namespace="app.domain",
    fields=(
        SchemaField(name="ID", type_name="int"),
        SchemaField(
            name="Profile",
            type_name="Profile",
            namespace="app.domain",
            optional=True,
            record=PROFILE,
        ),
    ),
)


def _path(text: str) -> FieldPath:
    root, *names = text.split(".")
    return FieldPath(root=root, names=tuple(names))


def _result(*pairs: tuple[str, str | None]) -> MatchResult:
    return MatchResult(
        matches=tuple(
            FieldMatch(
                destination=_path(destination),
                source=_path(source) if source else None,
                cost=0 if source else None,
            )
            for destination, source in pairs
        ),
        unmatched_sources=(),
    )


def test_renders_nested_python_constructor_skeleton() -> None:
    result = _result(
        ("x.Profile.Email", "y.Contact.Email"),
        ("x.Profile.Name", "y.FullName"),
        ("x.ID", "y.Id"),
    )

    text = render_mapping(USER, result)

    assert text.splitlines() == [
        "UserDTO(",
        "    ID=y.Id,",
        "    Profile=Profile(",
        "        Name=y.FullName,",
        "        Email=y.Contact.Email,",
        "    ),",
        ")",
    ]


def test_unmatched_leaves_get_blank_token() -> None:
    result = _result(("x.Profile.Email", None), ("x.Profile.Name", "y.Name"), ("x.ID", None))

    text = render_mapping(USER, result, blank="None")

    assert "    ID=None," in text.splitlines()
    assert "        Email=None," in text.splitlines()
    assert "y." in text
    assert text.count("y.") == 1


def test_brace_style_marks_references_and_uses_custom_indent() -> None:
    result = _result(
        ("x.Profile.Email", "y.Email"),
        ("x.Profile.Name", "y.Name"),
        ("x.ID", "y.ID"),
    )

    text = render_mapping(USER, result, style=BRACE_STYLE, indent="\t", blank="")

    assert text.splitlines() == [
        "UserDTO{",
        "\tID: y.ID,",
        "\tProfile: &Profile{",
        "\t\tName: y.Name,",
        "\t\tEmail: y.Email,",
        "\t},",
        "}",
    ]


def test_ignored_leaves_are_omitted_from_skeleton() -> None:
    result = _result(("x.Profile.Email", "y.Email"), ("x.ID", "y.ID"))

    lines = render_mapping(USER, result).splitlines()

    assert not any("Name" in line for line in lines)
    assert "        Email=y.Email," in lines


def test_renderer_honours_recursion_policy() -> None:
    result = _result(("x.Profile", "y.Profile"), ("x.ID", "y.ID"))

    text = render_mapping(
        USER,
        result,
        policy=RecursionPolicy(local_namespaces=("other",)),
    )

    assert text.splitlines() == ["UserDTO(", "    ID=y.ID,", "    Profile=y.Profile,", ")"]


def test_flat_lines_skip_unmatched_destinations() -> None:
    result = _result(("x.Profile.Name", "y.Name"), ("x.ID", None))

    assert render_assignment_lines(result) == ["x.Profile.Name = y.Name"]


def test_empty_result_renders_bare_record() -> None:
    text = render_mapping(SchemaNode(name="Empty"), _result())

    assert text.splitlines() == ["Empty(", ")"]


def test_records_without_remaining_leaves_are_omitted() -> None:
    result = _result(("x.ID", "y.ID"))

    lines = render_mapping(USER, result).splitlines()

    assert lines == ["UserDTO(", "    ID=y.ID,", ")"]


def test_records_with_only_unmatched_leaves_are_kept() -> None:
    result = _result(("x.Profile.Email", None), ("x.Profile.Name", None), ("x.ID", "y.ID"))

    lines = render_mapping(USER, result).splitlines()

    assert "    Profile=Profile(" in lines
    assert "        Name=...," in lines
