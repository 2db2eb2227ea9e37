"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from field_repack.field_matching.matching_outcomes import MatchStrategy
from field_repack.mapping_rendering.mapping_renderer import LITERAL_STYLES

from .runtime_settings import Configuration, MatchingSettings, RenderSettings, SchemaSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file; ``None`` yields the defaults."""
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        matching=_parse_matching_section(parsed.get("matching")),
        schema=_parse_schema_section(parsed.get("schema")),
        render=_parse_render_section(parsed.get("render")),
    )


def _parse_matching_section(value: Any) -> MatchingSettings:
    section = _optional_mapping(value, "matching")
    defaults = MatchingSettings()
    strategy_raw = section.get("strategy", defaults.strategy.value)
    strategy_name = _require_non_empty_string(strategy_raw, "matching.strategy").lower()
    try:
        strategy = MatchStrategy(strategy_name)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in MatchStrategy)
        raise ConfigurationError(f"matching.strategy must be one of: {allowed}.") from exc
    return MatchingSettings(
        strategy=strategy,
        suffix_length=_require_non_negative_int(
            section.get("suffix_length", defaults.suffix_length), "matching.suffix_length"
        ),
        indel_cost=_require_positive_int(
            section.get("indel_cost", defaults.indel_cost), "matching.indel_cost"
        ),
        substitution_cost=_require_positive_int(
            section.get("substitution_cost", defaults.substitution_cost),
            "matching.substitution_cost",
        ),
        max_fields=_require_positive_int(
            section.get("max_fields", defaults.max_fields), "matching.max_fields"
        ),
        ignore=_normalize_string_sequence(section.get("ignore"), "matching.ignore"),
    )


def _parse_schema_section(value: Any) -> SchemaSettings:
    section = _optional_mapping(value, "schema")
    defaults = SchemaSettings()
    raw_namespaces = section.get("local_namespaces")
    local_namespaces = (
        None
        if raw_namespaces is None
        else _normalize_string_sequence(raw_namespaces, "schema.local_namespaces")
    )
    return SchemaSettings(
        local_namespaces=local_namespaces,
        max_depth=_require_positive_int(
            section.get("max_depth", defaults.max_depth), "schema.max_depth"
        ),
    )


def _parse_render_section(value: Any) -> RenderSettings:
    section = _optional_mapping(value, "render")
    defaults = RenderSettings()
    style = _require_non_empty_string(section.get("style", defaults.style), "render.style")
    if style not in LITERAL_STYLES:
        allowed = ", ".join(sorted(LITERAL_STYLES))
        raise ConfigurationError(f"render.style must be one of: {allowed}.")
    blank = section.get("blank", defaults.blank)
    if not isinstance(blank, str):
        raise ConfigurationError("render.blank must be a string.")
    indent = section.get("indent", defaults.indent)
    if isinstance(indent, int) and not isinstance(indent, bool):
        indent = " " * _require_positive_int(indent, "render.indent")
    if not isinstance(indent, str) or not indent or indent.strip():
        raise ConfigurationError("render.indent must be whitespace or a number of spaces.")
    return RenderSettings(style=style, blank=blank, indent=indent)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
