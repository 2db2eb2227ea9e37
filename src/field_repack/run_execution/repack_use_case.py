"""Repack use-case service: load, flatten, match and render."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

from field_repack.configuration import Configuration, ConfigurationError, load_configuration
from field_repack.field_matching import CostModel, MatchStrategy, filter_ignored, match_fields
from field_repack.mapping_rendering import (
    LITERAL_STYLES,
    render_assignment_lines,
    render_mapping,
)
from field_repack.results_writing import ReportMetadata, write_mapping_workbook
from field_repack.schema_management import (
    DESTINATION_ROOT,
    SOURCE_ROOT,
    RecursionPolicy,
    SchemaError,
    SchemaNode,
    flatten_schema,
    load_schema,
)

from .run_contracts import RepackOutcome, RepackRequest

logger = logging.getLogger(__name__)

SchemaLoader = Callable[[str], SchemaNode]


class RunExecutionError(Exception):
    """Raised when a repack run cannot be completed."""


def execute_repack(
    request: RepackRequest,
    *,
    schema_loader: SchemaLoader | None = None,
) -> RepackOutcome:
    """Execute one repack run and return the rendered mapping."""
    resolved_loader = schema_loader or load_schema
    configuration = _resolve_configuration(request)
    matching = configuration.matching
    policy = RecursionPolicy(
        local_namespaces=configuration.schema.local_namespaces,
        max_depth=configuration.schema.max_depth,
    )

    try:
        source_schema = resolved_loader(request.source)
        destination_schema = resolved_loader(request.destination)
        source_paths = flatten_schema(source_schema, root=SOURCE_ROOT, policy=policy)
        destination_paths = flatten_schema(
            destination_schema, root=DESTINATION_ROOT, policy=policy
        )
    except SchemaError as exc:
        raise RunExecutionError(str(exc)) from exc
    logger.info(
        "Flattened %s into %d leaves and %s into %d leaves",
        request.destination,
        len(destination_paths),
        request.source,
        len(source_paths),
    )

    for label, paths in (("destination", destination_paths), ("source", source_paths)):
        candidate_count = len(filter_ignored(paths, matching.ignore))
        if candidate_count > matching.max_fields:
            raise RunExecutionError(
                f"The {label} schema has {candidate_count} leaves to match, more than "
                f"matching.max_fields ({matching.max_fields})."
            )

    result = match_fields(
        destination_paths,
        source_paths,
        cost_model=CostModel(
            suffix_length=matching.suffix_length,
            indel_cost=matching.indel_cost,
            substitution_cost=matching.substitution_cost,
        ),
        strategy=matching.strategy,
        ignores=matching.ignore,
    )
    logger.info(
        "Matched %d of %d destination leaves (total cost %d)",
        result.matched_count,
        len(result.matches),
        result.total_cost,
    )

    if request.flat:
        text = "\n".join(render_assignment_lines(result))
    else:
        text = render_mapping(
            destination_schema,
            result,
            style=LITERAL_STYLES[configuration.render.style],
            policy=policy,
            blank=configuration.render.blank,
            indent=configuration.render.indent,
        )

    report_path = None
    if request.report_path:
        metadata = ReportMetadata(
            generated_at=datetime.now(UTC),
            source_locator=request.source,
            destination_locator=request.destination,
            strategy=matching.strategy.value,
            ignored=matching.ignore,
        )
        try:
            report_path = write_mapping_workbook(request.report_path, result, metadata)
        except OSError as exc:
            raise RunExecutionError(f"Failed to write mapping report: {exc}") from exc
        logger.info("Wrote mapping report to %s", report_path)

    return RepackOutcome(text=text, result=result, report_path=report_path)


def _resolve_configuration(request: RepackRequest) -> Configuration:
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    matching = configuration.matching
    if request.ignores:
        matching = replace(matching, ignore=(*matching.ignore, *request.ignores))
    if request.strategy is not None:
        try:
            matching = replace(matching, strategy=MatchStrategy(request.strategy))
        except ValueError as exc:
            raise RunExecutionError(f"Unknown matching strategy: {request.strategy}") from exc

    render = configuration.render
    if request.style is not None:
        if request.style not in LITERAL_STYLES:
            raise RunExecutionError(f"Unknown render style: {request.style}")
        render = replace(render, style=request.style)

    schema = configuration.schema
    if request.local_namespaces is not None:
        schema = replace(schema, local_namespaces=request.local_namespaces)

    return replace(configuration, matching=matching, render=render, schema=schema)
