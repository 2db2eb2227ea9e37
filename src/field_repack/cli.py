"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from field_repack.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from field_repack.field_matching import MatchStrategy
from field_repack.mapping_rendering import LITERAL_STYLES
from field_repack.run_execution import RepackRequest, RunExecutionError, execute_repack


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="field-repack")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Propose field-by-field mappings between two record types."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings file with the default values and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="repack")
@click.option(
    "--src",
    "-src",
    "source",
    required=True,
    help="Source type as <locator>#<TypeName>",
)
@click.option(
    "--dst",
    "-dst",
    "destination",
    required=True,
    help="Destination type as <locator>#<TypeName>",
)
@click.option(
    "-i",
    "--ignore",
    "ignores",
    multiple=True,
    help="Field names to leave out of matching (comma separated, repeatable)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON settings file",
)
@click.option(
    "--strategy",
    type=click.Choice([strategy.value for strategy in MatchStrategy]),
    default=None,
    help="Matching strategy (defaults to the configured one, optimal)",
)
@click.option(
    "--style",
    type=click.Choice(sorted(LITERAL_STYLES)),
    default=None,
    help="Literal style of the rendered skeleton",
)
@click.option(
    "--local-namespace",
    "local_namespaces",
    multiple=True,
    help="Namespace whose nested records are flattened (repeatable)",
)
@click.option(
    "--flat",
    is_flag=True,
    default=False,
    help="Print '<destination> = <source>' lines instead of the nested skeleton.",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of an Excel mapping report to write",
)
# pylint: disable-next=too-many-arguments
def repack(
    source: str,
    destination: str,
    ignores: tuple[str, ...],
    config_path: str | None,
    strategy: str | None,
    style: str | None,
    local_namespaces: tuple[str, ...],
    flat: bool,
    report_path: str | None,
) -> None:
    """Match destination fields to source fields and print the conversion skeleton."""
    ignore_tokens = tuple(
        token.strip() for value in ignores for token in value.split(",") if token.strip()
    )
    try:
        outcome = execute_repack(
            RepackRequest(
                source=source,
                destination=destination,
                config_path=config_path,
                ignores=ignore_tokens,
                strategy=strategy,
                style=style,
                local_namespaces=local_namespaces or None,
                flat=flat,
                report_path=report_path,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.text:
        click.echo(outcome.text)
    if outcome.report_path is not None:
        click.echo(f"report written: {outcome.report_path}", err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="field-repack", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
