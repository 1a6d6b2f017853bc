"""Command line interface entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import click
import yaml

from simple_assertions.collection_matching import (
    IntrospectionError,
    assert_collections_match_by_fields,
)
from simple_assertions.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from simple_assertions.failure_reporting import ComparisonFailure


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="simple-assertions")
def cli() -> None:
    """Assertion helpers for record collections and captured logs."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="compare")
@click.option(
    "--left",
    "left_path",
    required=True,
    type=click.Path(path_type=str),
    help="YAML/JSON file holding the first list of records",
)
@click.option(
    "--right",
    "right_path",
    required=True,
    type=click.Path(path_type=str),
    help="YAML/JSON file holding the second list of records",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.option(
    "--exclude",
    "excluded_fields",
    multiple=True,
    help="Field name to skip while comparing records (repeatable)",
)
def compare(
    left_path: str,
    right_path: str,
    config_path: str | None,
    excluded_fields: tuple[str, ...],
) -> None:
    """Check that two record files hold the same records in any order."""
    try:
        configuration = load_configuration(config_path) if config_path else Configuration()
        left_records = _load_records(Path(left_path))
        right_records = _load_records(Path(right_path))
        result = assert_collections_match_by_fields(
            left_records,
            right_records,
            *excluded_fields,
            settings=configuration.collection_matching,
        )
    except (
        ComparisonFailure,
        ConfigurationError,
        IntrospectionError,
        OSError,
        ValueError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"{len(result.matched_pairs)} record(s) matched")


def _load_records(path: Path) -> list[object]:
    if not path.exists():
        raise ValueError(f"Record file not found: {path}")
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse record file {path}: {exc}") from exc
    if parsed is None:
        return []
    if isinstance(parsed, str) or not isinstance(parsed, Sequence):
        raise ValueError(f"Record file {path} must contain a list of records.")
    return list(parsed)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
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
