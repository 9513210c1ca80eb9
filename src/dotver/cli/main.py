"""Command-line interface for dotver."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..exceptions import InvalidVersionError, UnsupportedRangeError
from ..version import Version
from ..version_range import VersionRange
from ._helpers import (
    configure_logging,
    console,
    display,
    print_error,
    print_success,
)
from .config import ConfigError, load_config

app = typer.Typer(help="Parse, compare and enumerate dotted-numeric versions")

OUTPUT_FORMATS = ("text", "json", "table")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or dotver.toml)",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Parse, compare and enumerate dotted-numeric versions."""
    configure_logging(verbose)


@app.command()
def normalize(
    version: Annotated[str, typer.Argument(..., help="Version string")],
) -> None:
    """Print the canonical form of a version."""
    try:
        console.print(display(Version(version)))
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def components(
    version: Annotated[str, typer.Argument(..., help="Version string")],
    length: Annotated[
        int | None,
        typer.Option(
            ..., "--length", "-n", min=0, help="Truncate or zero-pad to N components"
        ),
    ] = None,
) -> None:
    """Print the components of a version as a JSON list."""
    try:
        console.print(json.dumps(Version(version).components(length)))
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def compare(
    first: Annotated[str, typer.Argument(..., help="First version")],
    second: Annotated[str, typer.Argument(..., help="Second version")],
) -> None:
    """Compare two versions."""
    try:
        left, right = Version(first), Version(second)
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    operator = {-1: "<", 0: "==", 1: ">"}[left.compare(right)]
    console.print(f"{display(left)} {operator} {display(right)}")


@app.command()
def sort(
    versions: Annotated[list[str], typer.Argument(..., help="Versions to sort")],
    reverse: Annotated[
        bool, typer.Option(..., "--reverse", "-r", help="Sort in descending order")
    ] = False,
) -> None:
    """Sort versions in ascending order."""
    try:
        parsed = [Version(version) for version in versions]
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    for version in sorted(parsed, reverse=reverse):
        console.print(display(version))


@app.command()
def include(
    start: Annotated[str, typer.Argument(..., help="Inclusive lower bound")],
    end: Annotated[str, typer.Argument(..., help="Exclusive upper bound")],
    version: Annotated[str, typer.Argument(..., help="Version to test")],
) -> None:
    """Check whether a version lies in [START, END).

    Exits with status 0 if it does and 1 if it does not.
    """
    try:
        versions = VersionRange(start, end)
        included = versions.include(version)
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    interval = f"[{display(versions.start)}, {display(versions.end)})"
    if included:
        print_success(f"{display(Version(version))} is in {interval}")
        raise typer.Exit(0)

    console.print(f"[red]✗[/red] {display(Version(version))} is not in {interval}")
    raise typer.Exit(1)


@app.command("list")
def list_versions(
    start: Annotated[str, typer.Argument(..., help="Inclusive lower bound")],
    end: Annotated[str, typer.Argument(..., help="Exclusive upper bound")],
    limit: Annotated[
        int | None,
        typer.Option(
            ...,
            "--limit",
            "-l",
            min=1,
            help="Maximum number of versions (default: max_range_size from config)",
        ),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option(
            ...,
            "--format",
            "-f",
            help="Output format: text, json or table (default: from config)",
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Enumerate every version in [START, END).

    Examples:
        # Print each build version of 1.0
        dotver list 1 1.1

        # Print as a JSON array
        dotver list 1.8.9 2.1 --format json
    """
    try:
        settings = load_config(config)
        output_format = format or settings.output_format
        if output_format not in OUTPUT_FORMATS:
            print_error(f"Unknown format: {output_format}")
            console.print(f"Supported formats: {', '.join(OUTPUT_FORMATS)}")
            raise typer.Exit(1)

        versions = VersionRange(start, end)
        max_size = limit or settings.max_range_size
        size = versions.size()
        if size > max_size:
            print_error(
                f"Range {versions!r} holds {size} versions, more than the limit "
                f"of {max_size}"
            )
            raise typer.Exit(1)

        items = versions.to_list()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except (InvalidVersionError, UnsupportedRangeError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if output_format == "json":
        console.print(json.dumps([str(item) for item in items], indent=2))
    elif output_format == "table":
        table = Table(title=f"[{display(versions.start)}, {display(versions.end)})")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Version", style="cyan")
        for index, item in enumerate(items, start=1):
            table.add_row(str(index), display(item))
        console.print(table)
        console.print(f"\n[dim]Total: {len(items)} versions[/dim]")
    else:
        for item in items:
            console.print(display(item))


if __name__ == "__main__":
    app()
