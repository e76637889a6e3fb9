"""Plan commands - print the build plan or export map of a package."""

import json
from typing import List, Optional

import typer
from bundlekit_common import BundlekitError
from bundlekit_schema import BundleOptions
from bundlekit_sdk import build_export_paths, compile_build_plan, load_manifest

from .utils import ConsoleReporter, error


def _print_json(data: dict) -> None:
    typer.echo(json.dumps(data, indent=2))


def plan(
    cwd: str = typer.Argument(".", help="Package directory containing package.json"),
    entry: Optional[str] = typer.Option(
        None,
        "--entry",
        help="Single entry source file, used for every job",
    ),
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-o",
        help="Single output file, replaces every job output",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format used with --file: esm or cjs",
    ),
    external: Optional[List[str]] = typer.Option(
        None,
        "--external",
        "-e",
        help="Extra module id to keep external (repeatable)",
    ),
    no_external: bool = typer.Option(
        False,
        "--no-external",
        help="Bundle every dependency",
    ),
    dts: bool = typer.Option(
        False,
        "--dts",
        help="Plan type declaration jobs instead of asset jobs",
    ),
):
    """
    Print the build plan of a package as JSON.

    \b
    Examples:
        bundlekit plan
        bundlekit plan packages/ui --dts
        bundlekit plan . --entry src/index.ts -o dist/index.js -f cjs
    """
    try:
        options = BundleOptions(
            file=file,
            format=format,
            external=external or [],
            no_external=no_external,
            dts=dts,
        )
        build_plan = compile_build_plan(cwd, options=options, entry=entry, reporter=ConsoleReporter())
    except BundlekitError as e:
        error(e.message)
        raise typer.Exit(1)

    _print_json(build_plan.to_dict())


def exports(
    cwd: str = typer.Argument(".", help="Package directory containing package.json"),
):
    """Print the canonical export-paths map of a package as JSON."""
    try:
        manifest = load_manifest(cwd)
    except BundlekitError as e:
        error(e.message)
        raise typer.Exit(1)

    _print_json(build_export_paths(manifest))
