"""docreflect CLI - inspect docblock return types and check values against them.

This module provides the command-line interface for docreflect, exposing the
method reflector as `inspect` and `check` commands.
"""

from __future__ import annotations

import json
import sys
import traceback
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from dotenv import load_dotenv
from pydantic import BaseModel
from rich.console import Console

from docreflect.core.reflector import MethodReflector, ReflectionError

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="docreflect",
    help="Runtime return type checks driven by method docblocks",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False

EXIT_INVALID = 1
EXIT_REFLECTION_ERROR = 2


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if is_verbose():
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """docreflect CLI - runtime return type checks."""
    set_verbose(verbose)


def open_reflector(target: str, method: str, paths: Optional[list[Path]]) -> MethodReflector:
    """Build a reflector, exiting with a readable error if the method is missing."""
    for path in reversed(paths or []):
        sys.path.insert(0, str(path))

    try:
        return MethodReflector(target, method)
    except ReflectionError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            err_console.print(f"  {e.details}")
        print_exception(e)
        raise typer.Exit(EXIT_REFLECTION_ERROR)


def decode_value(raw: str) -> Any:
    """Decode a JSON value, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def dump_json(model: BaseModel) -> str:
    return json.dumps(model.model_dump(mode="json"), indent=2, ensure_ascii=False)


TargetArg = Annotated[str, typer.Argument(help="Class import path, e.g. 'pkg.mod:Class'")]
MethodArg = Annotated[str, typer.Argument(help="Method name")]
PathOption = Annotated[
    Optional[list[Path]],
    typer.Option("--path", "-p", help="Directory to prepend to the import path"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print JSON instead of a table")]


@app.command()
def inspect(
    target: TargetArg,
    method: MethodArg,
    path: PathOption = None,
    as_json: JsonOption = False,
) -> None:
    """Show the docstring source and declared return types of a method.

    Example:
        docreflect inspect myapp.models:User to_dict
    """
    from docreflect.cli._tables import build_report_table

    report = open_reflector(target, method, path).report()

    if as_json:
        typer.echo(dump_json(report))
        return

    console.print(build_report_table(report))
    if report.doc_source and report.doc_source != report.declaring_class:
        console.print(f"[yellow]Docstring inherited from interface:[/yellow] {report.doc_source}")


@app.command()
def check(
    target: TargetArg,
    method: MethodArg,
    value: Annotated[str, typer.Argument(help="Value to check, as JSON (plain text is a string)")],
    path: PathOption = None,
    as_json: JsonOption = False,
) -> None:
    """Check a value against a method's declared return types.

    Exits with 0 when the value conforms and 1 when it does not.

    Example:
        docreflect check myapp.models:User get_id 42
    """
    result = open_reflector(target, method, path).check(decode_value(value))

    if as_json:
        typer.echo(dump_json(result))
    elif result.valid:
        console.print(f"[green]✓[/green] {result.value_type} conforms to {result.method}")
    else:
        declared = "|".join(result.declared_types)
        err_console.print(
            f"[red]✗[/red] {result.value_type} does not conform to {result.method} "
            f"(declared: {declared})"
        )

    if not result.valid:
        raise typer.Exit(EXIT_INVALID)


if __name__ == "__main__":
    app()
