"""Rich table builders used by the CLI.

Kept separate to keep the command module focused on CLI wiring.
"""

from __future__ import annotations

from rich.table import Table

from docreflect.core.models import ReflectionReport


def build_report_table(report: ReflectionReport) -> Table:
    """Build a (Field, Value) table describing a reflected method."""
    table = Table(show_header=True, title=f"{report.target}.{report.method}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Declaring class", report.declaring_class)
    table.add_row("Kind", report.kind.value)
    table.add_row("Doc source", report.doc_source or "[dim]none[/dim]")
    table.add_row(
        "Return types",
        " | ".join(repr(t) for t in report.return_types) or "[dim]unconstrained[/dim]",
    )
    return table
