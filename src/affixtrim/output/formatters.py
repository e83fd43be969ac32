"""Rich/JSON/quiet output helpers.

The CLI renders ServiceResult for humans (a Rich table), for machines
(``--json``) or for pipelines (``--quiet``: one trimmed value per line).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from affixtrim.output.console import create_console, get_output

if TYPE_CHECKING:
    from affixtrim.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Which of the three output modes to use."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return _format_error(result)
    if settings.quiet:
        return "\n".join(item["result"] for item in result.data.get("items", []))
    return _render_table(result, verbose=settings.verbose)


def _format_error(result: ServiceResult) -> str:
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {error_msg}"


def _render_table(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    data = result.data
    items: list[dict[str, Any]] = data.get("items", [])

    console.print(
        f"[affix.ok]OK[/affix.ok] [affix.op]{result.op}[/affix.op] "
        f"[affix.key]({data.get('changed', 0)}/{data.get('count', 0)} changed, "
        f"{data.get('kind', 'text')})[/affix.key]"
    )
    if verbose:
        for step in data.get("steps", []):
            console.print(f"  [affix.key]{step['side']}:[/affix.key] {escape(repr(step['affix']))}")

    if items:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("", width=1)
        table.add_column("subject")
        table.add_column("result")
        if verbose and any("result_hex" in item for item in items):
            table.add_column("hex", style="affix.key")
        for item in items:
            marker = "[affix.changed]*[/affix.changed]" if item["changed"] else " "
            row = [marker, escape(repr(item["subject"])), escape(repr(item["result"]))]
            if "result_hex" in item and verbose:
                row.append(item["result_hex"])
            table.add_row(*row)
        console.print(table)

    return get_output(console).rstrip("\n")
