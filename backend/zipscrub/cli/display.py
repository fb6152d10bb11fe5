from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from ..scanner.models import RunSummary


def format_bytes(size: int) -> str:
    """Represent file sizes with a readable binary unit."""
    step = 1024.0
    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    value = float(size)
    for unit in units:
        if value < step or unit == units[-1]:
            return f"{value:.2f} {unit}"
        value /= step
    return f"{value:.2f} PB"


def summary_rows(summary: RunSummary) -> list[tuple[str, str]]:
    """Metric/value pairs describing a finished run."""
    bytes_written = sum(
        outcome.result.bytes_written for outcome in summary.outcomes if outcome.result
    )
    rows = [
        ("Archives found", str(summary.discovered)),
        ("Archives rewritten", str(summary.succeeded)),
        ("Archives failed", str(summary.failed)),
        ("PNG entries replaced", str(summary.entries_replaced)),
        ("Entries excluded", str(summary.entries_excluded)),
        ("Bytes written", format_bytes(bytes_written)),
    ]
    # Only surface removals and walk errors when something actually happened.
    if summary.removed:
        rows.insert(3, ("Archives removed", str(summary.removed)))
    if summary.traversal_errors:
        rows.append(("Directory errors", str(len(summary.traversal_errors))))
    return rows


def render_summary(console: Console, summary: RunSummary) -> None:
    table = Table(title="Summary", box=box.ROUNDED)
    table.add_column("Metric", style="cyan", justify="right")
    table.add_column("Value", style="white")
    for metric, value in summary_rows(summary):
        table.add_row(metric, value)
    console.print(table)
