"""Log Stats - Report output"""

import json

from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from .models import LogSummary


def report_json(summary: LogSummary) -> str:
    return json.dumps(summary.to_dict(), indent=2)


def _ranking_table(title: str, label: str, entries) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", style="dim")
    table.add_column(label, style="cyan")
    table.add_column("Hits", style="white")
    for rank, (value, count) in enumerate(entries, 1):
        table.add_row(str(rank), escape(value) if value else "[dim](empty)[/]", str(count))
    return table


def print_report(summary: LogSummary, console=None):
    if console is None:
        print(report_json(summary))
        return

    console.print("\n" + "═" * 70, style="cyan")
    console.print("              LOG STATS REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"File: [cyan]{escape(summary.filepath)}[/]\n"
        f"Lines: [cyan]{summary.total_lines:,}[/]\n"
        f"IP Occurrences: [cyan]{summary.total_ips:,}[/]\n"
        f"Unique IPs: [cyan]{summary.unique_ips:,}[/]\n"
        f"Lines Without IP: [{'yellow' if summary.unmatched_lines else 'green'}]{summary.unmatched_lines:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    console.print(_ranking_table("TOP IPs", "IP Address", summary.top_ip_counts))
    console.print(_ranking_table("TOP URLs", "URL", summary.top_url_counts))

    console.print("═" * 70, style="cyan")
