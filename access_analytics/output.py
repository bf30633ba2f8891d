"""Access Analytics - Report output"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import LogAnalytics


def _ranked_table(title: str, column: str, keys, style: str) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column(column, style=style)
    for position, key in enumerate(keys, 1):
        table.add_row(str(position), key or "(empty)")
    return table


def print_report(analytics: LogAnalytics, console: Console):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              ACCESS LOG REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"Lines Read: [cyan]{analytics.total_lines:,}[/]\n"
        f"Lines Skipped: [{'yellow' if analytics.skipped_lines else 'green'}]{analytics.skipped_lines:,}[/]\n"
        f"Unique IPs: [cyan]{analytics.unique_ip_count:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    if analytics.most_visited_urls:
        console.print("\n" + "─" * 70, style="cyan")
        console.print(_ranked_table("MOST VISITED URLS", "URL", analytics.most_visited_urls, "cyan"))

    if analytics.most_active_ips:
        console.print("\n" + "─" * 70, style="cyan")
        console.print(_ranked_table("MOST ACTIVE IPs", "IP Address", analytics.most_active_ips, "yellow"))

    console.print("\n" + "═" * 70, style="cyan")
