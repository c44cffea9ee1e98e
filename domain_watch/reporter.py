from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from domain_watch.classifier import ClassificationSnapshot
from domain_watch.config import get_settings
from domain_watch.domain.models import DomainRecord

NO_MATCHES_MESSAGE = "No matching domains or owners found."


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _default_console() -> Console:
    return Console(width=get_settings().console_width)


def build_domain_table(
    records: Sequence[DomainRecord],
    snapshot: ClassificationSnapshot,
    title: str,
    date_format: Optional[str] = None,
) -> Table:
    """
    Build a rich table of records with their bucket flags.

    Flags are looked up in `snapshot` so every row shares one evaluation of the
    classification windows.
    """
    date_format = date_format or get_settings().date_format

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Owner", no_wrap=True)
    table.add_column("Start Date", style="green")
    table.add_column("Expiry Date", style="green")
    table.add_column("30 Days", justify="center", style="yellow")
    table.add_column("7 Days", justify="center", style="bold yellow")
    table.add_column("Expired", justify="center", style="red")
    table.add_column("Redemption", justify="center", style="bold red")

    for record in records:
        status = snapshot.status_for(record)
        table.add_row(
            str(record.id),
            escape(record.name),
            escape(record.owner),
            record.start_date.strftime(date_format),
            record.expiry_date.strftime(date_format),
            _yes_no(status.thirty_day),
            _yes_no(status.seven_day),
            _yes_no(status.expired),
            _yes_no(status.redemption),
        )

    return table


def render_domains(
    records: Sequence[DomainRecord],
    snapshot: ClassificationSnapshot,
    title: str = "Domains Overview",
    console: Optional[Console] = None,
) -> None:
    """Print the overview table for `records`."""
    console = console or _default_console()
    if not records:
        console.print("[yellow]No domains registered.[/yellow]")
        return
    console.print(build_domain_table(records, snapshot, title))


def render_search_results(
    results: Sequence[DomainRecord],
    snapshot: ClassificationSnapshot,
    term: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print search matches, or a notice when nothing matched."""
    console = console or _default_console()
    if not results:
        console.print(NO_MATCHES_MESSAGE)
        return
    title = "Search Results" if not term else f"Search Results for '{escape(term)}'"
    console.print(build_domain_table(results, snapshot, title))


__all__ = [
    "NO_MATCHES_MESSAGE",
    "build_domain_table",
    "render_domains",
    "render_search_results",
]
