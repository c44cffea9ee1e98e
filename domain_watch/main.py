from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional

import typer

from domain_watch.classifier import available_buckets, classify, search
from domain_watch.config import get_settings
from domain_watch.domain.exceptions import InvalidArgumentError
from domain_watch.reporter import render_domains, render_search_results
from domain_watch.seed import seed_sample_domains
from domain_watch.store import DomainRecordStore
from domain_watch.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Domain Watch CLI: track domain registrations by proximity to expiry.")
log = get_logger(__name__)

NULL_TERM_MESSAGE = "Search term cannot be null."
GOODBYE_MESSAGE = "Thank you for using the Domain Manager. Goodbye!"

NowOption = typer.Option(
    None,
    "--now",
    "-n",
    help="Instant to classify against (e.g. 2024-06-15 or 2024-06-15T09:30:00). Defaults to the current local time.",
)


def _bootstrap(now: Optional[datetime]) -> tuple[DomainRecordStore, datetime]:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    effective_now = now or datetime.now()
    store = seed_sample_domains(DomainRecordStore(), effective_now)
    return store, effective_now


def _read_line(text: str) -> Optional[str]:
    """Prompt for one line of input; None once input is exhausted."""
    try:
        return typer.prompt(text, default="", show_default=False)
    except typer.Abort:
        typer.echo()
        return None


def _run_search(store: DomainRecordStore, term: Optional[str], now: datetime) -> None:
    try:
        results = search(store, term)
    except InvalidArgumentError as exc:
        log.warning("Search rejected", extra={"reason": exc.message})
        typer.echo(NULL_TERM_MESSAGE)
        return
    render_search_results(results, classify(store, now), term)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json={settings.log_json} | "
        f"date_format={settings.date_format} width={settings.console_width or 'auto'}"
    )


@app.command()
def buckets() -> None:
    """
    List the buckets reported for each domain.
    """
    typer.echo("Buckets: " + ", ".join(available_buckets()))


@app.command()
def overview(now: Optional[datetime] = NowOption) -> None:
    """
    Show every sample domain with its bucket flags.
    """
    store, effective_now = _bootstrap(now)
    render_domains(store.all_records(), classify(store, effective_now))


@app.command("search")
def search_command(
    term: str = typer.Argument(..., help="Text to look for in domain names and owners."),
    now: Optional[datetime] = NowOption,
) -> None:
    """
    Search sample domains by name or owner (case-insensitive).
    """
    store, effective_now = _bootstrap(now)
    _run_search(store, term, effective_now)


@app.command()
def interactive(now: Optional[datetime] = NowOption) -> None:
    """
    Show the overview and search repeatedly until told to stop.
    """
    store, effective_now = _bootstrap(now)

    while True:
        render_domains(store.all_records(), classify(store, effective_now))
        term = _read_line("\nEnter a domain name or owner to search")
        _run_search(store, term, effective_now)

        choice = _read_line("\nWould you like to search again? (yes/no)")
        if choice is None or choice.strip().lower() not in ("yes", "y"):
            break

    typer.echo(GOODBYE_MESSAGE)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
