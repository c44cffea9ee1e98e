import io
from datetime import datetime

from rich.console import Console

from domain_watch.classifier import classify, search
from domain_watch.reporter import (
    NO_MATCHES_MESSAGE,
    build_domain_table,
    render_domains,
    render_search_results,
)
from domain_watch.store import DomainRecordStore

EXPECTED_COLUMNS = [
    "ID",
    "Name",
    "Owner",
    "Start Date",
    "Expiry Date",
    "30 Days",
    "7 Days",
    "Expired",
    "Redemption",
]


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_table_has_one_row_per_record(sample_store: DomainRecordStore, now: datetime):
    table = build_domain_table(sample_store.all_records(), classify(sample_store, now), "t")
    assert [c.header for c in table.columns] == EXPECTED_COLUMNS
    assert table.row_count == 10


def test_table_cells_show_dates_and_flags(store: DomainRecordStore, now: datetime):
    store.insert(5, "redemption.io", "Rachel Rays", datetime(2022, 6, 12, 12, 0))
    table = build_domain_table(store.all_records(), classify(store, now), "t")

    cells = [list(column.cells) for column in table.columns]
    row = [column[0] for column in cells]
    assert row == ["5", "redemption.io", "Rachel Rays", "2022-06-12", "2023-06-12", "No", "No", "Yes", "Yes"]


def test_custom_date_format(store: DomainRecordStore, now: datetime):
    store.insert(1, "a.com", "Al", datetime(2022, 6, 12))
    table = build_domain_table(store.all_records(), classify(store, now), "t", date_format="%d/%m/%Y")
    assert list(table.columns[3].cells) == ["12/06/2022"]
    assert list(table.columns[4].cells) == ["12/06/2023"]


def test_render_domains_prints_overview(sample_store: DomainRecordStore, now: datetime):
    console, buffer = _console()
    render_domains(sample_store.all_records(), classify(sample_store, now), console=console)
    output = buffer.getvalue()
    assert "Domains Overview" in output
    assert "justexpired.org" in output
    assert "Lila Long" in output


def test_render_domains_handles_empty_store(store: DomainRecordStore, now: datetime):
    console, buffer = _console()
    render_domains(store.all_records(), classify(store, now), console=console)
    assert "No domains registered." in buffer.getvalue()


def test_render_search_results_without_matches(sample_store: DomainRecordStore, now: datetime):
    console, buffer = _console()
    render_search_results(search(sample_store, "zzz"), classify(sample_store, now), console=console)
    assert buffer.getvalue().strip() == NO_MATCHES_MESSAGE


def test_render_search_results_with_matches(sample_store: DomainRecordStore, now: datetime):
    console, buffer = _console()
    render_search_results(search(sample_store, "seven"), classify(sample_store, now), console=console)
    output = buffer.getvalue()
    assert "Search Results" in output
    assert "seven.net" in output
    assert "active.com" not in output


def test_search_results_title_names_the_term(sample_store: DomainRecordStore, now: datetime):
    console, buffer = _console()
    render_search_results(
        search(sample_store, "seven"), classify(sample_store, now), "seven", console=console
    )
    assert "Search Results for 'seven'" in buffer.getvalue()


def test_search_results_title_without_term(sample_store: DomainRecordStore, now: datetime):
    console, buffer = _console()
    render_search_results(search(sample_store, ""), classify(sample_store, now), "", console=console)
    output = buffer.getvalue()
    assert "Search Results" in output
    assert "Search Results for" not in output
