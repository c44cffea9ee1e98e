"""
Sample registrations for demonstrating the classifier.

Start dates are offsets from "now" chosen to land each domain in a particular
bucket: two per bucket for 30-Day, 7-Day, Expired and Redemption, plus two
meant as active registrations.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Tuple

from domain_watch.domain.models import add_years
from domain_watch.store import DomainRecordStore
from domain_watch.utils.logging import get_logger

log = get_logger(__name__)

# (id, name, owner, start-date offset in days; None means exactly one year ago)
SAMPLE_DOMAINS: List[Tuple[int, str, str, int | None]] = [
    (1, "active.com", "Alex Active", None),
    (2, "thirty.com", "Tim Thirty", -360),
    (3, "seven.net", "Sam Seven", -363),
    (4, "justexpired.org", "James Just", -366),
    (5, "redemption.io", "Rachel Rays", -368),
    (6, "newactive.site", "Ned New", -300),
    (7, "another30.com", "Alice Another", -330),
    (8, "another7.net", "Bob Another", -353),
    (9, "longexpired.org", "Larry Long", -400),
    (10, "longredem.io", "Lila Long", -370),
]


def seed_sample_domains(store: DomainRecordStore, now: datetime) -> DomainRecordStore:
    """Insert the sample registrations relative to `now` and return the store."""
    for domain_id, name, owner, offset_days in SAMPLE_DOMAINS:
        if offset_days is None:
            start_date = add_years(now, -1)
        else:
            start_date = now + timedelta(days=offset_days)
        store.insert(domain_id, name, owner, start_date)

    log.info("Seeded sample domains", extra={"count": len(SAMPLE_DOMAINS)})
    return store


__all__ = ["SAMPLE_DOMAINS", "seed_sample_domains"]
