"""
In-memory store of domain registration records.

The store is append-only: records are built with their derived expiry date on
insertion and are never updated or removed. Callers own the store instance and
hand it (or its records) to the classifier explicitly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator, List, Tuple

from domain_watch.domain.models import DomainRecord
from domain_watch.utils.logging import get_logger

log = get_logger(__name__)


class DomainRecordStore:
    """
    Ordered collection of `DomainRecord` entries.

    No constraint checking is done on ids, names or owners; duplicate ids and
    empty strings are accepted as given.
    """

    def __init__(self) -> None:
        self._records: List[DomainRecord] = []

    def insert(self, id: int, name: str, owner: str, start_date: datetime) -> None:
        """Register a domain for one term starting at `start_date`."""
        record = DomainRecord.from_start(id=id, name=name, owner=owner, start_date=start_date)
        self._records.append(record)
        log.debug(
            f"Inserted domain {name!r}",
            extra={"domain_id": id, "domain": name, "expiry_date": record.expiry_date.isoformat()},
        )

    def all_records(self) -> Tuple[DomainRecord, ...]:
        """Return every record in insertion order as an immutable snapshot."""
        return tuple(self._records)

    def __iter__(self) -> Iterator[DomainRecord]:
        return iter(self.all_records())

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["DomainRecordStore"]
