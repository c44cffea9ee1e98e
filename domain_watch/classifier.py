"""
Classification and search over domain records.

Every query takes the records to inspect and an explicit "now" so results are
deterministic. Classifiers return domain names, one per matching record, in
store order. The 7-Day, 30-Day, Expired and Redemption buckets are materialized;
Active is whatever matches none of 7-Day, 30-Day or Expired.

Usage:
    from domain_watch.classifier import classify, search

    snapshot = classify(store, now)
    snapshot.seven_day        # names expiring within a week
    search(store, "alex")     # records whose name or owner contains "alex"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from domain_watch.domain.exceptions import InvalidArgumentError
from domain_watch.domain.models import Bucket, ClassificationWindow, DomainRecord
from domain_watch.utils.logging import get_logger

log = get_logger(__name__)

SEVEN_DAY_WINDOW = ClassificationWindow(lower_bound_days=0, upper_bound_days=7)
THIRTY_DAY_WINDOW = ClassificationWindow(lower_bound_days=7, upper_bound_days=30)
EXPIRED_WINDOW = ClassificationWindow(lower_bound_days=None, upper_bound_days=0)
REDEMPTION_WINDOW = ClassificationWindow(lower_bound_days=-4, upper_bound_days=-2)


def _names_in_window(
    records: Iterable[DomainRecord], window: ClassificationWindow, now: datetime
) -> List[str]:
    return [r.name for r in records if window.contains(r.expiry_date, now)]


def seven_day_domains(records: Iterable[DomainRecord], now: datetime) -> List[str]:
    """Names of domains expiring after `now` and at most 7 days from it."""
    return _names_in_window(records, SEVEN_DAY_WINDOW, now)


def thirty_day_domains(records: Iterable[DomainRecord], now: datetime) -> List[str]:
    """
    Names of domains expiring more than 7 and at most 30 days from `now`.

    Any name also in the 7-Day bucket is dropped, and each remaining name is
    listed once, in order of first appearance.
    """
    records = list(records)
    seen = set(seven_day_domains(records, now))
    result: List[str] = []
    for name in _names_in_window(records, THIRTY_DAY_WINDOW, now):
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result


def expired_domains(records: Iterable[DomainRecord], now: datetime) -> List[str]:
    """Names of domains whose expiry is at or before `now`."""
    return _names_in_window(records, EXPIRED_WINDOW, now)


def redemption_domains(records: Iterable[DomainRecord], now: datetime) -> List[str]:
    """Names of domains that expired at least 2 and less than 4 days before `now`."""
    return _names_in_window(records, REDEMPTION_WINDOW, now)


def search(records: Iterable[DomainRecord], term: Optional[str]) -> List[DomainRecord]:
    """
    Case-insensitive substring search over domain names and owners.

    Raises
    ------
    InvalidArgumentError
        If `term` is None. An empty string is valid and matches every record.
    """
    if term is None:
        raise InvalidArgumentError("term", "search term cannot be null")

    needle = term.casefold()
    results = [
        r for r in records if needle in r.name.casefold() or needle in r.owner.casefold()
    ]
    log.debug("Search completed", extra={"term": term, "matches": len(results)})
    return results


@dataclass(frozen=True)
class RecordStatus:
    """
    Bucket membership of a single record within a snapshot.

    Membership is decided by domain name, so records sharing a name share flags.
    """

    thirty_day: bool
    seven_day: bool
    expired: bool
    redemption: bool

    @property
    def bucket(self) -> Bucket:
        """Most advanced lifecycle state the record is in."""
        if self.redemption:
            return Bucket.REDEMPTION
        if self.expired:
            return Bucket.EXPIRED
        if self.seven_day:
            return Bucket.SEVEN_DAY
        if self.thirty_day:
            return Bucket.THIRTY_DAY
        return Bucket.ACTIVE


@dataclass(frozen=True)
class ClassificationSnapshot:
    """
    All materialized buckets evaluated once for a fixed "now".
    """

    now: datetime
    seven_day: List[str] = field(default_factory=list)
    thirty_day: List[str] = field(default_factory=list)
    expired: List[str] = field(default_factory=list)
    redemption: List[str] = field(default_factory=list)

    def names(self, bucket: Bucket) -> List[str]:
        if bucket is Bucket.ACTIVE:
            raise ValueError("The active bucket is implicit and has no name list")
        return list(getattr(self, bucket.value))

    def status_for(self, record: DomainRecord) -> RecordStatus:
        return RecordStatus(
            thirty_day=record.name in self.thirty_day,
            seven_day=record.name in self.seven_day,
            expired=record.name in self.expired,
            redemption=record.name in self.redemption,
        )

    def counts(self) -> Dict[str, int]:
        return {
            Bucket.SEVEN_DAY.value: len(self.seven_day),
            Bucket.THIRTY_DAY.value: len(self.thirty_day),
            Bucket.EXPIRED.value: len(self.expired),
            Bucket.REDEMPTION.value: len(self.redemption),
        }


def available_buckets() -> List[str]:
    """List the bucket names that `classify` materializes."""
    return [b.value for b in Bucket if b is not Bucket.ACTIVE]


def classify(records: Iterable[DomainRecord], now: datetime) -> ClassificationSnapshot:
    """
    Evaluate every bucket query once for `now`.

    Parameters
    ----------
    records : iterable[DomainRecord]
        Records to classify, typically a `DomainRecordStore`.
    now : datetime
        Instant the windows are anchored to.
    """
    records = list(records)
    snapshot = ClassificationSnapshot(
        now=now,
        seven_day=seven_day_domains(records, now),
        thirty_day=thirty_day_domains(records, now),
        expired=expired_domains(records, now),
        redemption=redemption_domains(records, now),
    )
    log.debug(
        "Classified domains",
        extra={"records": len(records), "now": now.isoformat(), **snapshot.counts()},
    )
    return snapshot


__all__ = [
    "ClassificationSnapshot",
    "EXPIRED_WINDOW",
    "REDEMPTION_WINDOW",
    "RecordStatus",
    "SEVEN_DAY_WINDOW",
    "THIRTY_DAY_WINDOW",
    "available_buckets",
    "classify",
    "expired_domains",
    "redemption_domains",
    "search",
    "seven_day_domains",
    "thirty_day_domains",
]
