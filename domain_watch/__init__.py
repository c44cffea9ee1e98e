"""
Domain Watch - expiry tracking for domain-name registrations.

This package keeps an in-memory register of domain registrations and classifies
each one relative to a given instant:

- 7-Day: expiring within the next week
- 30-Day: expiring within the next month, but not within the week
- Expired: at or past the expiry date
- Redemption: two to four days past expiry
- Active: none of 7-Day, 30-Day or Expired

It also offers a case-insensitive search over domain names and owners, and a
small CLI that renders the results as tables.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from domain_watch.classifier import (
    ClassificationSnapshot,
    RecordStatus,
    available_buckets,
    classify,
    expired_domains,
    redemption_domains,
    search,
    seven_day_domains,
    thirty_day_domains,
)
from domain_watch.config import Settings, get_settings
from domain_watch.domain import (
    Bucket,
    ClassificationWindow,
    DomainRecord,
    DomainWatchError,
    InvalidArgumentError,
)
from domain_watch.store import DomainRecordStore
from domain_watch.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Bucket",
    "ClassificationWindow",
    "DomainRecord",
    "DomainWatchError",
    "InvalidArgumentError",
    # Store
    "DomainRecordStore",
    # Classification and search
    "ClassificationSnapshot",
    "RecordStatus",
    "available_buckets",
    "classify",
    "expired_domains",
    "redemption_domains",
    "search",
    "seven_day_domains",
    "thirty_day_domains",
    # Logging
    "configure_logging",
    "get_logger",
]
