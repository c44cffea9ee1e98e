"""
Domain package for Domain Watch.

Exports the registration record, the classification window and bucket labels,
and the core exceptions. Keep this package focused on data definitions and
validation concerns.
"""

from domain_watch.domain.exceptions import DomainWatchError, InvalidArgumentError
from domain_watch.domain.models import Bucket, ClassificationWindow, DomainRecord, add_years

__all__ = [
    "Bucket",
    "ClassificationWindow",
    "DomainRecord",
    "DomainWatchError",
    "InvalidArgumentError",
    "add_years",
]
