"""
Domain models for Domain Watch.

Defines the registration record tracked by the store, the date windows used to
bucket records by proximity to expiry, and the bucket labels themselves.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

REGISTRATION_TERM_YEARS = 1


def add_years(moment: datetime, years: int) -> datetime:
    """
    Shift a datetime by whole calendar years.

    29 February maps to 28 February when the target year is not a leap year.
    """
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)


class Bucket(str, Enum):
    """Lifecycle state of a domain relative to a given instant."""

    ACTIVE = "active"
    SEVEN_DAY = "seven_day"
    THIRTY_DAY = "thirty_day"
    EXPIRED = "expired"
    REDEMPTION = "redemption"


class DomainRecord(BaseModel):
    """
    One tracked domain registration.

    `expiry_date` is always `start_date` plus one registration term; a record
    built with any other expiry fails validation.
    """

    id: int = Field(..., description="Caller-assigned identifier (not unique).")
    name: str = Field(..., description="Domain name.")
    owner: str = Field(..., description="Registrant.")
    start_date: datetime = Field(..., description="Registration start.")
    expiry_date: datetime = Field(..., description="End of the registration term.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def _check_term(self) -> "DomainRecord":
        expected = add_years(self.start_date, REGISTRATION_TERM_YEARS)
        if self.expiry_date != expected:
            raise ValueError(
                f"expiry_date must be start_date + {REGISTRATION_TERM_YEARS} year "
                f"({expected.isoformat()}), got {self.expiry_date.isoformat()}"
            )
        return self

    @classmethod
    def from_start(cls, id: int, name: str, owner: str, start_date: datetime) -> "DomainRecord":
        """Build a record whose expiry is derived from its start date."""
        return cls(
            id=id,
            name=name,
            owner=owner,
            start_date=start_date,
            expiry_date=add_years(start_date, REGISTRATION_TERM_YEARS),
        )


class ClassificationWindow(BaseModel):
    """
    Range of expiry dates, in days relative to "now".

    The lower bound is exclusive and the upper bound inclusive. A lower bound of
    None leaves the window open towards the past.
    """

    lower_bound_days: Optional[int] = None
    upper_bound_days: int

    model_config = {"frozen": True}

    def contains(self, expiry_date: datetime, now: datetime) -> bool:
        if expiry_date > now + timedelta(days=self.upper_bound_days):
            return False
        if self.lower_bound_days is None:
            return True
        return expiry_date > now + timedelta(days=self.lower_bound_days)


__all__ = [
    "Bucket",
    "ClassificationWindow",
    "DomainRecord",
    "REGISTRATION_TERM_YEARS",
    "add_years",
]
