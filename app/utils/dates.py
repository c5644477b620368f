"""
FitPulse API - Date Helpers.

Everything is stored and returned in UTC. MongoDB drops tzinfo on datetimes
unless the client is created with ``tz_aware=True``, so values read back
are normalised before they are compared or serialised.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# Serialises with a "Z" suffix whatever tzinfo the stored value carried
UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]
