# =================================================================================
#  Copyright (c) 2024 Behrooz Vedadian

#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:

#  The above copyright notice and this permission notice shall be included in all
#  copies or substantial portions of the Software.

#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
# =================================================================================

from typing import NamedTuple
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .common import (
    LOCAL_TIME_ZONE,
    InvalidTimestamp,
    ZoneResolutionError,
    default_time_zone,
)


class GregorianFields(NamedTuple):
    """Wall-clock fields of an instant in a given zone. `weekday` counts from
    Saturday (0) to Friday (6)."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int
    utc_offset: timedelta
    zone_name: str


def saturday_weekday_from_sunday(sunday_weekday: int) -> int:
    return (sunday_weekday + 1) % 7


def saturday_weekday(python_weekday: int) -> int:
    """Rotates a `datetime.weekday()` value (Monday = 0) to Saturday = 0"""
    return saturday_weekday_from_sunday((python_weekday + 1) % 7)


def resolve_zone(zone_name: str | None) -> tzinfo | None:
    """Returns the zone for `zone_name`, or `None` for the host's local zone.
    An empty or missing name selects the configured default zone."""
    name = (zone_name or "").strip() or default_time_zone()
    if name == LOCAL_TIME_ZONE:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ZoneResolutionError(f"Unknown time zone `{name}`") from e


def __zone_label(dt: datetime) -> str:
    key = getattr(dt.tzinfo, "key", None)
    return key or dt.tzname() or ""


def localize(dt: datetime, zone_name: str | None = None) -> datetime:
    """Naive values are read as wall-clock time in `zone_name`; aware values
    are moved to `zone_name` when one is given and kept as they are otherwise."""
    if dt.tzinfo is not None and zone_name is None:
        return dt
    zone = resolve_zone(zone_name)
    if dt.tzinfo is None and zone is not None:
        return dt.replace(tzinfo=zone)
    return dt.astimezone(zone)


def decompose_datetime(dt: datetime, zone_name: str | None = None) -> GregorianFields:
    dt = localize(dt, zone_name)
    return GregorianFields(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        weekday=saturday_weekday(dt.weekday()),
        utc_offset=dt.utcoffset() or timedelta(0),
        zone_name=__zone_label(dt),
    )


def decompose(timestamp: int, zone_name: str | None = None) -> GregorianFields:
    zone = resolve_zone(zone_name)
    try:
        if zone is None:
            dt = datetime.fromtimestamp(timestamp).astimezone()
        else:
            dt = datetime.fromtimestamp(timestamp, zone)
    except (OverflowError, ValueError, OSError) as e:
        raise InvalidTimestamp(f"Timestamp `{timestamp}` is out of range") from e
    return decompose_datetime(dt)
