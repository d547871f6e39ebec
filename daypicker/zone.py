from __future__ import annotations
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz as dtz
from dateutil.relativedelta import relativedelta

UTC = timezone.utc

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_zone(name: Optional[str]) -> tzinfo:
    """
    Resolve a zone identifier into a tzinfo.
    Accepts "UTC"/"Z"/"GMT", "local", IANA names ("Europe/Paris") and fixed
    offsets ("+02:00", "-0530"). Raises ValueError for anything else.
    """
    s = (name or "").strip()
    if not s or s.lower() in {"utc", "z", "gmt"}:
        return UTC
    if s.lower() in {"local", "system"}:
        # follows the system zone rules, DST included
        return dtz.tzlocal()

    m = _OFFSET_RE.match(s)
    if m:
        sign, hh, mm = m.groups()
        if int(hh) > 23 or int(mm) > 59:
            raise ValueError(f"Invalid zone offset: {s!r}")
        minutes = int(hh) * 60 + int(mm)
        return timezone(timedelta(minutes=minutes if sign == "+" else -minutes))

    try:
        return ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Invalid zone identifier: {s!r}") from e


def to_utc(instant: datetime) -> datetime:
    return instant.astimezone(UTC)


def to_local(zone: tzinfo, instant: datetime) -> datetime:
    return instant.astimezone(zone)


def from_local(
    zone: tzinfo, year: int, month: int, day: int, hour: int = 0, minute: int = 0, fold: int = 0
) -> datetime:
    """
    Wall-clock fields in `zone` -> UTC instant.
    Wall times inside a DST gap resolve forward (fold=0 uses the pre-transition offset),
    ambiguous ones resolve to their first occurrence unless fold=1.
    """
    return datetime(year, month, day, hour, minute, tzinfo=zone, fold=fold).astimezone(UTC)


def hour_minute(zone: tzinfo, instant: datetime) -> Tuple[int, int]:
    local = to_local(zone, instant)
    return local.hour, local.minute


def weekday(zone: tzinfo, instant: datetime) -> int:
    """Monday == 0, like datetime.weekday()."""
    return to_local(zone, instant).weekday()


def floor_day(zone: tzinfo, instant: datetime) -> datetime:
    local = to_local(zone, instant)
    return from_local(zone, local.year, local.month, local.day)


def add_days(zone: tzinfo, instant: datetime, days: int) -> datetime:
    """Calendar addition: keeps the wall-clock time, so DST days stay whole."""
    local = to_local(zone, instant)
    d = local.date() + timedelta(days=days)
    return from_local(zone, d.year, d.month, d.day, local.hour, local.minute)


def floor_month(zone: tzinfo, instant: datetime) -> datetime:
    local = to_local(zone, instant)
    return from_local(zone, local.year, local.month, 1)


def add_months(zone: tzinfo, instant: datetime, months: int) -> datetime:
    """Day-of-month is clipped to the target month's length (Jan 31 + 1 -> Feb 28/29)."""
    local = to_local(zone, instant)
    d = local.date() + relativedelta(months=months)
    return from_local(zone, d.year, d.month, d.day, local.hour, local.minute)


def with_time(zone: tzinfo, instant: datetime, hour: Optional[int] = None, minute: Optional[int] = None) -> datetime:
    """Replace the local hour and/or minute of `instant`; the local date is unchanged."""
    local = to_local(zone, instant)
    return from_local(
        zone,
        local.year,
        local.month,
        local.day,
        local.hour if hour is None else hour,
        local.minute if minute is None else minute,
        fold=local.fold,
    )


def months_between(zone: tzinfo, a: datetime, b: datetime) -> int:
    """Whole zoned months from the month containing `a` to the month containing `b`."""
    la, lb = to_local(zone, a), to_local(zone, b)
    return (lb.year - la.year) * 12 + (lb.month - la.month)
