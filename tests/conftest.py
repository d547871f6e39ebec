from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from daypicker.days import PickerDay, Selection, TimeBounds, build_picker_day, never_disabled

UTC = timezone.utc
NEW_YORK = ZoneInfo("America/New_York")
OFFICE_HOURS = TimeBounds(9, 0, 17, 30)


def at(year, month, day, hour=0, minute=0, tz=UTC):
    return datetime(year, month, day, hour, minute, tzinfo=tz)


def day_of(year, month, day, zone=UTC, bounds=None, disabled=False) -> PickerDay:
    allowed = (lambda _z, _i: bounds) if bounds is not None else None
    is_disabled = (lambda _z, _i: True) if disabled else never_disabled
    return build_picker_day(zone, is_disabled, allowed, at(year, month, day, 12, tz=zone))


def picked(day: PickerDay, hour=0, minute=0, zone=UTC) -> Selection:
    local = day.start.astimezone(zone)
    return Selection(day, datetime(local.year, local.month, local.day, hour, minute, tzinfo=zone).astimezone(UTC))


@pytest.fixture
def office_hours():
    return lambda _zone, _instant: OFFICE_HOURS
