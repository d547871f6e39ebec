from __future__ import annotations
from datetime import datetime, tzinfo
from typing import List, Optional, Union

from daypicker import zone as z
from daypicker.days import AllowedTimeOfDay, IsDisabled, PickerDay, build_picker_day

WEEKDAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
DAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_weekday(value: Union[int, str]) -> int:
    """
    Accepts 0-6 (Monday == 0) or a day name ("Mon", "monday", "SUN").
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= 6:
            return value
        raise ValueError(f"Weekday out of range: {value!r}")
    s = str(value).strip().lower()
    if s.isdigit():
        return parse_weekday(int(s))
    for i, name in enumerate(WEEKDAYS):
        if s == name or s == DAY_NAMES[i]:
            return i
    raise ValueError(f"Unknown weekday: {value!r}")


def month_days(zone: tzinfo, view_instant: datetime) -> int:
    first = z.floor_month(zone, view_instant)
    last = z.add_days(zone, z.add_months(zone, first, 1), -1)
    return z.to_local(zone, last).day


def month_grid(
    zone: tzinfo,
    is_disabled: IsDisabled,
    first_weekday: int,
    allowed_time_of_day: Optional[AllowedTimeOfDay],
    view_instant: datetime,
) -> List[List[PickerDay]]:
    """
    Whole weeks covering the zoned month that contains `view_instant`.
    The first week starts on `first_weekday`; days of the neighbouring months
    fill the gaps and are ordinary (clickable, constrainable) days.
    """
    first = z.floor_month(zone, view_instant)
    n_days = month_days(zone, first)
    last = z.add_days(zone, first, n_days - 1)

    lead = (z.weekday(zone, first) - first_weekday) % 7
    trail = (first_weekday + 6 - z.weekday(zone, last)) % 7
    grid_start = z.add_days(zone, first, -lead)

    weeks: List[List[PickerDay]] = []
    for i in range(lead + n_days + trail):
        if i % 7 == 0:
            weeks.append([])
        instant = z.add_days(zone, grid_start, i)
        weeks[-1].append(build_picker_day(zone, is_disabled, allowed_time_of_day, instant))
    return weeks
