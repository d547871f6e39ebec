from __future__ import annotations
import logging
from datetime import datetime, tzinfo
from typing import Optional

from daypicker import zone as z
from daypicker.days import (
    AllowedTimeOfDay,
    IsDisabled,
    PickerDay,
    Selection,
    build_picker_day,
    default_selection,
)
from daypicker.times import SelectableTimes, Time, clamp_time, earliest_minute, hour_range, selectable_times

logger = logging.getLogger(__name__)


def place(
    zone: tzinfo,
    day: PickerDay,
    hour: int,
    minute: int,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
    source: Optional[datetime] = None,
) -> Selection:
    """
    Selection on `day` at the legal time nearest to hour:minute. `source` is an
    instant on that same day whose fold picks the occurrence of a repeated wall time.
    """
    h, m = clamp_time(day.bounds, hour, minute, floor, ceiling)
    if (h, m) != (hour, minute):
        logger.debug("clamped %02d:%02d -> %02d:%02d on %s", hour, minute, h, m, day.start.date())
    return Selection(day, z.with_time(zone, source if source is not None else day.start, h, m))


def set_hour(
    zone: tzinfo,
    target: Selection,
    hour: int,
    seeded: bool = False,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
) -> Selection:
    """
    Move `target` to `hour`, keeping its minute. A freshly seeded target takes the
    earliest legal minute of the new hour instead, so a legal hour never comes
    with an illegal minute.
    """
    bounds = target.day.bounds
    hours = hour_range(bounds, floor, ceiling)
    if hours:
        hour = min(max(hour, hours.start), hours.stop - 1)
    if seeded:
        minute = earliest_minute(bounds, hour, floor, ceiling)
    else:
        _, minute = z.hour_minute(zone, target.instant)
    return place(zone, target.day, hour, minute, floor, ceiling, source=target.instant)


def set_minute(
    zone: tzinfo,
    target: Selection,
    minute: int,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
) -> Selection:
    hour, _ = z.hour_minute(zone, target.instant)
    return place(zone, target.day, hour, minute, floor, ceiling, source=target.instant)


def select_day(zone: tzinfo, previous: Optional[Selection], day: PickerDay) -> Selection:
    """
    Clicking a day always yields a selection on it. The previous time of day is
    carried over when the new day's window allows it, otherwise the day's
    earliest legal time is used.
    """
    if previous is not None:
        h, m = z.hour_minute(zone, previous.instant)
        if day.bounds.contains(h, m):
            return place(zone, day, h, m)
    return default_selection(zone, day)


def select_hour(zone: tzinfo, base_day: PickerDay, selection: Optional[Selection], hour: int) -> Selection:
    if selection is None:
        return set_hour(zone, default_selection(zone, base_day), hour, seeded=True)
    return set_hour(zone, selection, hour)


def select_minute(zone: tzinfo, base_day: PickerDay, selection: Optional[Selection], minute: int) -> Selection:
    target = selection if selection is not None else default_selection(zone, base_day)
    return set_minute(zone, target, minute)


def select_instant(
    zone: tzinfo,
    is_disabled: IsDisabled,
    allowed_time_of_day: Optional[AllowedTimeOfDay],
    instant: datetime,
) -> Selection:
    """Selection for a raw instant (typed into a date input), clamped into its day's window."""
    day = build_picker_day(zone, is_disabled, allowed_time_of_day, instant)
    h, m = z.hour_minute(zone, instant)
    return place(zone, day, h, m, source=instant)


def filter_selectable_times(
    zone: tzinfo,
    base_day: PickerDay,
    selection: Optional[Selection],
    hour: Optional[int] = None,
) -> SelectableTimes:
    """
    Hours legal on the effective day (the selection's, else `base_day`) and the
    minutes legal for `hour`, defaulting to the effective hour.
    """
    target = selection if selection is not None else default_selection(zone, base_day)
    if hour is None:
        hour, _ = z.hour_minute(zone, target.instant)
    return selectable_times(target.day.bounds, hour)
