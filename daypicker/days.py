from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Optional, Tuple

from daypicker import zone as z


@dataclass(frozen=True)
class TimeBounds:
    """Inclusive [start_hour:start_minute, end_hour:end_minute] window of a day."""
    start_hour: int = 0
    start_minute: int = 0
    end_hour: int = 23
    end_minute: int = 59

    @property
    def start(self) -> Tuple[int, int]:
        return self.start_hour, self.start_minute

    @property
    def end(self) -> Tuple[int, int]:
        return self.end_hour, self.end_minute

    def contains(self, hour: int, minute: int) -> bool:
        return self.start <= (hour, minute) <= self.end


WHOLE_DAY = TimeBounds()

IsDisabled = Callable[[tzinfo, datetime], bool]
AllowedTimeOfDay = Callable[[tzinfo, datetime], Optional[TimeBounds]]


def never_disabled(zone: tzinfo, instant: datetime) -> bool:
    return False


@dataclass(frozen=True, eq=False)
class PickerDay:
    """
    One calendar day in a zone: [start, end) as UTC instants.
    Two days are the same day iff their starts match; the disabled flag and
    the allowed window are whatever the constraints said when it was built.
    """
    start: datetime
    end: datetime
    disabled: bool = False
    allowed_time_of_day: Optional[TimeBounds] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PickerDay):
            return NotImplemented
        return self.start == other.start

    def __hash__(self) -> int:
        return hash(self.start)

    @property
    def bounds(self) -> TimeBounds:
        return self.allowed_time_of_day or WHOLE_DAY

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


@dataclass(frozen=True)
class Selection:
    day: PickerDay
    instant: datetime


def build_picker_day(
    zone: tzinfo,
    is_disabled: IsDisabled,
    allowed_time_of_day: Optional[AllowedTimeOfDay],
    instant: datetime,
) -> PickerDay:
    start = z.floor_day(zone, instant)
    return PickerDay(
        start=start,
        end=z.floor_day(zone, z.add_days(zone, start, 1)),
        disabled=bool(is_disabled(zone, start)),
        allowed_time_of_day=allowed_time_of_day(zone, start) if allowed_time_of_day else None,
    )


def default_instant(zone: tzinfo, day: PickerDay) -> datetime:
    """Earliest legal instant of the day: midnight, or the window start when a window is set."""
    bounds = day.allowed_time_of_day
    if bounds is None or bounds.start == (0, 0):
        return day.start
    return z.with_time(zone, day.start, bounds.start_hour, bounds.start_minute)


def default_selection(zone: tzinfo, day: PickerDay) -> Selection:
    return Selection(day, default_instant(zone, day))


def is_before(a: PickerDay, b: PickerDay) -> bool:
    return a.start < b.start
