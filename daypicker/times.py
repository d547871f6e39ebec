from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from daypicker.days import TimeBounds

# (hour, minute); tuples order the way wall-clock times do
Time = Tuple[int, int]


@dataclass(frozen=True)
class SelectableTimes:
    hours: range
    minutes: range


def _limits(bounds: TimeBounds, floor: Optional[Time], ceiling: Optional[Time]) -> Tuple[Time, Time]:
    lo = max(bounds.start, floor) if floor is not None else bounds.start
    hi = min(bounds.end, ceiling) if ceiling is not None else bounds.end
    return lo, hi


def hour_range(bounds: TimeBounds, floor: Optional[Time] = None, ceiling: Optional[Time] = None) -> range:
    """
    Legal hours of a day: the window's hours, further narrowed by `floor`/`ceiling`
    (the other endpoint of a same-day range).
    """
    lo, hi = _limits(bounds, floor, ceiling)
    return range(lo[0], hi[0] + 1)


def minute_range(
    bounds: TimeBounds,
    hour: int,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
) -> range:
    """
    Legal minutes for `hour`. Full 0..59 except on the boundary hours, where the
    boundary minute cuts the range; empty when the hour itself is not legal.
    """
    lo, hi = _limits(bounds, floor, ceiling)
    if not lo[0] <= hour <= hi[0]:
        return range(0)
    first = lo[1] if hour == lo[0] else 0
    last = hi[1] if hour == hi[0] else 59
    return range(first, last + 1)


def selectable_times(
    bounds: TimeBounds,
    hour: int,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
) -> SelectableTimes:
    return SelectableTimes(
        hours=hour_range(bounds, floor, ceiling),
        minutes=minute_range(bounds, hour, floor, ceiling),
    )


def clamp_time(
    bounds: TimeBounds,
    hour: int,
    minute: int,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
) -> Time:
    """Nearest legal (hour, minute) to the requested one."""
    lo, hi = _limits(bounds, floor, ceiling)
    if hi < lo:
        hi = lo
    t = (min(max(hour, 0), 23), min(max(minute, 0), 59))
    return max(lo, min(t, hi))


def earliest_minute(
    bounds: TimeBounds,
    hour: int,
    floor: Optional[Time] = None,
    ceiling: Optional[Time] = None,
) -> int:
    minutes = minute_range(bounds, hour, floor, ceiling)
    return minutes.start if minutes else 0