from __future__ import annotations
import logging
from datetime import datetime, tzinfo
from typing import NamedTuple, Optional, Tuple

from daypicker import single
from daypicker import zone as z
from daypicker.days import AllowedTimeOfDay, IsDisabled, PickerDay, Selection, default_selection, is_before
from daypicker.times import SelectableTimes, Time, selectable_times

logger = logging.getLogger(__name__)


class DurationSelection(NamedTuple):
    """Start and end of a range; either may be missing while the range is being picked."""
    start: Optional[Selection] = None
    end: Optional[Selection] = None

    @property
    def complete(self) -> bool:
        return self.start is not None and self.end is not None


class DurationSelectableTimes(NamedTuple):
    start: SelectableTimes
    end: SelectableTimes


class DayClassification(NamedTuple):
    is_endpoint: bool
    is_between: bool
    is_focused: bool
    is_disabled: bool


EMPTY = DurationSelection()


def _time(zone: tzinfo, selection: Selection) -> Time:
    return z.hour_minute(zone, selection.instant)


def _ceiling(zone: tzinfo, day: PickerDay, end: Optional[Selection]) -> Optional[Time]:
    """A start on the end's day may not pass the end's time."""
    if end is not None and end.day == day:
        return _time(zone, end)
    return None


def _floor(zone: tzinfo, day: PickerDay, start: Optional[Selection]) -> Optional[Time]:
    if start is not None and start.day == day:
        return _time(zone, start)
    return None


def _pull(selection: DurationSelection, moved: str) -> DurationSelection:
    """
    Restore start <= end after one endpoint was placed: the endpoint that just
    moved is pulled onto the other one. Only a same-day range can be inverted here.
    """
    start, end = selection
    if start is None or end is None or start.instant <= end.instant:
        return selection
    if moved == "end":
        logger.debug("end before start on %s, pulled to start", end.day.start.date())
        return DurationSelection(start, Selection(end.day, start.instant))
    logger.debug("start after end on %s, pulled to end", start.day.start.date())
    return DurationSelection(Selection(start.day, end.instant), end)


def _reclamp(zone: tzinfo, selection: Selection) -> Selection:
    h, m = _time(zone, selection)
    return single.place(zone, selection.day, h, m, source=selection.instant)


def _seed_start(zone: tzinfo, base_day: PickerDay, end: Optional[Selection]) -> Selection:
    day = end.day if end is not None and is_before(end.day, base_day) else base_day
    seed = default_selection(zone, day)
    return single.place(zone, day, *_time(zone, seed), ceiling=_ceiling(zone, day, end))


def _seed_end(zone: tzinfo, base_day: PickerDay, start: Optional[Selection]) -> Selection:
    day = start.day if start is not None and is_before(base_day, start.day) else base_day
    seed = default_selection(zone, day)
    return single.place(zone, day, *_time(zone, seed), floor=_floor(zone, day, start))


def select_day(zone: tzinfo, selection: DurationSelection, day: PickerDay) -> DurationSelection:
    """
    Apply a day click to a range.

    - nothing picked: the day becomes the start
    - only a start: a day before it swaps roles (day -> start, old start -> end),
      any other day becomes the end
    - only an end: mirror image of the above
    - both picked: clicking the start day clears the start, clicking the end day
      clears the end (a same-day range keeps its start), any other day starts
      a new range
    Day identity is the calendar day, not the time of day.
    """
    start, end = selection

    if start is None and end is None:
        return DurationSelection(default_selection(zone, day), None)

    if end is None:
        if is_before(day, start.day):
            logger.debug("swap: %s before start %s", day.start.date(), start.day.start.date())
            return DurationSelection(default_selection(zone, day), _reclamp(zone, start))
        return _pull(DurationSelection(start, default_selection(zone, day)), moved="end")

    if start is None:
        if is_before(end.day, day):
            logger.debug("swap: %s after end %s", day.start.date(), end.day.start.date())
            return DurationSelection(_reclamp(zone, end), default_selection(zone, day))
        return _pull(DurationSelection(default_selection(zone, day), end), moved="start")

    if day == end.day:
        return DurationSelection(start, None)
    if day == start.day:
        return DurationSelection(None, end)
    logger.debug("restart range at %s", day.start.date())
    return DurationSelection(default_selection(zone, day), None)


def select_start_hour(zone: tzinfo, base_day: PickerDay, selection: DurationSelection, hour: int) -> DurationSelection:
    start, end = selection
    seeded = start is None
    target = _seed_start(zone, base_day, end) if seeded else start
    ceiling = _ceiling(zone, target.day, end)
    return _pull(DurationSelection(single.set_hour(zone, target, hour, seeded, ceiling=ceiling), end), "start")


def select_start_minute(zone: tzinfo, base_day: PickerDay, selection: DurationSelection, minute: int) -> DurationSelection:
    start, end = selection
    target = _seed_start(zone, base_day, end) if start is None else start
    ceiling = _ceiling(zone, target.day, end)
    return _pull(DurationSelection(single.set_minute(zone, target, minute, ceiling=ceiling), end), "start")


def select_end_hour(zone: tzinfo, base_day: PickerDay, selection: DurationSelection, hour: int) -> DurationSelection:
    start, end = selection
    seeded = end is None
    target = _seed_end(zone, base_day, start) if seeded else end
    floor = _floor(zone, target.day, start)
    return _pull(DurationSelection(start, single.set_hour(zone, target, hour, seeded, floor=floor)), "end")


def select_end_minute(zone: tzinfo, base_day: PickerDay, selection: DurationSelection, minute: int) -> DurationSelection:
    start, end = selection
    target = _seed_end(zone, base_day, start) if end is None else end
    floor = _floor(zone, target.day, start)
    return _pull(DurationSelection(start, single.set_minute(zone, target, minute, floor=floor)), "end")


def select_start_instant(
    zone: tzinfo,
    is_disabled: IsDisabled,
    allowed_time_of_day: Optional[AllowedTimeOfDay],
    selection: DurationSelection,
    instant: datetime,
) -> DurationSelection:
    """
    Start typed into a date input. An end it overtakes on the same day follows
    it; an end on an earlier day is dropped.
    """
    start = single.select_instant(zone, is_disabled, allowed_time_of_day, instant)
    end = selection.end
    if end is not None and start.instant > end.instant:
        if start.day == end.day:
            end = Selection(end.day, start.instant)
        else:
            logger.debug("typed start %s passed the end, end cleared", start.instant)
            end = None
    return DurationSelection(start, end)


def select_end_instant(
    zone: tzinfo,
    is_disabled: IsDisabled,
    allowed_time_of_day: Optional[AllowedTimeOfDay],
    selection: DurationSelection,
    instant: datetime,
) -> DurationSelection:
    end = single.select_instant(zone, is_disabled, allowed_time_of_day, instant)
    start = selection.start
    if start is not None and end.instant < start.instant:
        if start.day == end.day:
            start = Selection(start.day, end.instant)
        else:
            logger.debug("typed end %s precedes the start, start cleared", end.instant)
            start = None
    return DurationSelection(start, end)


def preview_selection(
    zone: tzinfo,
    selection: DurationSelection,
    hovered: Optional[PickerDay],
) -> DurationSelection:
    """
    What an in-progress range would become if the hovered day were clicked.
    A complete range has nothing to preview. Nothing is committed.
    """
    if hovered is None or hovered.disabled or selection.complete:
        return selection
    return select_day(zone, selection, hovered)


def filter_selectable_times(
    zone: tzinfo,
    base_day: PickerDay,
    selection: DurationSelection,
    start_hour: Optional[int] = None,
    end_hour: Optional[int] = None,
) -> DurationSelectableTimes:
    """
    Hours and minutes each endpoint may still take. On a same-day range the
    start is capped by the end's time and the end floored by the start's, so
    no offered value can invert the range.
    """
    start, end = selection
    s = start if start is not None else _seed_start(zone, base_day, end)
    e = end if end is not None else _seed_end(zone, base_day, start)
    if start_hour is None:
        start_hour, _ = _time(zone, s)
    if end_hour is None:
        end_hour, _ = _time(zone, e)
    return DurationSelectableTimes(
        start=selectable_times(s.day.bounds, start_hour, ceiling=_ceiling(zone, s.day, end)),
        end=selectable_times(e.day.bounds, end_hour, floor=_floor(zone, e.day, start)),
    )


def day_picked_or_between(
    zone: tzinfo,
    day: PickerDay,
    hovered: Optional[PickerDay],
    selection: DurationSelection,
) -> Tuple[bool, bool]:
    """
    (is_endpoint, is_between). Endpoints come from the committed range; "between"
    uses the hover preview so an in-progress range shows up while hovering.
    """
    is_endpoint = any(s is not None and s.day == day for s in selection)
    p_start, p_end = preview_selection(zone, selection, hovered)
    is_between = (
        p_start is not None
        and p_end is not None
        and p_start.day.start < day.start < p_end.day.start
    )
    return is_endpoint, is_between


def classify_day(
    zone: tzinfo,
    day: PickerDay,
    hovered: Optional[PickerDay],
    selection: DurationSelection,
) -> DayClassification:
    is_endpoint, is_between = day_picked_or_between(zone, day, hovered, selection)
    return DayClassification(
        is_endpoint=is_endpoint,
        is_between=is_between,
        is_focused=hovered is not None and hovered == day,
        is_disabled=day.disabled,
    )
