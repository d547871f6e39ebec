from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Dict, Optional

from dateutil import parser as dtparse

from daypicker import config, duration, single
from daypicker import zone as z
from daypicker.actions.schemas import (
    DurationInput,
    DurationPreviewInput,
    DurationSelectableTimesInput,
    DurationSelectDayInput,
    DurationSelectTimeInput,
    MonthGridInput,
    PickerInput,
    SelectableTimesInput,
    SelectDayInput,
    SelectTimeInput,
    ViewOffsetInput,
)
from daypicker.days import AllowedTimeOfDay, IsDisabled, PickerDay, Selection, build_picker_day
from daypicker.duration import DurationSelection
from daypicker.grid import month_grid as build_month_grid
from daypicker.grid import parse_weekday
from daypicker.times import SelectableTimes
from daypicker.view import calculate_view_offset


def iso(dt: datetime) -> str:
    return dt.replace(microsecond=0).isoformat()


def parse_instant(value: str, zone: tzinfo) -> datetime:
    """ISO-8601 -> UTC instant; strings without an offset are read in `zone`."""
    try:
        dt = dtparse.isoparse(value)
    except (TypeError, ValueError):
        raise ValueError(f"Not an ISO-8601 instant: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=zone)
    return z.to_utc(dt)


@dataclass(frozen=True)
class Context:
    zone: tzinfo
    first_weekday: int
    is_disabled: IsDisabled
    allowed_time_of_day: Optional[AllowedTimeOfDay]

    def instant(self, value: Optional[str]) -> Optional[datetime]:
        return parse_instant(value, self.zone) if value is not None else None

    def day(self, value: str) -> PickerDay:
        return build_picker_day(self.zone, self.is_disabled, self.allowed_time_of_day, self.instant(value))

    def selection(self, value: Optional[str]) -> Optional[Selection]:
        """A committed selection travels as its instant; the day is rebuilt around it."""
        if value is None:
            return None
        return Selection(self.day(value), self.instant(value))

    def duration(self, body: DurationInput) -> DurationSelection:
        return DurationSelection(self.selection(body.start), self.selection(body.end))

    # -- output --

    def iso(self, instant: datetime) -> str:
        return iso(z.to_local(self.zone, instant))

    def day_out(self, day: PickerDay) -> Dict[str, Any]:
        bounds = day.allowed_time_of_day
        return {
            "start": self.iso(day.start),
            "end": self.iso(day.end),
            "disabled": day.disabled,
            "allowed_time_of_day": None if bounds is None else {
                "start": f"{bounds.start_hour:02d}:{bounds.start_minute:02d}",
                "end": f"{bounds.end_hour:02d}:{bounds.end_minute:02d}",
            },
        }

    def selection_out(self, selection: Optional[Selection]) -> Optional[Dict[str, Any]]:
        if selection is None:
            return None
        return {"day": self.day_out(selection.day), "instant": self.iso(selection.instant)}

    def duration_out(self, selection: DurationSelection) -> Dict[str, Any]:
        return {"start": self.selection_out(selection.start), "end": self.selection_out(selection.end)}


def context_for(body: PickerInput) -> Context:
    constraints = body.constraints
    return Context(
        zone=z.resolve_zone(body.tz or config.DEFAULT_TZ),
        first_weekday=parse_weekday(body.first_weekday if body.first_weekday is not None else config.FIRST_WEEKDAY),
        is_disabled=constraints.is_disabled,
        allowed_time_of_day=constraints.time_function,
    )


def times_out(times: SelectableTimes) -> Dict[str, Any]:
    return {"hours": list(times.hours), "minutes": list(times.minutes)}


async def month_grid(params: Dict[str, Any]) -> Dict[str, Any]:
    body = MonthGridInput.model_validate(params)
    ctx = context_for(body)
    view = ctx.instant(body.view)
    weeks = build_month_grid(ctx.zone, ctx.is_disabled, ctx.first_weekday, ctx.allowed_time_of_day, view)
    return {
        "month": ctx.iso(z.floor_month(ctx.zone, view)),
        "weeks": [[ctx.day_out(d) for d in week] for week in weeks],
    }


async def select_day(params: Dict[str, Any]) -> Dict[str, Any]:
    body = SelectDayInput.model_validate(params)
    ctx = context_for(body)
    picked = single.select_day(ctx.zone, ctx.selection(body.selection), ctx.day(body.day))
    return {"selection": ctx.selection_out(picked)}


async def select_hour(params: Dict[str, Any]) -> Dict[str, Any]:
    body = SelectTimeInput.model_validate(params)
    ctx = context_for(body)
    picked = single.select_hour(ctx.zone, ctx.day(body.base), ctx.selection(body.selection), body.value)
    return {"selection": ctx.selection_out(picked)}


async def select_minute(params: Dict[str, Any]) -> Dict[str, Any]:
    body = SelectTimeInput.model_validate(params)
    ctx = context_for(body)
    picked = single.select_minute(ctx.zone, ctx.day(body.base), ctx.selection(body.selection), body.value)
    return {"selection": ctx.selection_out(picked)}


async def selectable_times(params: Dict[str, Any]) -> Dict[str, Any]:
    body = SelectableTimesInput.model_validate(params)
    ctx = context_for(body)
    times = single.filter_selectable_times(ctx.zone, ctx.day(body.base), ctx.selection(body.selection), body.hour)
    return times_out(times)


async def duration_select_day(params: Dict[str, Any]) -> Dict[str, Any]:
    body = DurationSelectDayInput.model_validate(params)
    ctx = context_for(body)
    picked = duration.select_day(ctx.zone, ctx.duration(body), ctx.day(body.day))
    return ctx.duration_out(picked)


_TIME_EDITS = {
    ("start", "hour"): duration.select_start_hour,
    ("start", "minute"): duration.select_start_minute,
    ("end", "hour"): duration.select_end_hour,
    ("end", "minute"): duration.select_end_minute,
}


async def duration_select_time(params: Dict[str, Any]) -> Dict[str, Any]:
    body = DurationSelectTimeInput.model_validate(params)
    ctx = context_for(body)
    edit = _TIME_EDITS[(body.endpoint, body.field)]
    picked = edit(ctx.zone, ctx.day(body.base), ctx.duration(body), body.value)
    return ctx.duration_out(picked)


async def duration_preview(params: Dict[str, Any]) -> Dict[str, Any]:
    body = DurationPreviewInput.model_validate(params)
    ctx = context_for(body)
    hovered = ctx.day(body.hovered) if body.hovered is not None else None
    return ctx.duration_out(duration.preview_selection(ctx.zone, ctx.duration(body), hovered))


async def duration_selectable_times(params: Dict[str, Any]) -> Dict[str, Any]:
    body = DurationSelectableTimesInput.model_validate(params)
    ctx = context_for(body)
    times = duration.filter_selectable_times(
        ctx.zone, ctx.day(body.base), ctx.duration(body), body.start_hour, body.end_hour
    )
    return {"start": times_out(times.start), "end": times_out(times.end)}


async def view_offset(params: Dict[str, Any]) -> Dict[str, Any]:
    body = ViewOffsetInput.model_validate(params)
    ctx = context_for(body)
    return {"offset": calculate_view_offset(ctx.zone, ctx.instant(body.base), ctx.instant(body.selected))}
