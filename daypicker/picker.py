from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime, tzinfo
from typing import List, NamedTuple, Optional, Tuple, Union

from daypicker import duration, single
from daypicker import zone as z
from daypicker.days import (
    AllowedTimeOfDay,
    IsDisabled,
    PickerDay,
    Selection,
    build_picker_day,
    never_disabled,
)
from daypicker.duration import DayClassification, DurationSelectableTimes, DurationSelection
from daypicker.grid import month_grid
from daypicker.times import SelectableTimes
from daypicker.view import calculate_view_offset, view_instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Open:
    time_picker_visible: bool
    base_day: PickerDay


Status = Union[Closed, Open]

# what a picker holds: a single selection, or a (start, end) range
PickedValue = Union[Optional[Selection], DurationSelection]


class Transition(NamedTuple):
    """Result of every picker operation: the new picker, and whether the committed selection changed."""
    picker: _Picker
    changed: bool = False
    selection: PickedValue = None


@dataclass(frozen=True)
class _Config:
    zone: tzinfo
    is_disabled: IsDisabled
    allowed_time_of_day: Optional[AllowedTimeOfDay]
    first_weekday: int


@dataclass(frozen=True)
class _State:
    config: _Config
    base_instant: datetime
    status: Status
    view_offset: int
    selection: PickedValue
    hovered: Optional[PickerDay] = None


class _Picker(ABC):
    """Shared navigation and open/close handling. Instances are immutable."""

    def __init__(self, state: _State):
        self._state = state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, selection={self.selection!r})"

    def _with(self, **changes) -> "_Picker":
        return type(self)(replace(self._state, **changes))

    def _day(self, instant: datetime) -> PickerDay:
        c = self._state.config
        return build_picker_day(c.zone, c.is_disabled, c.allowed_time_of_day, instant)

    @abstractmethod
    def _anchor(self) -> Optional[datetime]:
        """Instant the grid re-centres on: the single pick, or the range start."""

    def _commit(self, selection: PickedValue) -> Transition:
        if selection == self._state.selection:
            return Transition(self, False, selection)
        state = replace(self._state, selection=selection)
        old, new = self._anchor(), type(self)(state)._anchor()
        # only a move to another day re-centres the grid; time edits leave the view alone
        if new is not None and (old is None or z.floor_day(self.zone, old) != z.floor_day(self.zone, new)):
            state = replace(state, view_offset=calculate_view_offset(self.zone, state.base_instant, new))
        return Transition(type(self)(state), True, selection)

    @property
    def zone(self) -> tzinfo:
        return self._state.config.zone

    @property
    def status(self) -> Status:
        return self._state.status

    @property
    def is_open(self) -> bool:
        return isinstance(self._state.status, Open)

    @property
    def selection(self) -> PickedValue:
        return self._state.selection

    @property
    def view_offset(self) -> int:
        return self._state.view_offset

    @property
    def hovered(self) -> Optional[PickerDay]:
        return self._state.hovered

    @property
    def base_day(self) -> PickerDay:
        status = self._state.status
        if isinstance(status, Open):
            return status.base_day
        return self._day(self._state.base_instant)

    def open(self, now: Optional[datetime] = None) -> Transition:
        """Closed -> open. Re-centres the grid on the picked (start) instant."""
        if self.is_open:
            return Transition(self, False, self.selection)
        base = z.to_utc(now) if now is not None else self._state.base_instant
        offset = calculate_view_offset(self.zone, base, self._anchor())
        logger.debug("open at %s, view offset %d", base, offset)
        picker = self._with(base_instant=base, status=Open(False, self._day(base)), view_offset=offset)
        return Transition(picker, False, self.selection)

    def close(self) -> Transition:
        return Transition(self._with(status=Closed(), hovered=None), False, self.selection)

    def toggle_time_picker(self) -> Transition:
        status = self._state.status
        if not isinstance(status, Open):
            return Transition(self, False, self.selection)
        return Transition(self._with(status=Open(not status.time_picker_visible, status.base_day)), False, self.selection)

    def _shift(self, months: int) -> Transition:
        return Transition(self._with(view_offset=self._state.view_offset + months), False, self.selection)

    def next_month(self) -> Transition:
        return self._shift(1)

    def previous_month(self) -> Transition:
        return self._shift(-1)

    def next_year(self) -> Transition:
        return self._shift(12)

    def previous_year(self) -> Transition:
        return self._shift(-12)

    def displayed_month(self) -> datetime:
        return view_instant(self.zone, self._state.base_instant, self._state.view_offset)

    def grid(self) -> List[List[PickerDay]]:
        c = self._state.config
        return month_grid(c.zone, c.is_disabled, c.first_weekday, c.allowed_time_of_day, self.displayed_month())

    def hover(self, day: Optional[PickerDay]) -> Transition:
        if not self.is_open:
            return Transition(self, False, self.selection)
        return Transition(self._with(hovered=day), False, self.selection)


def _config(zone, is_disabled, allowed_time_of_day, first_weekday) -> _Config:
    return _Config(
        zone=zone,
        is_disabled=is_disabled or never_disabled,
        allowed_time_of_day=allowed_time_of_day,
        first_weekday=first_weekday,
    )


class SinglePicker(_Picker):
    @classmethod
    def create(
        cls,
        zone: tzinfo,
        base_instant: datetime,
        *,
        is_disabled: Optional[IsDisabled] = None,
        allowed_time_of_day: Optional[AllowedTimeOfDay] = None,
        first_weekday: int = 0,
        picked: Optional[datetime] = None,
    ) -> "SinglePicker":
        config = _config(zone, is_disabled, allowed_time_of_day, first_weekday)
        selection = None
        if picked is not None:
            selection = single.select_instant(zone, config.is_disabled, allowed_time_of_day, picked)
        return cls(_State(config, z.to_utc(base_instant), Closed(), 0, selection))

    def _anchor(self) -> Optional[datetime]:
        selection: Optional[Selection] = self._state.selection
        return selection.instant if selection is not None else None

    def select_day(self, day: PickerDay) -> Transition:
        if day.disabled:
            return Transition(self, False, self.selection)
        return self._commit(single.select_day(self.zone, self.selection, day))

    def select_hour(self, hour: int) -> Transition:
        return self._commit(single.select_hour(self.zone, self.base_day, self.selection, hour))

    def select_minute(self, minute: int) -> Transition:
        return self._commit(single.select_minute(self.zone, self.base_day, self.selection, minute))

    def set_instant(self, instant: Optional[datetime]) -> Transition:
        """Date-input update; None clears the selection."""
        if instant is None:
            return self._commit(None)
        c = self._state.config
        return self._commit(single.select_instant(c.zone, c.is_disabled, c.allowed_time_of_day, instant))

    def selectable_times(self, hour: Optional[int] = None) -> SelectableTimes:
        return single.filter_selectable_times(self.zone, self.base_day, self.selection, hour)


class DurationPicker(_Picker):
    @classmethod
    def create(
        cls,
        zone: tzinfo,
        base_instant: datetime,
        *,
        is_disabled: Optional[IsDisabled] = None,
        allowed_time_of_day: Optional[AllowedTimeOfDay] = None,
        first_weekday: int = 0,
        picked: Tuple[Optional[datetime], Optional[datetime]] = (None, None),
    ) -> "DurationPicker":
        config = _config(zone, is_disabled, allowed_time_of_day, first_weekday)
        selection = duration.EMPTY
        start, end = picked
        if start is not None:
            selection = duration.select_start_instant(zone, config.is_disabled, allowed_time_of_day, selection, start)
        if end is not None:
            selection = duration.select_end_instant(zone, config.is_disabled, allowed_time_of_day, selection, end)
        return cls(_State(config, z.to_utc(base_instant), Closed(), 0, selection))

    def _anchor(self) -> Optional[datetime]:
        start = self._state.selection.start
        return start.instant if start is not None else None

    def select_day(self, day: PickerDay) -> Transition:
        if day.disabled:
            return Transition(self, False, self.selection)
        picked = self._commit(duration.select_day(self.zone, self.selection, day))
        return picked._replace(picker=picked.picker._with(hovered=None))

    def select_start_hour(self, hour: int) -> Transition:
        return self._commit(duration.select_start_hour(self.zone, self.base_day, self.selection, hour))

    def select_start_minute(self, minute: int) -> Transition:
        return self._commit(duration.select_start_minute(self.zone, self.base_day, self.selection, minute))

    def select_end_hour(self, hour: int) -> Transition:
        return self._commit(duration.select_end_hour(self.zone, self.base_day, self.selection, hour))

    def select_end_minute(self, minute: int) -> Transition:
        return self._commit(duration.select_end_minute(self.zone, self.base_day, self.selection, minute))

    def set_start_instant(self, instant: Optional[datetime]) -> Transition:
        if instant is None:
            return self._commit(DurationSelection(None, self.selection.end))
        c = self._state.config
        return self._commit(
            duration.select_start_instant(c.zone, c.is_disabled, c.allowed_time_of_day, self.selection, instant)
        )

    def set_end_instant(self, instant: Optional[datetime]) -> Transition:
        if instant is None:
            return self._commit(DurationSelection(self.selection.start, None))
        c = self._state.config
        return self._commit(
            duration.select_end_instant(c.zone, c.is_disabled, c.allowed_time_of_day, self.selection, instant)
        )

    def preview(self) -> DurationSelection:
        return duration.preview_selection(self.zone, self.selection, self._state.hovered)

    def selectable_times(self, start_hour: Optional[int] = None, end_hour: Optional[int] = None) -> DurationSelectableTimes:
        return duration.filter_selectable_times(self.zone, self.base_day, self.selection, start_hour, end_hour)

    def classify(self, day: PickerDay) -> DayClassification:
        return duration.classify_day(self.zone, day, self._state.hovered, self.selection)
