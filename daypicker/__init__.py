from daypicker.days import PickerDay, Selection, TimeBounds, build_picker_day
from daypicker.duration import DurationSelection
from daypicker.grid import month_grid
from daypicker.picker import Closed, DurationPicker, Open, SinglePicker, Transition
from daypicker.times import SelectableTimes
from daypicker.view import calculate_view_offset
from daypicker.zone import resolve_zone

__all__ = [
    "Closed",
    "DurationPicker",
    "DurationSelection",
    "Open",
    "PickerDay",
    "SelectableTimes",
    "Selection",
    "SinglePicker",
    "TimeBounds",
    "Transition",
    "build_picker_day",
    "calculate_view_offset",
    "month_grid",
    "resolve_zone",
]
