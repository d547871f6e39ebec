from .handlers import (
    duration_preview,
    duration_select_day,
    duration_select_time,
    duration_selectable_times,
    month_grid,
    select_day,
    select_hour,
    select_minute,
    selectable_times,
    view_offset,
)

ACTION_REGISTRY = {
    "month_grid": month_grid,
    "select_day": select_day,
    "select_hour": select_hour,
    "select_minute": select_minute,
    "selectable_times": selectable_times,
    "duration_select_day": duration_select_day,
    "duration_select_time": duration_select_time,
    "duration_preview": duration_preview,
    "duration_selectable_times": duration_selectable_times,
    "view_offset": view_offset,
}
