import itertools

import pytest

from conftest import OFFICE_HOURS, UTC, at, day_of, picked
from daypicker import duration
from daypicker.days import never_disabled
from daypicker.duration import EMPTY, DurationSelection


def test_first_click_sets_start_only():
    result = duration.select_day(UTC, EMPTY, day_of(2024, 3, 10))
    assert result.start.instant == at(2024, 3, 10)
    assert result.end is None


def test_click_before_start_swaps():
    state = duration.select_day(UTC, EMPTY, day_of(2024, 3, 10))
    state = duration.select_day(UTC, state, day_of(2024, 3, 5))
    assert state.start.day == day_of(2024, 3, 5)
    assert state.start.instant == at(2024, 3, 5)
    assert state.end.day == day_of(2024, 3, 10)
    assert state.end.instant == at(2024, 3, 10)


def test_swap_keeps_each_time_of_day():
    start = picked(day_of(2024, 3, 10, bounds=OFFICE_HOURS), 15, 45)
    state = duration.select_day(UTC, DurationSelection(start, None), day_of(2024, 3, 5, bounds=OFFICE_HOURS))
    assert state.start.instant == at(2024, 3, 5, 9, 0)
    assert state.end.instant == at(2024, 3, 10, 15, 45)


def test_click_after_start_sets_end():
    state = DurationSelection(picked(day_of(2024, 3, 10), 8), None)
    state = duration.select_day(UTC, state, day_of(2024, 3, 12))
    assert state.start.instant == at(2024, 3, 10, 8)
    assert state.end.instant == at(2024, 3, 12)


def test_same_day_end_cannot_precede_start():
    start = picked(day_of(2024, 3, 10, bounds=OFFICE_HOURS), 14, 0)
    state = duration.select_day(UTC, DurationSelection(start, None), start.day)
    assert state.end.day == start.day
    assert state.end.instant == start.instant


def test_only_end_set_is_mirrored():
    end = picked(day_of(2024, 3, 10), 18)
    after = duration.select_day(UTC, DurationSelection(None, end), day_of(2024, 3, 14))
    assert after.start == end
    assert after.end.day == day_of(2024, 3, 14)

    before = duration.select_day(UTC, DurationSelection(None, end), day_of(2024, 3, 2))
    assert before.start.instant == at(2024, 3, 2)
    assert before.end == end


def test_clicking_an_endpoint_clears_it():
    start = picked(day_of(2024, 3, 10), 9)
    end = picked(day_of(2024, 3, 14), 17)
    state = DurationSelection(start, end)
    assert duration.select_day(UTC, state, day_of(2024, 3, 10)) == DurationSelection(None, end)
    assert duration.select_day(UTC, state, day_of(2024, 3, 14)) == DurationSelection(start, None)


def test_clicking_the_start_day_ignores_time_of_day():
    start = picked(day_of(2024, 3, 10), 9)
    end = picked(day_of(2024, 3, 14), 17)
    other_time_same_day = day_of(2024, 3, 10, bounds=OFFICE_HOURS)
    assert duration.select_day(UTC, DurationSelection(start, end), other_time_same_day).start is None


def test_same_day_range_click_keeps_start():
    day = day_of(2024, 3, 10)
    state = DurationSelection(picked(day, 9), picked(day, 17))
    assert duration.select_day(UTC, state, day) == DurationSelection(picked(day, 9), None)


def test_clicking_elsewhere_restarts_the_range():
    state = DurationSelection(picked(day_of(2024, 3, 10), 9), picked(day_of(2024, 3, 14), 17))
    result = duration.select_day(UTC, state, day_of(2024, 3, 20))
    assert result.start.day == day_of(2024, 3, 20)
    assert result.end is None


def test_any_click_sequence_keeps_start_before_end():
    days = [day_of(2024, 3, d, bounds=OFFICE_HOURS) for d in (3, 7, 7, 12, 5, 12, 3, 20)]
    for order in itertools.permutations(days[:5]):
        state = DurationSelection(picked(days[1], 16, 10), None)
        for day in order + tuple(days[5:]):
            state = duration.select_day(UTC, state, day)
            if state.complete:
                assert state.start.instant <= state.end.instant


# -- hour / minute edits --

def same_day_range(start=(9, 0), end=(17, 0)):
    day = day_of(2024, 3, 10, bounds=OFFICE_HOURS)
    return day, DurationSelection(picked(day, *start), picked(day, *end))


def test_start_hour_is_capped_by_same_day_end():
    day, state = same_day_range(end=(13, 20))
    result = duration.select_start_hour(UTC, day, state, 16)
    assert result.start.instant == at(2024, 3, 10, 13, 0)
    assert result.end == state.end


def test_end_hour_is_floored_by_same_day_start():
    day, state = same_day_range(start=(11, 40))
    result = duration.select_end_hour(UTC, day, state, 8)
    assert result.end.instant == at(2024, 3, 10, 11, 40)


def test_minute_edits_respect_the_other_endpoint():
    day, state = same_day_range(start=(9, 30), end=(9, 45))
    assert duration.select_start_minute(UTC, day, state, 50).start.instant == at(2024, 3, 10, 9, 45)
    assert duration.select_end_minute(UTC, day, state, 10).end.instant == at(2024, 3, 10, 9, 30)
    assert duration.select_end_minute(UTC, day, state, 55).end.instant == at(2024, 3, 10, 9, 55)


def test_edits_on_different_days_are_independent():
    start = picked(day_of(2024, 3, 10), 20)
    end = picked(day_of(2024, 3, 11), 6)
    result = duration.select_end_hour(UTC, start.day, DurationSelection(start, end), 2)
    assert result.end.instant == at(2024, 3, 11, 2)
    assert result.start == start


def test_missing_endpoint_is_seeded_from_base_day():
    base = day_of(2024, 3, 15, bounds=OFFICE_HOURS)
    result = duration.select_start_hour(UTC, base, EMPTY, 11)
    assert result.start.instant == at(2024, 3, 15, 11, 0)
    assert result.end is None


def test_seeded_end_starts_after_same_day_start():
    day = day_of(2024, 3, 10)
    start = picked(day, 14, 0)
    result = duration.select_end_minute(UTC, day, DurationSelection(start, None), 30)
    assert result.end.instant == at(2024, 3, 10, 14, 30)


def test_seeded_start_never_lands_after_end():
    end = picked(day_of(2024, 3, 10), 12, 0)
    later_base = day_of(2024, 3, 15)
    result = duration.select_start_hour(UTC, later_base, DurationSelection(None, end), 13)
    assert result.start.day == end.day
    assert result.start.instant == at(2024, 3, 10, 12, 0)


# -- typed instants --

def test_typed_start_drags_same_day_end_along():
    end = picked(day_of(2024, 3, 12), 10)
    state = DurationSelection(picked(day_of(2024, 3, 11), 9), end)
    result = duration.select_start_instant(UTC, never_disabled, None, state, at(2024, 3, 12, 11))
    assert result.start.instant == at(2024, 3, 12, 11)
    assert result.end.instant == at(2024, 3, 12, 11)


def test_typed_start_past_the_end_day_drops_the_end():
    state = DurationSelection(picked(day_of(2024, 3, 11), 9), picked(day_of(2024, 3, 12), 10))
    result = duration.select_start_instant(UTC, never_disabled, None, state, at(2024, 3, 13, 8))
    assert result == DurationSelection(picked(day_of(2024, 3, 13), 8), None)


def test_typed_end_before_the_start_day_drops_the_start(office_hours):
    state = DurationSelection(picked(day_of(2024, 3, 11), 9), None)
    result = duration.select_end_instant(UTC, never_disabled, office_hours, state, at(2024, 3, 9, 7))
    assert result.start is None
    assert result.end.instant == at(2024, 3, 9, 9, 0)


# -- preview and classification --

def test_preview_shows_range_to_hovered_day():
    state = DurationSelection(picked(day_of(2024, 3, 10)), None)
    preview = duration.preview_selection(UTC, state, day_of(2024, 3, 14))
    assert preview.start == state.start
    assert preview.end.day == day_of(2024, 3, 14)
    assert state.end is None


def test_preview_ignores_disabled_or_missing_hover():
    state = DurationSelection(picked(day_of(2024, 3, 10)), None)
    assert duration.preview_selection(UTC, state, day_of(2024, 3, 14, disabled=True)) == state
    assert duration.preview_selection(UTC, state, None) == state


@pytest.mark.parametrize(
    "d, expected",
    [(9, (False, False)), (10, (True, False)), (12, (False, True)), (14, (True, False)), (15, (False, False))],
)
def test_day_picked_or_between_committed_range(d, expected):
    state = DurationSelection(picked(day_of(2024, 3, 10), 9), picked(day_of(2024, 3, 14), 17))
    assert duration.day_picked_or_between(UTC, day_of(2024, 3, d), None, state) == expected


def test_between_follows_hover_preview():
    state = DurationSelection(picked(day_of(2024, 3, 10)), None)
    hovered = day_of(2024, 3, 14)
    assert duration.day_picked_or_between(UTC, day_of(2024, 3, 12), hovered, state) == (False, True)
    assert duration.day_picked_or_between(UTC, day_of(2024, 3, 14), hovered, state) == (False, False)
    # hovering before the start previews the swapped range
    hovered = day_of(2024, 3, 6)
    assert duration.day_picked_or_between(UTC, day_of(2024, 3, 8), hovered, state) == (False, True)


def test_classify_day():
    state = DurationSelection(picked(day_of(2024, 3, 10)), None)
    hovered = day_of(2024, 3, 14)
    info = duration.classify_day(UTC, hovered, hovered, state)
    assert info.is_focused
    assert not info.is_endpoint
    assert not duration.classify_day(UTC, day_of(2024, 3, 10), hovered, state).is_focused
    assert duration.classify_day(UTC, day_of(2024, 3, 11, disabled=True), None, state).is_disabled


# -- selectable times --

def test_end_minutes_at_start_hour_exclude_earlier_minutes():
    day, state = same_day_range(start=(9, 0), end=(17, 0))
    times = duration.filter_selectable_times(UTC, day, state, end_hour=9)
    assert times.end.minutes == range(0, 60)
    assert times.end.hours == range(9, 18)

    day, state = same_day_range(start=(9, 15), end=(17, 0))
    times = duration.filter_selectable_times(UTC, day, state, end_hour=9)
    assert times.end.minutes == range(15, 60)


def test_start_is_capped_by_end_on_same_day():
    day, state = same_day_range(start=(9, 0), end=(13, 20))
    times = duration.filter_selectable_times(UTC, day, state, start_hour=13)
    assert times.start.hours == range(9, 14)
    assert times.start.minutes == range(0, 21)


def test_different_days_are_not_cross_capped():
    start = picked(day_of(2024, 3, 10), 20)
    end = picked(day_of(2024, 3, 11), 6)
    times = duration.filter_selectable_times(UTC, start.day, DurationSelection(start, end))
    assert times.start.hours == range(0, 24)
    assert times.end.hours == range(0, 24)


def test_selectable_times_for_empty_range_use_base_day():
    base = day_of(2024, 3, 15, bounds=OFFICE_HOURS)
    times = duration.filter_selectable_times(UTC, base, EMPTY)
    assert times.start.hours == range(9, 18)
    assert times.end.minutes == range(0, 60)


def test_complete_range_is_not_previewed():
    state = DurationSelection(picked(day_of(2024, 3, 10), 9), picked(day_of(2024, 3, 14), 17))
    hovered = day_of(2024, 3, 20)
    assert duration.preview_selection(UTC, state, hovered) == state
    assert duration.day_picked_or_between(UTC, day_of(2024, 3, 12), hovered, state) == (False, True)
    assert duration.day_picked_or_between(UTC, day_of(2024, 3, 17), hovered, state) == (False, False)
