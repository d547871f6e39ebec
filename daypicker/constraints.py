from __future__ import annotations
from datetime import date, datetime, tzinfo
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, field_validator, model_validator

from daypicker import zone as z
from daypicker.days import TimeBounds
from daypicker.grid import parse_weekday


def parse_hhmm(value: str) -> Tuple[int, int]:
    """ "09:30" -> (9, 30) """
    try:
        h, m = map(int, str(value).strip().split(":"))
    except ValueError:
        raise ValueError(f"Expected HH:MM, got {value!r}")
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Time out of range: {value!r}")
    return h, m


class AllowedHours(BaseModel):
    start: str = "00:00"
    end: str = "23:59"

    @field_validator("start", "end")
    @classmethod
    def _hhmm(cls, v: str) -> str:
        parse_hhmm(v)
        return v

    @model_validator(mode="after")
    def _ordered(self) -> "AllowedHours":
        if parse_hhmm(self.end) < parse_hhmm(self.start):
            raise ValueError(f"allowed_hours end {self.end} is before start {self.start}")
        return self

    def bounds(self) -> TimeBounds:
        return TimeBounds(*parse_hhmm(self.start), *parse_hhmm(self.end))


class Constraints(BaseModel):
    """
    Declarative stand-in for the disablement predicate and the allowed-time
    function, for callers that cannot hand over Python callables.
    e.g. {"disabled_weekdays": ["Sat", "Sun"], "allowed_hours": {"start": "09:00", "end": "17:30"}}
    """
    disabled_weekdays: List[Union[int, str]] = []
    disabled_dates: List[date] = []
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    allowed_hours: Optional[AllowedHours] = None

    @field_validator("disabled_weekdays")
    @classmethod
    def _weekdays(cls, v: List[Union[int, str]]) -> List[int]:
        return [parse_weekday(d) for d in v]

    def is_disabled(self, zone: tzinfo, instant: datetime) -> bool:
        d = z.to_local(zone, instant).date()
        if d.weekday() in self.disabled_weekdays:
            return True
        if d in self.disabled_dates:
            return True
        if self.min_date is not None and d < self.min_date:
            return True
        if self.max_date is not None and d > self.max_date:
            return True
        return False

    def allowed_time_of_day(self, zone: tzinfo, instant: datetime) -> Optional[TimeBounds]:
        if self.allowed_hours is None:
            return None
        return self.allowed_hours.bounds()

    @property
    def time_function(self):
        """allowed_time_of_day, or None when no hours are configured."""
        return self.allowed_time_of_day if self.allowed_hours is not None else None
