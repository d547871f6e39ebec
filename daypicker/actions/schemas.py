# Request bodies for the /actions/{name} endpoints
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

from daypicker.constraints import Constraints


class PickerInput(BaseModel):
    tz: Optional[str] = None
    first_weekday: Optional[Union[int, str]] = None
    constraints: Constraints = Field(default_factory=Constraints)

class MonthGridInput(PickerInput):
    view: str

class SelectDayInput(PickerInput):
    day: str
    selection: Optional[str] = None

class SelectTimeInput(PickerInput):
    base: str
    selection: Optional[str] = None
    value: int

class SelectableTimesInput(PickerInput):
    base: str
    selection: Optional[str] = None
    hour: Optional[int] = None

class DurationInput(PickerInput):
    start: Optional[str] = None
    end: Optional[str] = None

class DurationSelectDayInput(DurationInput):
    day: str

class DurationSelectTimeInput(DurationInput):
    base: str
    endpoint: Literal["start", "end"]
    field: Literal["hour", "minute"]
    value: int

class DurationPreviewInput(DurationInput):
    hovered: Optional[str] = None

class DurationSelectableTimesInput(DurationInput):
    base: str
    start_hour: Optional[int] = None
    end_hour: Optional[int] = None

class ViewOffsetInput(PickerInput):
    base: str
    selected: Optional[str] = None
