from __future__ import annotations
from datetime import datetime, tzinfo
from typing import Optional

from daypicker import zone as z


def calculate_view_offset(zone: tzinfo, base_instant: datetime, selected_instant: Optional[datetime]) -> int:
    """
    Months between the base month and the month of the picked instant
    (negative when the pick is earlier); 0 when nothing is picked.
    """
    if selected_instant is None:
        return 0
    return z.months_between(zone, base_instant, selected_instant)


def view_instant(zone: tzinfo, base_instant: datetime, offset: int) -> datetime:
    """An instant inside the month shown at `offset` (its first day, local midnight)."""
    return z.add_months(zone, z.floor_month(zone, base_instant), offset)
