from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from timebar.models.calendar import CalendarDate, ClockTime, Season
from timebar.models.config import BarColor


class RenderContext(BaseModel):
    """Everything the title renderer may substitute for one tick."""

    model_config = ConfigDict(frozen=True)

    clock: ClockTime
    time_word: str
    season: Union[Season, str]
    date: CalendarDate
    day_name: str
    month_name: str
    day_count: int = 0


class BarFrame(BaseModel):
    """The title/progress/colour triple pushed to every widget on a tick."""

    model_config = ConfigDict(frozen=True)

    title: str
    progress: float = Field(ge=0.0, le=1.0)
    color: BarColor
