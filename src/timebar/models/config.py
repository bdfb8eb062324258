from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE = "{TIME} - {TIME-WORD} ({DATE}) - {SEASON}"


class BarColor(str, Enum):
    PINK = "pink"
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    WHITE = "white"


class MonthSection(BaseModel):
    """One ``[month.<name>]`` table: boundary times plus a display name.

    Every field is optional here; missing values are reported when the
    section is used, not when it is loaded.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    dawn: Optional[str] = None
    morning: Optional[str] = None
    noon: Optional[str] = None
    afternoon: Optional[str] = None
    sunset: Optional[str] = None
    night: Optional[str] = None
    midnight: Optional[str] = None


class SeasonsBarConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    world: str = "world"
    date_format: Optional[str] = Field(default=None, alias="date-format")
    use_24h_format: bool = Field(default=False, alias="use-24h-format")
    title: Optional[str] = Field(default=None, alias="timebar-title")
    bar_color: BarColor = Field(default=BarColor.YELLOW, alias="bar-color")
    times: dict[str, str] = Field(default_factory=dict)
    month: dict[str, MonthSection] = Field(default_factory=dict)

    def month_section(self, key: str) -> MonthSection | None:
        return self.month.get(key.lower())
