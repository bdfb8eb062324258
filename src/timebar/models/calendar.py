from __future__ import annotations

from datetime import date, time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DISABLED = "DISABLED"
INVALID = "INVALID"


class Season(str, Enum):
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"
    RESTORE = "RESTORE"
    DISABLED = "DISABLED"


class TimeOfDay(str, Enum):
    """Time-of-day labels in cycle order, plus the unclassifiable sentinel."""

    MIDNIGHT = "midnight"
    DAWN = "dawn"
    MORNING = "morning"
    NOON = "noon"
    AFTERNOON = "afternoon"
    SUNSET = "sunset"
    NIGHT = "night"
    INVALID = "INVALID"


# Boundary keys every month section must define, in the order they are checked.
BOUNDARY_KEYS = ("dawn", "morning", "noon", "afternoon", "sunset", "night", "midnight")

MONTH_KEYS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)


class ClockTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)

    @classmethod
    def parse(cls, value: str) -> ClockTime:
        """Parse a zero-padded ``HH:MM`` or ``HH:MM:SS`` string.

        Raises ValueError on anything else, including unpadded fields.
        """
        parts = value.split(":")
        if len(parts) not in (2, 3) or any(len(p) != 2 or not p.isdigit() for p in parts):
            raise ValueError(f"Text '{value}' could not be parsed as HH:MM")
        hour, minute = int(parts[0]), int(parts[1])
        second = int(parts[2]) if len(parts) == 3 else 0
        return cls(hour=hour, minute=minute, second=second)

    def as_time(self) -> time:
        return time(self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class CalendarDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @property
    def month_key(self) -> str:
        """Lower-case English month name used to look up ``month.<key>``."""
        return MONTH_KEYS[self.month - 1]

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)
