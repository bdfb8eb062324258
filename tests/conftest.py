"""Shared fixtures for the timebar test suite."""
from __future__ import annotations

from typing import Any, Callable

import pytest

from timebar.models.calendar import CalendarDate, Season
from timebar.models.config import SeasonsBarConfig

JULY = {
    "name": "Haymonth",
    "midnight": "00:00",
    "dawn": "05:00",
    "morning": "07:00",
    "noon": "12:00",
    "afternoon": "14:00",
    "sunset": "19:00",
    "night": "21:00",
}

TIME_WORDS = {
    "midnight": "midnight",
    "dawn": "dawn",
    "morning": "morning",
    "noon": "noon",
    "afternoon": "afternoon",
    "sunset": "sunset",
    "night": "night",
}


class FakeWorld:
    def __init__(self, name: str = "world", full_time: int = 0, valid: bool = True) -> None:
        self.name = name
        self.full_time = full_time
        self.valid = valid

    def is_valid(self) -> bool:
        return self.valid


class FakeSeasons:
    """Seasons source reporting fixed values, unpadded like the real plugin."""

    def __init__(
        self,
        season: Season | str = Season.SUMMER,
        date: CalendarDate | None = CalendarDate(year=2024, month=7, day=15),
        hours: int = 14,
        minutes: int = 5,
        seconds: int = 0,
        day_of_week: str = "Monday",
        month_name: str = "July",
    ) -> None:
        self.season = season
        self.date = date
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.day_of_week = day_of_week
        self.month_name = month_name
        self.calls = 0

    def get_season(self, world):
        return self.season

    def get_date(self, world):
        self.calls += 1
        return self.date

    def get_hours(self, world):
        return self.hours

    def get_minutes(self, world):
        return self.minutes

    def get_seconds(self, world):
        return self.seconds

    def get_day_of_week(self, world):
        return self.day_of_week

    def get_current_month_name(self, world):
        return self.month_name


class RecordingBar:
    def __init__(self) -> None:
        self.title: Any = None
        self.progress: float | None = None
        self.color = None

    def set_title(self, title):
        self.title = title

    def set_progress(self, progress):
        self.progress = progress

    def set_color(self, color):
        self.color = color


@pytest.fixture
def july_section() -> dict[str, str]:
    return dict(JULY)


@pytest.fixture
def time_words() -> dict[str, str]:
    return dict(TIME_WORDS)


@pytest.fixture
def make_config() -> Callable[..., SeasonsBarConfig]:
    def _make(**overrides: Any) -> SeasonsBarConfig:
        data: dict[str, Any] = {
            "world": "world",
            "date-format": "M/dd/yyyy",
            "use-24h-format": False,
            "timebar-title": "{TIME} - {TIME-WORD} ({DATE}) - {SEASON}",
            "bar-color": "blue",
            "times": dict(TIME_WORDS),
            "month": {"july": dict(JULY)},
        }
        data.update(overrides)
        return SeasonsBarConfig.model_validate(data)

    return _make


@pytest.fixture
def make_seasons() -> Callable[..., FakeSeasons]:
    return FakeSeasons


@pytest.fixture
def make_world() -> Callable[..., FakeWorld]:
    return FakeWorld


@pytest.fixture
def make_bar() -> Callable[[], RecordingBar]:
    return RecordingBar
