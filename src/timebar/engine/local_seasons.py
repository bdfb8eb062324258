"""In-process seasons source driven by a world's game-tick counter.

Stands in for the seasons plugin when there is no game server: the calendar
starts on a fixed date and advances one day per 24000 ticks, and the clock
follows the world's day time (tick 0 = 06:00).
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from timebar.mechanics import world_clock
from timebar.mechanics.date_pattern import MONTH_NAMES, WEEKDAY_NAMES
from timebar.models.calendar import DISABLED, CalendarDate, Season

_SEASON_BY_MONTH = {
    12: Season.WINTER, 1: Season.WINTER, 2: Season.WINTER,
    3: Season.SPRING, 4: Season.SPRING, 5: Season.SPRING,
    6: Season.SUMMER, 7: Season.SUMMER, 8: Season.SUMMER,
    9: Season.FALL, 10: Season.FALL, 11: Season.FALL,
}


class LocalWorld:
    """A world that only knows its name and how many ticks have passed."""

    def __init__(self, name: str = "world", full_time: int = 0) -> None:
        self.name = name
        self.full_time = full_time
        self.loaded = True

    def is_valid(self) -> bool:
        return self.loaded

    def advance(self, ticks: int) -> None:
        self.full_time += ticks


class LocalSeasons:
    def __init__(
        self,
        start: date = date(2024, 3, 1),
        initialized: bool = True,
        show_day_of_week: bool = True,
        show_month_name: bool = True,
    ) -> None:
        self.start = start
        self.initialized = initialized
        self.show_day_of_week = show_day_of_week
        self.show_month_name = show_month_name

    def _today(self, world: LocalWorld) -> date:
        # Day ticks start at 06:00; shift so the date turns over at midnight.
        return self.start + timedelta(days=(world.full_time + 6000) // world_clock.TICKS_PER_DAY)

    def get_season(self, world: LocalWorld) -> Season:
        if not self.initialized:
            return Season.DISABLED
        return _SEASON_BY_MONTH[self._today(world).month]

    def get_date(self, world: LocalWorld) -> Optional[CalendarDate]:
        if not self.initialized:
            return None
        today = self._today(world)
        return CalendarDate(year=today.year, month=today.month, day=today.day)

    def get_hours(self, world: LocalWorld) -> int:
        return world_clock.ticks_to_clock(world.full_time).hour

    def get_minutes(self, world: LocalWorld) -> int:
        return world_clock.ticks_to_clock(world.full_time).minute

    def get_seconds(self, world: LocalWorld) -> int:
        return world_clock.ticks_to_clock(world.full_time).second

    def get_day_of_week(self, world: LocalWorld) -> str:
        if not self.show_day_of_week:
            return DISABLED
        return WEEKDAY_NAMES[self._today(world).weekday()]

    def get_current_month_name(self, world: LocalWorld) -> str:
        if not self.show_month_name:
            return DISABLED
        return MONTH_NAMES[self._today(world).month - 1]
