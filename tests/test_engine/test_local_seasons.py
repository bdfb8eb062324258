"""Tests for src/timebar/engine/local_seasons.py."""
from __future__ import annotations

from datetime import date

from timebar.engine.local_seasons import LocalSeasons, LocalWorld
from timebar.models.calendar import DISABLED, CalendarDate, Season


class TestLocalWorld:
    def test_advance(self):
        world = LocalWorld(full_time=100)
        world.advance(250)
        assert world.full_time == 350

    def test_not_loaded_is_invalid(self):
        world = LocalWorld()
        world.loaded = False
        assert not world.is_valid()


class TestLocalSeasons:
    def test_clock_from_ticks(self):
        seasons = LocalSeasons()
        world = LocalWorld(full_time=6000)
        assert (seasons.get_hours(world), seasons.get_minutes(world), seasons.get_seconds(world)) == (12, 0, 0)

    def test_date_turns_over_at_midnight(self):
        seasons = LocalSeasons(start=date(2024, 7, 15))
        assert seasons.get_date(LocalWorld(full_time=17999)) == CalendarDate(year=2024, month=7, day=15)
        assert seasons.get_date(LocalWorld(full_time=18000)) == CalendarDate(year=2024, month=7, day=16)

    def test_season_follows_month(self):
        seasons = LocalSeasons(start=date(2024, 7, 1))
        assert seasons.get_season(LocalWorld()) == Season.SUMMER

    def test_names(self):
        seasons = LocalSeasons(start=date(2024, 7, 15))
        world = LocalWorld()
        assert seasons.get_day_of_week(world) == "Monday"
        assert seasons.get_current_month_name(world) == "July"

    def test_disabled_names(self):
        seasons = LocalSeasons(show_day_of_week=False, show_month_name=False)
        world = LocalWorld()
        assert seasons.get_day_of_week(world) == DISABLED
        assert seasons.get_current_month_name(world) == DISABLED

    def test_uninitialized(self):
        seasons = LocalSeasons(initialized=False)
        assert seasons.get_date(LocalWorld()) is None
        assert seasons.get_season(LocalWorld()) == Season.DISABLED
