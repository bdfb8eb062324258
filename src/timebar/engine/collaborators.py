"""Interfaces for the things a seasons bar talks to but does not own."""
from __future__ import annotations

from typing import Any, Optional, Protocol, Union

from timebar.models.calendar import CalendarDate, Season
from timebar.models.config import BarColor


class WorldHandle(Protocol):
    name: str

    @property
    def full_time(self) -> int: ...

    def is_valid(self) -> bool: ...


class SeasonsSource(Protocol):
    """Calendar/season state for a world, as a seasons plugin reports it.

    Hours and minutes come back unpadded; date is None until the world
    has been set up.
    """

    def get_season(self, world: WorldHandle) -> Union[Season, str]: ...

    def get_date(self, world: WorldHandle) -> Optional[CalendarDate]: ...

    def get_hours(self, world: WorldHandle) -> int: ...

    def get_minutes(self, world: WorldHandle) -> int: ...

    def get_seconds(self, world: WorldHandle) -> int: ...

    def get_day_of_week(self, world: WorldHandle) -> str: ...

    def get_current_month_name(self, world: WorldHandle) -> str: ...


class BarWidget(Protocol):
    def set_title(self, title: Any) -> None: ...

    def set_progress(self, progress: float) -> None: ...

    def set_color(self, color: BarColor) -> None: ...


class PlaceholderExpander(Protocol):
    def expand(self, viewer_id: str, text: str) -> str: ...


class MarkupParser(Protocol):
    def __call__(self, text: str) -> Any: ...
