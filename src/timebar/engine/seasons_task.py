"""Seasons bar task — one tick reads the seasons calendar and redraws every bar."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from rich.text import Text

from timebar.engine.collaborators import (
    BarWidget,
    MarkupParser,
    PlaceholderExpander,
    SeasonsSource,
    WorldHandle,
)
from timebar.mechanics import world_clock
from timebar.mechanics.time_of_day import classify, time_word
from timebar.mechanics.title_template import TitleRenderer, resolve_title
from timebar.models.config import SeasonsBarConfig
from timebar.models.display import BarFrame, RenderContext

logger = logging.getLogger(__name__)


class SeasonsTask:
    """Tickable that keeps every viewer's bar in sync with the seasons calendar.

    Once cancelled (world gone, calendar never set up) the task stays
    cancelled; a reload has to build a new one.
    """

    def __init__(
        self,
        config: SeasonsBarConfig,
        source: SeasonsSource,
        world: WorldHandle | None,
        widgets: Mapping[str, BarWidget],
        expander: PlaceholderExpander | None = None,
        markup: MarkupParser = Text.from_markup,
    ):
        self.config = config
        self.source = source
        self.world = world
        self.widgets = widgets
        self.expander = expander
        self.markup = markup
        self.renderer = TitleRenderer.from_config(config)
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def run(self) -> None:
        """Run one tick. Never raises; failures are logged and the tick skipped."""
        if self._cancelled:
            return
        try:
            frame = self.build_frame()
            if frame is not None:
                self.push(frame)
        except Exception:
            logger.exception("Seasons bar tick failed for world %s", self.config.world)

    def build_frame(self) -> BarFrame | None:
        """Read the calendar and render this tick's frame, or cancel and return None."""
        world = self.world
        if world is None or not world.is_valid():
            logger.critical("%s is not a valid world!", self.config.world)
            self.cancel()
            return None

        season = self.source.get_season(world)
        date = self.source.get_date(world)
        if date is None:
            logger.critical("Cannot retrieve date from RealisticSeasons!")
            logger.critical(
                "Most likely, you have not setup RealisticSeasons in the defined world: %s", world.name
            )
            logger.critical("Enter the world and type '/rs set <season>' to setup the world.")
            logger.critical("After you setup the season, you can run '/timebar reload'")
            self.cancel()
            return None

        clock = world_clock.normalize_clock(
            self.source.get_hours(world),
            self.source.get_minutes(world),
            self.source.get_seconds(world),
        )
        context = RenderContext(
            clock=clock,
            time_word=time_word(classify(date.month, clock, self.config.month), self.config.times),
            season=season,
            date=date,
            day_name=self.source.get_day_of_week(world),
            month_name=self.source.get_current_month_name(world),
            day_count=world_clock.get_day_count(world.full_time),
        )
        title = self.renderer.render(resolve_title(self.config), context)
        return BarFrame(
            title=title,
            progress=world_clock.day_progress(clock),
            color=self.config.bar_color,
        )

    def push(self, frame: BarFrame) -> None:
        for viewer_id, widget in self.widgets.items():
            title = frame.title
            if self.expander is not None:
                title = self.expander.expand(viewer_id, title)
            widget.set_title(self.markup(title))
            widget.set_progress(frame.progress)
            widget.set_color(frame.color)
