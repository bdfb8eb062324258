"""Title template rendering — swaps ``{TOKEN}`` placeholders for live values."""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping

from timebar.mechanics.date_pattern import (
    DEFAULT_PATTERN,
    FALLBACK_PATTERN,
    DatePattern,
    DatePatternError,
)
from timebar.mechanics.world_clock import format_clock
from timebar.models.calendar import DISABLED, INVALID, Season
from timebar.models.config import DEFAULT_TITLE, MonthSection, SeasonsBarConfig
from timebar.models.display import RenderContext

logger = logging.getLogger(__name__)


def build_date_pattern(pattern: str | None) -> DatePattern:
    """Compile the configured date pattern, falling back instead of failing."""
    if pattern is None:
        logger.warning("date-format is missing! Using default American English format.")
        pattern = DEFAULT_PATTERN
    try:
        return DatePattern(pattern)
    except DatePatternError as exc:
        logger.warning("date-format is NOT a valid format! Using default American English format. (%s)", exc)
        return DatePattern(FALLBACK_PATTERN)


class TitleRenderer:
    """Renders title templates against a RenderContext.

    Tokens are matched in one left-to-right pass, so a substituted value is
    never rescanned and ``{TIME}`` cannot clip ``{TIME-WORD}``.
    """

    def __init__(
        self,
        date_pattern: DatePattern,
        use_24h: bool = False,
        months: Mapping[str, MonthSection] | None = None,
    ) -> None:
        self.date_pattern = date_pattern
        self.use_24h = use_24h
        self.months = months or {}
        self._tokens: dict[str, Callable[[RenderContext], str]] = {
            "{TIME}": lambda ctx: format_clock(ctx.clock, self.use_24h),
            "{TIME-WORD}": lambda ctx: ctx.time_word,
            "{DAYCOUNT}": lambda ctx: str(ctx.day_count),
            "{SEASON}": self._season,
            "{DATE}": lambda ctx: self.date_pattern.format(ctx.date.to_date()),
            "{DAY}": self._day,
            "{MONTH}": self._month,
        }
        self._pattern = re.compile(
            "|".join(re.escape(t) for t in sorted(self._tokens, key=len, reverse=True))
        )

    @classmethod
    def from_config(cls, config: SeasonsBarConfig) -> TitleRenderer:
        return cls(
            date_pattern=build_date_pattern(config.date_format),
            use_24h=config.use_24h_format,
            months=config.month,
        )

    @staticmethod
    def _season(ctx: RenderContext) -> str:
        season = ctx.season
        return season.value if isinstance(season, Season) else str(season)

    @staticmethod
    def _day(ctx: RenderContext) -> str:
        # The upstream DISABLED marker passes through as-is.
        return ctx.day_name

    def _month(self, ctx: RenderContext) -> str:
        if ctx.month_name == DISABLED:
            return DISABLED
        key = ctx.month_name.lower()
        section = self.months.get(key)
        if section is None or section.name is None:
            logger.error("month.%s.name is NOT SET!", key)
            return INVALID
        return section.name

    def render(self, template: str, context: RenderContext) -> str:
        """Return *template* with every recognised token substituted."""
        values: dict[str, str] = {}

        def substitute(match: re.Match[str]) -> str:
            token = match.group(0)
            if token not in values:
                values[token] = self._tokens[token](context)
            return values[token]

        return self._pattern.sub(substitute, template)


def resolve_title(config: SeasonsBarConfig) -> str:
    if config.title is None:
        logger.error("timebar-title is not set! Using default.")
        return DEFAULT_TITLE
    return config.title
