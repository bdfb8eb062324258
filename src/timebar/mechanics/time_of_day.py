"""Time-of-day classifier — buckets a clock time into a labelled period.

Each month has its own boundaries. The periods are half-open intervals
checked in a fixed order; the first match wins:

    midnight -> dawn -> morning -> noon -> afternoon -> sunset -> night -> (end of day)

Night has no upper bound. Times before the midnight boundary match nothing
and come back as ``TimeOfDay.INVALID``, as does any month whose section is
missing or incomplete.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import time

from timebar.models.calendar import (
    BOUNDARY_KEYS,
    INVALID,
    MONTH_KEYS,
    ClockTime,
    TimeOfDay,
)
from timebar.models.config import MonthSection

logger = logging.getLogger(__name__)

# (label, lower bound key, upper bound key or None for open-ended)
_INTERVALS = (
    (TimeOfDay.MIDNIGHT, "midnight", "dawn"),
    (TimeOfDay.DAWN, "dawn", "morning"),
    (TimeOfDay.MORNING, "morning", "noon"),
    (TimeOfDay.NOON, "noon", "afternoon"),
    (TimeOfDay.AFTERNOON, "afternoon", "sunset"),
    (TimeOfDay.SUNSET, "sunset", "night"),
    (TimeOfDay.NIGHT, "night", None),
)


class BoundaryConfigError(Exception):
    """A month section or one of its boundary times is missing or unparsable."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


def month_key(month: int | str) -> str:
    """Normalise a month number (1-12) or name ('JULY') to 'july'."""
    if isinstance(month, int):
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month number: {month}")
        return MONTH_KEYS[month - 1]
    return month.lower()


def resolve_boundaries(month: str, months: Mapping[str, MonthSection]) -> dict[str, time]:
    """Parse every boundary time for *month*.

    Raises BoundaryConfigError naming the first missing or invalid key.
    """
    section_key = f"month.{month}"
    section = months.get(month)
    if section is None:
        raise BoundaryConfigError(section_key, f"Section {section_key} does NOT EXIST!")

    return {name: parse_boundary(month, name, getattr(section, name)) for name in BOUNDARY_KEYS}


def parse_boundary(month: str, name: str, raw: str | None) -> time:
    key = f"month.{month}.{name}"
    if raw is None:
        raise BoundaryConfigError(key, f"{key} is NOT SET!")
    try:
        return ClockTime.parse(raw).as_time()
    except ValueError:
        raise BoundaryConfigError(key, f"{key} is NOT a valid time: {raw!r}") from None


def classify(
    month: int | str,
    clock: ClockTime,
    months: Mapping[str, MonthSection],
) -> TimeOfDay:
    """Return the period *clock* falls in for *month*, or TimeOfDay.INVALID."""
    try:
        bounds = resolve_boundaries(month_key(month), months)
    except (BoundaryConfigError, ValueError) as exc:
        logger.error("%s", exc)
        return TimeOfDay.INVALID

    # Hour then minute; the clock's seconds never move it across a boundary.
    now = time(clock.hour, clock.minute)
    for label, lower, upper in _INTERVALS:
        if now >= bounds[lower] and (upper is None or now < bounds[upper]):
            return label

    logger.error("Unable to find suitable time for %s", clock)
    return TimeOfDay.INVALID


def time_word(label: TimeOfDay, words: Mapping[str, str]) -> str:
    """Display word for *label* from the ``[times]`` table."""
    if label is TimeOfDay.INVALID:
        return INVALID
    word = words.get(label.value)
    if word is None:
        logger.error("times.%s is NOT SET!", label.value)
        return INVALID
    return word
