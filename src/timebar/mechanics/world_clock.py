"""World clock helpers — game ticks, clock strings and day progress."""
from __future__ import annotations

from timebar.models.calendar import ClockTime

TICKS_PER_DAY = 24000
TICKS_PER_HOUR = 1000
SECONDS_PER_DAY = 86400  # 24 * 60 * 60

# Tick 0 of a day is 06:00, not midnight.
_TICK_ZERO_HOUR = 6


def pad_time(hours: int | str, minutes: int | str) -> str:
    """Join unpadded hour/minute values into ``HH:MM``, e.g. (4, 5) -> '04:05'."""
    hours, minutes = str(hours), str(minutes)
    if len(hours) == 1:
        hours = "0" + hours
    if len(minutes) == 1:
        minutes = "0" + minutes
    return f"{hours}:{minutes}"


def normalize_clock(hours: int, minutes: int, seconds: int = 0) -> ClockTime:
    """Build a ClockTime from the raw integers a seasons source reports."""
    clock = ClockTime.parse(pad_time(hours, minutes))
    return ClockTime(hour=clock.hour, minute=clock.minute, second=seconds)


def get_day_count(full_time: int) -> int:
    """Elapsed whole days for a world's total game-time ticks."""
    return full_time // TICKS_PER_DAY


def ticks_to_clock(day_time: int) -> ClockTime:
    """Clock time for a tick offset within a day (any int, wrapped)."""
    day_seconds = (day_time % TICKS_PER_DAY) * SECONDS_PER_DAY // TICKS_PER_DAY
    day_seconds = (day_seconds + _TICK_ZERO_HOUR * 3600) % SECONDS_PER_DAY
    return ClockTime(
        hour=day_seconds // 3600,
        minute=(day_seconds % 3600) // 60,
        second=day_seconds % 60,
    )


def day_progress(clock: ClockTime) -> float:
    """Fraction of the day elapsed, e.g. 12:00:00 -> 0.5."""
    elapsed = clock.hour * 3600 + clock.minute * 60 + clock.second
    return min(max(elapsed / SECONDS_PER_DAY, 0.0), 1.0)


def format_clock(clock: ClockTime, use_24h: bool = False) -> str:
    """'14:05' in 24h mode, '02:05 PM' otherwise."""
    if use_24h:
        return f"{clock.hour:02d}:{clock.minute:02d}"
    hour12 = clock.hour % 12 or 12
    suffix = "AM" if clock.hour < 12 else "PM"
    return f"{hour12:02d}:{clock.minute:02d} {suffix}"
