"""Date patterns in the letter syntax used by the plugin config (``M/dd/yyyy``).

Supported letters (every date field the syntax defines):

    G      era              (G..GGG 'AD'; GGGG 'Anno Domini'; GGGGG 'A')
    y, u   year             (yy -> two digits, otherwise zero-padded to the count)
    Y      week-based year  (as y)
    Q, q   quarter          (Q 3; QQ 03; QQQ 'Q3'; QQQQ '3rd quarter'; QQQQQ 3)
    M, L   month            (M, MM numeric; MMM 'Jul'; MMMM 'July'; MMMMM 'J')
    w      week of week-based year (w, ww)
    W      week of month
    d      day of month     (d, dd)
    D      day of year      (D, DD, DDD)
    F      aligned week of month
    E      day of week      (E..EEE 'Mon'; EEEE 'Monday'; EEEEE 'M')
    e, c   localized day of week (e/c 2; ee 02; eee/ccc 'Mon'; eeee/cccc 'Monday'; eeeee/ccccc 'M')

Weeks start on Sunday and week 1 is the week holding the 1st, as in US
English. Text inside single quotes is literal, ``''`` is a quote. ``[ ]``
marks an optional section; every date field is always available, so its
contents are always printed. Time letters (``H``, ``m`` ...) are rejected.
"""
from __future__ import annotations

from datetime import date, timedelta

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_QUARTER_NAMES = ("1st quarter", "2nd quarter", "3rd quarter", "4th quarter")

DEFAULT_PATTERN = "M/dd/yyyy"
FALLBACK_PATTERN = "M/d/yyyy"

_MAX_COUNT = {
    "G": 5, "y": 19, "u": 19, "Y": 19, "Q": 5, "q": 5, "M": 5, "L": 5,
    "w": 2, "W": 1, "d": 2, "D": 3, "F": 1, "E": 5, "e": 5, "c": 5,
}
_RESERVED = "#{}"
_SAMPLE_DATE = date(2024, 12, 31)


class DatePatternError(ValueError):
    pass


def _text(name: str, count: int) -> str:
    if count <= 3:
        return name[:3]
    if count == 4:
        return name
    return name[0]


def _year(year: int, count: int) -> str:
    if count == 2:
        return f"{year % 100:02d}"
    return str(year).zfill(count)


def _sunday_index(value: date) -> int:
    """Days since the most recent Sunday (Sunday = 0)."""
    return (value.weekday() + 1) % 7


def _week_based(value: date) -> tuple[int, int]:
    """(week-based year, week of that year) with Sunday-start weeks."""
    week_start = value - timedelta(days=_sunday_index(value))
    # The week holding 1 January is week 1, so the year is decided by the week's Saturday.
    year = (week_start + timedelta(days=6)).year
    jan1 = date(year, 1, 1)
    first_week_start = jan1 - timedelta(days=_sunday_index(jan1))
    return year, (week_start - first_week_start).days // 7 + 1


def _field(value: date, letter: str, count: int) -> str:
    if letter == "G":
        return "Anno Domini" if count == 4 else ("A" if count == 5 else "AD")
    if letter in "yu":
        return _year(value.year, count)
    if letter == "Y":
        return _year(_week_based(value)[0], count)
    if letter in "Qq":
        quarter = (value.month - 1) // 3 + 1
        if count == 3:
            return f"Q{quarter}"
        if count == 4:
            return _QUARTER_NAMES[quarter - 1]
        return str(quarter).zfill(count if count <= 2 else 1)
    if letter in "ML":
        if count <= 2:
            return str(value.month).zfill(count)
        return _text(MONTH_NAMES[value.month - 1], count)
    if letter == "w":
        return str(_week_based(value)[1]).zfill(count)
    if letter == "W":
        return str((value.day - 1 + _sunday_index(value.replace(day=1))) // 7 + 1)
    if letter == "d":
        return str(value.day).zfill(count)
    if letter == "D":
        return str(value.timetuple().tm_yday).zfill(count)
    if letter == "F":
        return str((value.day - 1) // 7 + 1)
    if letter in "ec" and count <= 2:
        return str(_sunday_index(value) + 1).zfill(count)
    return _text(WEEKDAY_NAMES[value.weekday()], count)


def _compile(pattern: str) -> list[tuple[str, int] | str]:
    """Split *pattern* into (letter, count) fields and literal strings."""
    parts: list[tuple[str, int] | str] = []
    depth = 0
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "'":
            end = i + 1
            literal = []
            while True:
                if end >= len(pattern):
                    raise DatePatternError(f"Pattern ends with an incomplete string literal: {pattern}")
                if pattern[end] == "'":
                    if end + 1 < len(pattern) and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            parts.append("".join(literal) if end > i + 1 else "'")
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            count = 1
            while i + count < len(pattern) and pattern[i + count] == ch:
                count += 1
            if ch not in _MAX_COUNT:
                raise DatePatternError(f"Unknown pattern letter: {ch}")
            if count > _MAX_COUNT[ch]:
                raise DatePatternError(f"Too many pattern letters: {ch}")
            if ch == "c" and count == 2:
                raise DatePatternError('Invalid pattern "cc"')
            parts.append((ch, count))
            i += count
        elif ch == "[":
            depth += 1
            i += 1
        elif ch == "]":
            if depth == 0:
                raise DatePatternError("Pattern invalid as it contains ] without previous [")
            depth -= 1
            i += 1
        elif ch in _RESERVED:
            raise DatePatternError(f"Pattern includes reserved character: '{ch}'")
        else:
            parts.append(ch)
            i += 1
    return parts


class DatePattern:
    """A compiled, validated date pattern."""

    def __init__(self, pattern: str) -> None:
        if not pattern:
            raise DatePatternError("Pattern is empty")
        self.pattern = pattern
        self._parts = _compile(pattern)
        # Formatting a known date surfaces any field that cannot be rendered.
        self.format(_SAMPLE_DATE)

    def format(self, value: date) -> str:
        out = []
        for part in self._parts:
            if isinstance(part, str):
                out.append(part)
            else:
                out.append(_field(value, *part))
        return "".join(out)

    def __repr__(self) -> str:
        return f"DatePattern({self.pattern!r})"
