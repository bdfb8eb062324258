from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from timebar.mechanics.date_pattern import DatePattern, DatePatternError
from timebar.mechanics.time_of_day import BoundaryConfigError, parse_boundary
from timebar.models.calendar import BOUNDARY_KEYS, MONTH_KEYS
from timebar.models.config import SeasonsBarConfig

CONTENT_DIR = Path(__file__).parent
DEFAULT_CONFIG = CONTENT_DIR / "realistic_seasons.toml"


class ConfigLoadError(Exception):
    pass


def load_toml(filepath: Path) -> dict[str, Any]:
    with open(filepath, "rb") as f:
        return tomllib.load(f)


def parse_config(data: dict[str, Any]) -> SeasonsBarConfig:
    try:
        return SeasonsBarConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid seasons bar config: {exc}") from exc


def load_config(path: Path | str | None = None) -> SeasonsBarConfig:
    """Load a seasons bar config, or the bundled default when *path* is None."""
    filepath = Path(path) if path is not None else DEFAULT_CONFIG
    try:
        data = load_toml(filepath)
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Config file not found: {filepath}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(f"{filepath} is not valid TOML: {exc}") from exc
    return parse_config(data)


def find_problems(config: SeasonsBarConfig) -> list[tuple[str, str]]:
    """Every missing or invalid key a tick would otherwise log as INVALID."""
    problems: list[tuple[str, str]] = []
    if config.date_format is None:
        problems.append(("date-format", "not set, default will be used"))
    else:
        try:
            DatePattern(config.date_format)
        except DatePatternError as exc:
            problems.append(("date-format", str(exc)))
    if config.title is None:
        problems.append(("timebar-title", "not set, default will be used"))

    for label in BOUNDARY_KEYS:
        if label not in config.times:
            problems.append((f"times.{label}", "not set"))

    for month in MONTH_KEYS:
        section = config.month_section(month)
        if section is None:
            problems.append((f"month.{month}", "section does not exist"))
            continue
        for name in BOUNDARY_KEYS:
            try:
                parse_boundary(month, name, getattr(section, name))
            except BoundaryConfigError as exc:
                problems.append((exc.key, str(exc)))
        if section.name is None:
            problems.append((f"month.{month}.name", "not set"))
    return problems
