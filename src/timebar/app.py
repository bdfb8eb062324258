"""Application bootstrap — wires config, seasons source, bars and scheduler together."""
from __future__ import annotations

import logging
from pathlib import Path

from timebar.cli.display import BarBoard, ConsoleBar
from timebar.content.loader import ConfigLoadError, find_problems, load_config
from timebar.engine.local_seasons import LocalSeasons, LocalWorld
from timebar.engine.scheduler import FixedRateScheduler
from timebar.engine.seasons_task import SeasonsTask
from timebar.models.config import SeasonsBarConfig

logger = logging.getLogger(__name__)


class _WorldStep:
    """Redraws the board and advances the simulated world after each tick.

    With *watch_config* set, a changed config file triggers a reload first.
    """

    def __init__(self, app: TimeBarApp, speed: int, watch_config: bool = False) -> None:
        self.app = app
        self.speed = speed
        self.watch_config = watch_config
        self._stamp = app.config_stamp()

    @property
    def cancelled(self) -> bool:
        return self.app.task.cancelled

    def run(self) -> None:
        if self.watch_config:
            stamp = self.app.config_stamp()
            if stamp != self._stamp:
                self._stamp = stamp
                try:
                    self.app.reload()
                except ConfigLoadError as exc:
                    logger.error("Reload failed, keeping the current config: %s", exc)
        self.app.board.show()
        self.app.world.advance(self.speed)


class TimeBarApp:
    """Runs a seasons bar against a simulated world in the terminal."""

    def __init__(self, config_path: Path | str | None = None, viewers: tuple[str, ...] = ("console",)):
        self.config_path = config_path
        self.viewers = viewers

        self._config: SeasonsBarConfig | None = None
        self._world: LocalWorld | None = None
        self._source: LocalSeasons | None = None
        self._bars: dict[str, ConsoleBar] | None = None
        self._board: BarBoard | None = None
        self._task: SeasonsTask | None = None
        self._scheduler: FixedRateScheduler | None = None

    # -- Component initialization (lazy) --

    @property
    def config(self) -> SeasonsBarConfig:
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    @property
    def world(self) -> LocalWorld:
        if self._world is None:
            self._world = LocalWorld(name=self.config.world)
        return self._world

    @property
    def source(self) -> LocalSeasons:
        if self._source is None:
            self._source = LocalSeasons()
        return self._source

    @property
    def bars(self) -> dict[str, ConsoleBar]:
        if self._bars is None:
            self._bars = {viewer: ConsoleBar() for viewer in self.viewers}
        return self._bars

    @property
    def board(self) -> BarBoard:
        if self._board is None:
            self._board = BarBoard(self.bars)
        return self._board

    @property
    def task(self) -> SeasonsTask:
        if self._task is None:
            self._task = SeasonsTask(self.config, self.source, self.world, self.bars)
        return self._task

    # -- Commands --

    def config_stamp(self) -> int | None:
        """Modification time of the config file, or None for the bundled one."""
        if self.config_path is None:
            return None
        try:
            return Path(self.config_path).stat().st_mtime_ns
        except OSError:
            return None

    def reload(self) -> None:
        """Re-read the config and replace the task, like '/timebar reload'.

        The old task is cancelled for good. If the new config cannot be
        loaded, ConfigLoadError propagates and nothing changes.
        """
        config = load_config(self.config_path)
        old_task = self._task
        if old_task is not None:
            old_task.cancel()
            if self._scheduler is not None:
                self._scheduler.unschedule(old_task)
        self._config = config
        self._task = None
        if self._scheduler is not None:
            self._scheduler.schedule(self.task)
            self.task.run()
        logger.info("Seasons bar reloaded.")

    def preview(self, ticks: int = 0) -> None:
        self.world.full_time = ticks
        self.task.run()
        self.board.show()

    def watch(
        self,
        interval: float = 1.0,
        speed: int = 100,
        frames: int | None = None,
        reload_on_change: bool = False,
    ) -> int:
        self._scheduler = FixedRateScheduler(interval_seconds=interval)
        self._scheduler.schedule(self.task)
        self._scheduler.schedule(_WorldStep(self, speed, watch_config=reload_on_change))
        try:
            return self._scheduler.run(max_ticks=frames)
        finally:
            self._scheduler = None

    def check(self) -> int:
        problems = find_problems(self.config)
        self.board.show_problems(problems)
        return len(problems)
