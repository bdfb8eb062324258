"""Tests for src/timebar/cli/main.py and the app it drives."""
from __future__ import annotations

import logging
import os

import pytest
from typer.testing import CliRunner

from timebar.app import TimeBarApp, _WorldStep
from timebar.cli.main import app
from timebar.content.loader import DEFAULT_CONFIG, ConfigLoadError
from timebar.engine.scheduler import FixedRateScheduler

runner = CliRunner()


class TestPreviewCommand:
    def test_preview_default_config(self):
        # Tick 6000 is noon on the simulated world's first day (1 March 2024).
        result = runner.invoke(app, ["preview", "--ticks", "6000"])
        assert result.exit_code == 0
        assert "12:00 PM - Noon (3/01/2024) - SPRING" in result.output

    def test_preview_missing_config(self, tmp_path):
        result = runner.invoke(app, ["preview", "--config", str(tmp_path / "nope.toml")])
        assert result.exit_code == 2


class TestCheckCommand:
    def test_bundled_config_ok(self):
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 0
        assert "Config OK" in result.output

    def test_problems_exit_nonzero(self, tmp_path):
        path = tmp_path / "partial.toml"
        path.write_text('[month.july]\ndawn = "05:00"\n')
        result = runner.invoke(app, ["check", "--config", str(path)])
        assert result.exit_code == 1


class TestWatchCommand:
    def test_runs_requested_frames(self):
        result = runner.invoke(app, ["watch", "--interval", "0.01", "--frames", "2", "--speed", "1000"])
        assert result.exit_code == 0
        assert "console" in result.output


class TestTimeBarApp:
    def test_preview_updates_bars(self):
        time_bar = TimeBarApp(viewers=("alex", "sam"))
        time_bar.preview(ticks=6000)
        for bar in time_bar.bars.values():
            assert bar.progress == 0.5
            assert bar.title.plain.startswith("12:00 PM")

    def test_watch_advances_world(self):
        time_bar = TimeBarApp()
        frames = time_bar.watch(interval=0.001, speed=500, frames=3)
        assert frames == 3
        assert time_bar.world.full_time == 1500

    def test_uninitialized_calendar_stops_watch(self):
        time_bar = TimeBarApp()
        time_bar.source.initialized = False
        assert time_bar.watch(interval=0.001, frames=10) == 1
        assert time_bar.task.cancelled


def write_config(path, title: str) -> None:
    text = DEFAULT_CONFIG.read_text()
    path.write_text(text.replace(
        'timebar-title = "{TIME} - {TIME-WORD} ({DATE}) - {SEASON}"',
        f'timebar-title = "{title}"',
    ))


def bump_mtime(path) -> None:
    stamp = path.stat().st_mtime_ns + 5_000_000_000
    os.utime(path, ns=(stamp, stamp))


class TestReload:
    def test_reload_reads_new_config(self, tmp_path):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        time_bar = TimeBarApp(config_path=path)
        old_task = time_bar.task
        write_config(path, "Day {DAYCOUNT}")
        time_bar.reload()
        assert old_task.cancelled
        assert time_bar.task is not old_task
        assert not time_bar.task.cancelled
        assert time_bar.config.title == "Day {DAYCOUNT}"

    def test_bad_config_keeps_current(self, tmp_path):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        time_bar = TimeBarApp(config_path=path)
        task = time_bar.task
        path.write_text("world = \n")
        with pytest.raises(ConfigLoadError):
            time_bar.reload()
        assert time_bar.task is task
        assert not task.cancelled
        assert time_bar.config.title == "{SEASON}"

    def test_reload_swaps_scheduled_task(self, tmp_path):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        time_bar = TimeBarApp(config_path=path)
        scheduler = FixedRateScheduler()
        time_bar._scheduler = scheduler
        old_task = time_bar.task
        scheduler.schedule(old_task)
        write_config(path, "Day {DAYCOUNT}")
        time_bar.reload()
        assert scheduler.tasks == [time_bar.task]
        assert time_bar.bars["console"].title.plain == "Day 0"

    def test_world_step_reloads_changed_file(self, tmp_path):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        time_bar = TimeBarApp(config_path=path)
        step = _WorldStep(time_bar, speed=0, watch_config=True)
        write_config(path, "Day {DAYCOUNT}")
        bump_mtime(path)
        step.run()
        assert time_bar.config.title == "Day {DAYCOUNT}"

    def test_world_step_ignores_changes_when_not_watching(self, tmp_path):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        time_bar = TimeBarApp(config_path=path)
        step = _WorldStep(time_bar, speed=0)
        write_config(path, "Day {DAYCOUNT}")
        bump_mtime(path)
        step.run()
        assert time_bar.config.title == "{SEASON}"

    def test_world_step_logs_failed_reload(self, tmp_path, caplog):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        time_bar = TimeBarApp(config_path=path)
        step = _WorldStep(time_bar, speed=0, watch_config=True)
        path.write_text("world = \n")
        bump_mtime(path)
        with caplog.at_level(logging.ERROR):
            step.run()
        assert "Reload failed" in caplog.text
        assert time_bar.config.title == "{SEASON}"

    def test_watch_reload_flag(self, tmp_path):
        path = tmp_path / "seasons.toml"
        write_config(path, "{SEASON}")
        result = runner.invoke(
            app, ["watch", "--config", str(path), "--interval", "0.01", "--frames", "2", "--reload"]
        )
        assert result.exit_code == 0
        assert "SPRING" in result.output
