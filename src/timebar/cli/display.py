"""Terminal bars — a rich-rendered stand-in for in-game boss bars."""
from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from timebar.models.config import BarColor

_STYLES = {
    BarColor.PINK: "pink1",
    BarColor.BLUE: "blue",
    BarColor.RED: "red",
    BarColor.GREEN: "green",
    BarColor.YELLOW: "yellow",
    BarColor.PURPLE: "purple",
    BarColor.WHITE: "white",
}


class ConsoleBar:
    """One viewer's bar: a title line over a filled progress track."""

    def __init__(self, width: int = 40) -> None:
        self.width = width
        self.title: Text = Text()
        self.progress: float = 0.0
        self.color: BarColor = BarColor.WHITE

    def set_title(self, title: Text | str) -> None:
        self.title = title if isinstance(title, Text) else Text(title)

    def set_progress(self, progress: float) -> None:
        if not 0.0 <= progress <= 1.0:
            raise ValueError(f"Progress must be between 0 and 1, got {progress}")
        self.progress = progress

    def set_color(self, color: BarColor) -> None:
        self.color = color

    def render(self) -> Text:
        style = _STYLES[self.color]
        filled = int(self.progress * self.width)
        line = Text()
        line.append_text(self.title)
        line.append("\n")
        line.append("█" * filled, style=style)
        line.append("░" * (self.width - filled), style="dim")
        line.append(f" {self.progress:.0%}", style=style)
        return line


class BarBoard:
    """Prints every viewer's bar."""

    def __init__(self, bars: dict[str, ConsoleBar], console: Console | None = None) -> None:
        self.bars = bars
        self.console = console or Console()

    def show(self) -> None:
        for viewer_id, bar in self.bars.items():
            self.console.print(Text(viewer_id, style="bold cyan"))
            self.console.print(bar.render())

    def show_problems(self, problems: list[tuple[str, str]]) -> None:
        if not problems:
            self.console.print("[green]Config OK[/green] — every month and time word is set.")
            return
        table = Table(title="Config problems", show_lines=False)
        table.add_column("Key", style="bold red")
        table.add_column("Problem")
        for key, problem in problems:
            table.add_row(key, problem)
        self.console.print(table)
