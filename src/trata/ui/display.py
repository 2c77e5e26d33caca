"""Full-screen timer UI for the terminal host."""

import math
import time
from collections.abc import Callable
from datetime import timedelta

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.text import Text

from trata.models.config_models import TimerConfig
from trata.models.cycling import Phase
from trata.models.engine import PhaseTransition, Snapshot, TimerEngine

PHASE_COLORS = {
    Phase.WORK: "cyan",
    Phase.SHORT_BREAK: "green",
    Phase.LONG_BREAK: "magenta",
}

# Keys understood by TimerDisplay.run
KEY_TOGGLE = ("p", " ")
KEY_SKIP = ("s",)
KEY_QUIT = ("q",)


def format_remaining(remaining: timedelta) -> str:
    """Format a duration as MM:SS, rounding partial seconds up."""
    total = math.ceil(remaining.total_seconds())
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


def mode_line(snapshot: Snapshot) -> str:
    """Status line such as 'Mode: Work' or 'Mode: Short Break (Paused)'."""
    line = f"Mode: {snapshot.phase.label}"
    if not snapshot.running:
        line += " (Paused)" if snapshot.started else " (Not started)"
    return line


def progress_dots(snapshot: Snapshot, config: TimerConfig) -> str:
    """Dots showing how many work sessions remain before the long break."""
    dots = []
    current = snapshot.sessions_since_break + 1
    for i in range(1, config.sessions_before_long_break + 1):
        if i < current:
            dots.append("●")  # Completed
        elif i == current and snapshot.phase is Phase.WORK:
            dots.append("◉")  # Current
        else:
            dots.append("○")  # Upcoming
    return " ".join(dots)


class TimerDisplay:
    """Renders engine snapshots and drives the engine from key presses."""

    def __init__(self, console: Console | None = None, refresh_interval: float = 0.25):
        self.console = console or Console()
        self.refresh_interval = refresh_interval

    def create_layout(self, snapshot: Snapshot, config: TimerConfig) -> Layout:
        """Create the timer layout for one snapshot."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        color = "yellow" if not snapshot.running else PHASE_COLORS[snapshot.phase]
        header_text = Text(mode_line(snapshot), style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))

        layout["body"].update(
            Align.center(self._create_body_content(snapshot, config), vertical="middle")
        )

        footer_text = Text(
            "Press 'p' to pause/resume  •  's' to skip  •  'q' to quit",
            style="dim",
            justify="center",
        )
        layout["footer"].update(Align.center(footer_text, vertical="middle"))

        return layout

    def _create_body_content(self, snapshot: Snapshot, config: TimerConfig) -> Group:
        components = []

        color = "yellow" if not snapshot.running else PHASE_COLORS[snapshot.phase]
        components.append(
            Text(format_remaining(snapshot.remaining), style=f"bold {color}", justify="center")
        )
        components.append(Text(""))  # Spacer

        total = config.duration_for(snapshot.phase).total_seconds()
        elapsed = total - snapshot.remaining.total_seconds()
        progress_pct = min(100, int(elapsed / total * 100))

        bar_width = 40
        filled = int(bar_width * progress_pct / 100)
        progress_bar = "▓" * filled + "░" * (bar_width - filled)
        components.append(
            Text(f"{progress_bar}  {progress_pct}%", style="dim", justify="center")
        )

        if config.has_long_break:
            components.append(Text(""))
            components.append(
                Text(progress_dots(snapshot, config), style="dim", justify="center")
            )

        return Group(*components)

    def run(
        self,
        engine: TimerEngine,
        get_key: Callable[[], str | None],
        on_transition: Callable[[PhaseTransition], None] | None = None,
    ) -> str:
        """
        Run the fullscreen timer until the user quits.

        Returns 'quit' when 'q' was pressed or 'interrupted' on Ctrl-C.
        """

        def notify(transitions):
            if on_transition:
                for transition in transitions:
                    on_transition(transition)

        snapshot = engine.query()
        notify(snapshot.transitions)

        try:
            with Live(
                self.create_layout(snapshot, engine.config),
                console=self.console,
                auto_refresh=False,
                screen=True,
            ) as live:
                while True:
                    key = get_key()

                    if key in KEY_TOGGLE:
                        engine.toggle()
                    elif key in KEY_SKIP:
                        notify([engine.skip_current_phase()])
                    elif key in KEY_QUIT:
                        return "quit"

                    snapshot = engine.query()
                    notify(snapshot.transitions)

                    live.update(self.create_layout(snapshot, engine.config), refresh=True)
                    time.sleep(self.refresh_interval)

        except KeyboardInterrupt:
            return "interrupted"
