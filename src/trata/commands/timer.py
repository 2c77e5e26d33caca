"""Pomodoro timer command for the trata CLI."""

import typer
from pydantic import ValidationError

from trata.models.config_models import TimerConfig
from trata.models.engine import PhaseTransition, TimerEngine
from trata.models.exceptions import ConfigError
from trata.services.config_service import get_config_service
from trata.ui.display import TimerDisplay
from trata.ui.keyboard import KeyboardHandler
from trata.utils.logger import get_logger
from trata.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Pomodoro timer")


def apply_overrides(config: TimerConfig, **overrides) -> TimerConfig:
    """Return a re-validated copy of ``config`` with the non-None overrides applied."""
    data = config.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return TimerConfig.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ConfigError(f"Invalid timer options: {fields}") from e


def _minutes(value: float | None):
    if value is None:
        return None
    return value * 60


@app.command("run")
@command_wrapper
def run_timer(
    work: float | None = typer.Option(None, "--work", "-w", help="Work phase in minutes"),
    short_break: float | None = typer.Option(
        None, "--short-break", help="Short break in minutes"
    ),
    long_break: float | None = typer.Option(None, "--long-break", help="Long break in minutes"),
    sessions: int | None = typer.Option(
        None, "--sessions", "-n", help="Work sessions before a long break"
    ),
    has_long_break: bool | None = typer.Option(
        None, "--with-long-break/--no-long-break", help="Use long breaks"
    ),
    auto_continue: bool | None = typer.Option(
        None,
        "--auto-continue/--no-auto-continue",
        help="Chain phases without pausing between them",
    ),
    bell: bool | None = typer.Option(None, "--bell/--no-bell", help="Ring on phase change"),
) -> None:
    """Run the fullscreen timer. Keys: p pause/resume, s skip, q quit."""
    logger = get_logger()
    app_config = get_config_service().load_config()

    timer_config = apply_overrides(
        app_config.timer,
        work_duration=_minutes(work),
        short_break_duration=_minutes(short_break),
        long_break_duration=_minutes(long_break),
        sessions_before_long_break=sessions,
        has_long_break=has_long_break,
        auto_continue=auto_continue,
    )
    ring = app_config.bell if bell is None else bell

    engine = TimerEngine(timer_config)

    def on_transition(transition: PhaseTransition) -> None:
        logger.info(
            "phase %s: %s -> %s",
            "skipped" if transition.skipped else "completed",
            transition.completed.value,
            transition.started.value,
        )
        if ring:
            console.bell()

    engine.start()
    logger.info("timer started: %s", timer_config.model_dump_json())

    display = TimerDisplay(console)
    with KeyboardHandler() as keyboard:
        result = display.run(engine, keyboard.get_key, on_transition=on_transition)

    snapshot = engine.query()
    logger.info("timer stopped (%s) in %s", result, snapshot.phase.value)
    console.print(
        f"[dim]Timer stopped in {snapshot.phase.label} "
        f"after {snapshot.sessions_since_break} session(s) this cycle[/dim]"
    )
