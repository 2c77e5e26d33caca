"""Configuration management commands."""

from datetime import timedelta

import typer

from trata.services.config_service import get_config_service
from trata.utils.ui.console import get_console
from trata.utils.ui.formatters import format_error, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | float | bool:
    """Convert a command-line string to bool/int/float when it looks like one."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def _display(value) -> str:
    if isinstance(value, timedelta):
        minutes, seconds = divmod(int(value.total_seconds()), 60)
        return f"{minutes}m{seconds:02d}s" if seconds else f"{minutes}m"
    return str(value)


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config = get_config_service().config
    for key, value in config.timer.model_dump().items():
        console.print(f"timer.{key} = [cyan]{_display(value)}[/cyan]")
    console.print(f"bell = [cyan]{_display(config.bell)}[/cyan]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_duration)"),
) -> None:
    """Get a configuration value."""
    console.print(_display(get_config_service().get(key)))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_duration)"),
    value: str = typer.Argument(
        ..., help="Configuration value (durations in seconds or ISO 8601, e.g. PT25M)"
    ),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    get_config_service().set(key, parsed_value)
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        confirm = typer.confirm("Are you sure you want to reset the configuration?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")


@app.command("path")
def config_path() -> None:
    """Print the location of the configuration file."""
    console.print(str(get_config_service().config_path), soft_wrap=True)
