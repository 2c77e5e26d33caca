"""Main entry point for the trata CLI."""

import typer

from trata import __version__
from trata.commands import config, timer
from trata.utils.logger import get_log_file
from trata.utils.ui.console import get_console

app = typer.Typer(
    name="trata",
    help="A pomodoro interval timer for the terminal",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")
app.add_typer(timer.app, name="timer", help="Pomodoro timer")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]trata[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Log file: {get_log_file()}[/dim]", soft_wrap=True)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
