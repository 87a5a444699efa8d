"""Main entry point for taskpad."""

from typing import Annotated, Optional

import typer

from taskpad import __version__
from taskpad.commands import config, data, tasks
from taskpad.models import DEFAULT_PRIORITY
from taskpad.utils.logger import get_log_file
from taskpad.utils.typer_helpers import SuggestingGroup
from taskpad.utils.ui.console import get_console

app = typer.Typer(
    name="taskpad",
    cls=SuggestingGroup,
    help="A local task manager with JSON and CSV import/export",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(data.app, name="data", help="Data management (import, export)")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]taskpad[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Log file: {get_log_file()}[/dim]")


@app.command("add")
def add(
    description: Annotated[str, typer.Argument(help="Task description")],
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="Priority (low, medium, high)")
    ] = DEFAULT_PRIORITY,
    due: Annotated[
        Optional[str], typer.Option("--due", "-d", help="Due date (YYYY-MM-DD)")
    ] = None,
    profile: Annotated[str, typer.Option("--profile", help="Profile name")] = "default",
) -> None:
    """Quick add a task (shortcut for 'tasks add')."""
    tasks.add_task(
        description=description,
        priority=priority,
        due=due,
        output=None,
        profile=profile,
    )


@app.command("list")
def list_(
    filter_mode: Annotated[
        str,
        typer.Option(
            "--filter", "-f", help="Which tasks to show (all, pending, completed)"
        ),
    ] = "all",
    profile: Annotated[str, typer.Option("--profile", help="Profile name")] = "default",
) -> None:
    """List tasks (shortcut for 'tasks list')."""
    tasks.list_tasks(filter_mode=filter_mode, output=None, profile=profile)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
