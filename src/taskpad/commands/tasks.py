"""Task management commands."""

from typing import Annotated, Optional

import typer
from rich.prompt import Confirm

from taskpad.config import get_config_manager
from taskpad.exceptions import TaskNotFoundError, ValidationError
from taskpad.models import DEFAULT_PRIORITY
from taskpad.services.codec import task_to_dict
from taskpad.services.context_manager import get_task_collection
from taskpad.utils.typer_helpers import SuggestingGroup
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_info,
    format_output,
    format_stats,
    format_success,
    format_task_table,
)

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")
console = get_console()

ProfileOption = Annotated[str, typer.Option("--profile", help="Profile name")]
OutputOption = Annotated[
    Optional[str],
    typer.Option("--output", "-o", help="Output format (table, json, yaml)"),
]


def _resolve_output(output: Optional[str], profile: str) -> str:
    """Explicit -o value, else the configured default."""
    output = output or get_config_manager(profile).config.output.format
    if output not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        raise ValidationError(
            f"Unknown output format '{output}' (expected one of: {choices})"
        )
    return output


def _truncate(text: str, width: int = 60) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


@app.command("add")
@command_wrapper
def add_task(
    description: Annotated[str, typer.Argument(help="Task description")],
    priority: Annotated[
        str, typer.Option("--priority", "-p", help="Priority (low, medium, high)")
    ] = DEFAULT_PRIORITY,
    due: Annotated[
        Optional[str], typer.Option("--due", "-d", help="Due date (YYYY-MM-DD)")
    ] = None,
    output: OutputOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Add a new task.

    Examples:
        taskpad tasks add "Buy milk" --priority high
        taskpad tasks add "File taxes" --due 2025-04-15
    """
    output = _resolve_output(output, profile)
    collection = get_task_collection(profile)
    task = collection.add(description, priority=priority, due_date=due)

    if output == "table":
        format_success(f"Task added: {_truncate(task.description)}")
        console.print(f"[dim]ID: {task.id}[/dim]")
    else:
        format_output(task_to_dict(task), output)


@app.command("list")
@command_wrapper
def list_tasks(
    filter_mode: Annotated[
        str,
        typer.Option(
            "--filter", "-f", help="Which tasks to show (all, pending, completed)"
        ),
    ] = "all",
    output: OutputOption = None,
    profile: ProfileOption = "default",
) -> None:
    """List tasks: pending first, then by priority and due date."""
    output = _resolve_output(output, profile)
    collection = get_task_collection(profile)
    tasks = collection.sorted_view(filter_mode)

    if output != "table":
        format_output([task_to_dict(task) for task in tasks], output)
        return

    format_task_table(tasks, title=f"Tasks ({filter_mode})")
    format_stats(collection.stats())


@app.command("toggle")
@command_wrapper
def toggle_task(
    task_id: Annotated[str, typer.Argument(help="Task ID or unique ID prefix")],
    profile: ProfileOption = "default",
) -> None:
    """Mark a task completed, or reopen a completed one."""
    collection = get_task_collection(profile)
    resolved_id = collection.resolve_id(task_id)
    task = collection.toggle(resolved_id)
    if task is None:
        raise TaskNotFoundError(f"No task found with ID '{task_id}'")

    if task.completed:
        format_success(f"✓ Completed: {_truncate(task.description)}")
    else:
        format_success(f"Reopened: {_truncate(task.description)}")


@app.command("remove")
@command_wrapper
def remove_task(
    task_id: Annotated[str, typer.Argument(help="Task ID or unique ID prefix")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    profile: ProfileOption = "default",
) -> None:
    """Delete a task."""
    collection = get_task_collection(profile)
    resolved_id = collection.resolve_id(task_id)
    task = collection.get(resolved_id)

    if not yes and not Confirm.ask(f"Delete '{_truncate(task.description)}'?"):
        format_info("Cancelled")
        raise typer.Exit(0)

    collection.remove(resolved_id)
    format_success(f"Deleted: {_truncate(task.description)}")


@app.command("stats")
@command_wrapper
def show_stats(
    output: OutputOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Show total, pending and completed counts."""
    output = _resolve_output(output, profile)
    stats = get_task_collection(profile).stats()
    if output == "table":
        format_stats(stats)
    else:
        format_output(stats.model_dump(), output)
