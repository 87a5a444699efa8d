"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from taskpad.models import PRIORITIES, Task, TaskStats
from taskpad.utils.ui.console import get_console

OUTPUT_FORMATS = ("table", "json", "yaml")

PRIORITY_STYLES = {priority: f"priority.{priority}" for priority in PRIORITIES}

# Short ids shown in tables; any unique prefix is accepted back
SHORT_ID_LENGTH = 8


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display plain data (dicts/lists) based on format."""
    console = get_console()
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, dict):
        format_single_item(data)
    elif isinstance(data, list) and data and isinstance(data[0], dict):
        format_dict_table(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    console = get_console()
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    columns = list(items[0].keys())
    for column in columns:
        table.add_column(column)
    for item in items:
        table.add_row(*("" if item.get(c) is None else str(item.get(c)) for c in columns))
    console.print(table)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Format a single (possibly nested) item as key/value lines."""
    console = get_console()
    for key, value in item.items():
        if isinstance(value, dict):
            format_single_item(value, prefix=f"{prefix}{key}.")
        else:
            console.print(f"[cyan]{prefix}{key}:[/cyan] {escape(str(value))}")


def format_due(task: Task, now: datetime | None = None) -> Text:
    """Due column text; overdue tasks are highlighted."""
    label = task.due_label(now)
    if label is None:
        return Text("-", style="dim")
    if task.is_overdue(now):
        return Text(label, style="task.overdue")
    return Text(label)


def format_task_table(
    tasks: list[Task], title: str | None = None, now: datetime | None = None
) -> None:
    """Render tasks (already in display order) as a Rich table."""
    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="task.id", no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Task")
    table.add_column("Priority", no_wrap=True)
    table.add_column("Due", no_wrap=True)

    for task in tasks:
        description = Text(task.description)
        if task.completed:
            description.stylize("task.done")
        table.add_row(
            task.id[:SHORT_ID_LENGTH],
            "[green]✓[/green]" if task.completed else "○",
            description,
            Text(task.priority, style=PRIORITY_STYLES.get(task.priority, "")),
            format_due(task, now),
        )

    console.print(table)


def format_stats(stats: TaskStats) -> None:
    """Render the total/pending/completed counters on one line."""
    get_console().print(
        f"Total: [bold]{stats.total}[/bold]  "
        f"Pending: [bold yellow]{stats.pending}[/bold yellow]  "
        f"Completed: [bold green]{stats.completed}[/bold green]"
    )


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {escape(message)}")
