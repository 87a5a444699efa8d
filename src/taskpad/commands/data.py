"""Data management commands (import, export)."""

from typing import Annotated, Optional

import typer
from rich.prompt import Confirm
from rich.table import Table

from taskpad.config import get_config_manager
from taskpad.services.context_manager import get_task_collection
from taskpad.services.transfer_service import check_format, read_import, write_export
from taskpad.utils.typer_helpers import SuggestingGroup
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Data management commands")
console = get_console()


@app.command("export")
@command_wrapper
def export_data(
    fmt: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Export format: json or csv"),
    ] = None,
    output_dir: Annotated[
        Optional[str],
        typer.Option("--output-dir", "-d", help="Directory to write the file to"),
    ] = None,
    profile: Annotated[str, typer.Option("--profile", help="Profile name")] = "default",
) -> None:
    """
    Export all tasks to todo-list-<date>.json or .csv.

    Examples:
        taskpad data export
        taskpad data export --format csv --output-dir ~/backups
    """
    config = get_config_manager(profile).config
    fmt = check_format(fmt or config.export.format)
    directory = output_dir or config.export.directory

    collection = get_task_collection(profile)
    output_path = write_export(collection.tasks, fmt, directory)

    format_success(f"✓ Exported {len(collection)} task(s) to: {output_path.absolute()}")


@app.command("import")
@command_wrapper
def import_data(
    file: Annotated[str, typer.Argument(help="JSON or CSV file to import")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation prompt")
    ] = False,
    profile: Annotated[str, typer.Option("--profile", help="Profile name")] = "default",
) -> None:
    """
    Import tasks from a JSON or CSV file, replacing ALL existing tasks.

    Examples:
        taskpad data import todo-list-2024-05-01.json
        taskpad data import tasks.csv --yes
    """
    preview = read_import(file)
    collection = get_task_collection(profile)

    table = Table(title="Import Preview", show_header=True)
    table.add_column("Item", style="cyan")
    table.add_column("Count", justify="right", style="yellow")
    table.add_row("Tasks to import", str(len(preview.tasks)))
    table.add_row("Existing tasks (replaced)", str(len(collection)))
    if preview.format == "csv":
        table.add_row("Skipped rows", str(preview.skipped_rows))
    console.print(table)

    if preview.skipped_rows:
        format_warning(f"{preview.skipped_rows} malformed row(s) will not be imported")

    if not yes and not Confirm.ask(
        f"Import {len(preview.tasks)} task(s)? This will replace all existing tasks."
    ):
        format_info("Import cancelled")
        raise typer.Exit(0)

    collection.replace(preview.tasks)
    format_success(f"✓ Imported {len(preview.tasks)} task(s) from: {file}")
