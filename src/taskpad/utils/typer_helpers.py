"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from taskpad.utils.exit_codes import ERROR_INVALID_ARGS
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import format_error


class SuggestingGroup(TyperGroup):
    """Command group that answers a mistyped command with close matches.

    ``taskpad tasks lst`` prints ``taskpad tasks list`` as a suggestion
    and exits with ``ERROR_INVALID_ARGS``. Without a close match the usual
    Typer usage error is shown.
    """

    max_suggestions = 3
    cutoff = 0.6

    def suggest(self, attempted: str) -> list[str]:
        """Visible command names closest to ``attempted``."""
        visible = [
            name for name, command in self.commands.items() if not command.hidden
        ]
        return get_close_matches(
            attempted, visible, n=self.max_suggestions, cutoff=self.cutoff
        )

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = self.suggest(args[0]) if args else []
            if not suggestions:
                raise

            format_error(f"Unknown command '{args[0]}' for '{ctx.command_path}'")
            console = get_console()
            console.print("[yellow]Did you mean:[/yellow]")
            for suggestion in suggestions:
                console.print(f"    {ctx.command_path} {suggestion}")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
