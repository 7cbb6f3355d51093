"""Show where hrtracker keeps its files."""

import typer
from rich.markup import escape

from hrtracker.cli.console import console, create_table
from hrtracker.cli.runtime import CliRuntime


def register(app: typer.Typer) -> None:
    """Register the paths command."""

    @app.command()
    def paths(ctx: typer.Context) -> None:
        """Show the resolved home, config, schedule and log paths."""
        from hrtracker.config.paths import get_all_paths

        runtime: CliRuntime = ctx.obj
        resolved = get_all_paths()
        resolved["schedules"] = runtime.store.path

        table = create_table(None, [("Name", "cyan"), ("Path", "")])
        for name, path in resolved.items():
            exists = "" if path.exists() else " [dim](missing)[/dim]"
            table.add_row(name, f"{escape(str(path))}{exists}")
        console.print(table)
