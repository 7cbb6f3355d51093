"""Main CLI application."""

from pathlib import Path
from typing import Annotated

import typer

from hrtracker.cli.commands import paths, schedules

app = typer.Typer(
    name="hrtracker",
    help="hrtracker - track recurring schedules such as medication doses",
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Schedule file (default: $HRTRACKER_HOME/schedules.jsonl)",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """Track recurring schedules. Lists all schedules when no command is given."""
    from pydantic import ValidationError

    from hrtracker.cli.console import console, error
    from hrtracker.cli.runtime import bootstrap_runtime
    from hrtracker.config import ConfigError

    try:
        runtime = bootstrap_runtime(
            schedule_file=file,
            config_path=config,
            verbose=verbose,
        )
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        error("Configuration validation failed:")
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            console.print(f"  [yellow]{loc}[/yellow]: {err['msg']}")
        raise typer.Exit(1) from None

    ctx.obj = runtime

    if ctx.invoked_subcommand is None:
        schedules.list_schedules(runtime.store)


schedules.register(app)
paths.register(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
