"""Schedule commands: new, list, next, step."""

from datetime import datetime
from typing import Annotated

import typer
from rich.markup import escape

from hrtracker.cli.console import console, create_table, exit_on_error, success, warning
from hrtracker.cli.runtime import CliRuntime
from hrtracker.schedules import ScheduleStore
from hrtracker.timeexpr import format_countdown, format_datetime, format_interval


def list_schedules(store: ScheduleStore) -> None:
    """Print every schedule as one table row."""
    with exit_on_error():
        schedules = store.list()

    if not schedules:
        warning("No schedules found")
        return

    now = datetime.now()
    table = create_table(
        None,
        [
            ("Name", "cyan"),
            ("Next", ""),
            ("Due", "dim"),
            ("Interval", ""),
        ],
    )
    for schedule in schedules:
        table.add_row(
            escape(schedule.name),
            format_datetime(schedule.date),
            format_countdown(schedule.date, now),
            format_interval(schedule.interval),
        )
    console.print(table)


def register(app: typer.Typer) -> None:
    """Register the schedule commands."""

    @app.command("new")
    def new_schedule(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Schedule name, e.g. pill")],
        date: Annotated[
            str,
            typer.Argument(help="First occurrence: today|tomorrow|tmrw|now[+hh[:mm[:ss]]]"),
        ],
        interval: Annotated[
            str,
            typer.Argument(help="Repeat interval: days (1, 2d), hh:mm[:ss] or 1d+hh:mm"),
        ],
    ) -> None:
        """Create a new schedule.

        Examples:
            hrtracker new pill tomorrow+08:00 1     # daily at 8 AM
            hrtracker new drops now 06:00           # every six hours
        """
        runtime: CliRuntime = ctx.obj
        with exit_on_error():
            schedule = runtime.store.create(name, date, interval)
        success(
            f"Created {schedule.name}: next at {format_datetime(schedule.date)} "
            f"({format_countdown(schedule.date)}), "
            f"every {format_interval(schedule.interval)}"
        )

    @app.command("list")
    def list_command(ctx: typer.Context) -> None:
        """List all schedules (the default command)."""
        runtime: CliRuntime = ctx.obj
        list_schedules(runtime.store)

    @app.command("next")
    def next_command(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Schedule name")],
    ) -> None:
        """Show when a schedule is next due."""
        runtime: CliRuntime = ctx.obj
        with exit_on_error():
            date = runtime.store.next(name)
        console.print(
            f"{format_datetime(date)} ({format_countdown(date)})", markup=False
        )

    @app.command("step")
    def step_command(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Schedule name")],
    ) -> None:
        """Advance a schedule by one interval."""
        runtime: CliRuntime = ctx.obj
        with exit_on_error():
            schedule = runtime.store.step(name)
        success(
            f"{schedule.name}: next at {format_datetime(schedule.date)} "
            f"({format_countdown(schedule.date)})"
        )
