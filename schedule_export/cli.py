"""
Command-line interface for the schedule exporter.

Usage:
    python -m schedule_export master data.json -o exports/
    python -m schedule_export teacher data.json t1
    python -m schedule_export teachers data.json
    python -m schedule_export class data.json 10 2
    python -m schedule_export classes data.json
    python -m schedule_export summary data.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config import ExportSettings, get_settings
from .data.loader import load_schedule_data
from .data.models import ScheduleData
from .errors import DataValidationError
from .export import (
    ExportedFile,
    export_all_classes,
    export_all_teachers,
    export_class_schedule,
    export_master_schedule,
    export_teacher_schedule,
    save_export,
)
from .logging import setup_logging

# Create Typer app
app = typer.Typer(
    name="schedule-export",
    help="Fill school timetable templates and export xlsx workbooks.",
    add_completion=False,
)

console = Console()


# =============================================================================
# Shared Parameters
# =============================================================================

def data_file_argument():
    return typer.Argument(
        ...,
        help="Path to JSON file with teachers, slots and notes",
    )


def output_option():
    return typer.Option(
        None,
        "--output", "-o",
        help="Directory to save the workbook into (default: SCHEDULE_EXPORT_OUTPUT_DIR)",
    )


def template_option():
    return typer.Option(
        None,
        "--template", "-t",
        help="Template path or URL overriding the configured one",
    )


def verbose_option():
    return typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging",
    )


# =============================================================================
# Helper Functions
# =============================================================================

def load_data(data_file: Path) -> ScheduleData:
    """Load schedule data, exiting with an error message on failure."""
    if not data_file.exists():
        console.print(f"[red]Error:[/red] Data file not found: {data_file}")
        raise typer.Exit(code=1)

    try:
        return load_schedule_data(data_file)
    except (json.JSONDecodeError, DataValidationError) as e:
        console.print(f"[red]Error loading data:[/red] {e}")
        raise typer.Exit(code=1)


def build_settings(verbose: bool, **overrides: Optional[str]) -> ExportSettings:
    """Configured settings with command-line overrides applied; sets up logging."""
    settings = get_settings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        settings = settings.model_copy(update=updates)

    setup_logging(
        json_output=settings.log_json,
        log_level="DEBUG" if verbose else settings.log_level,
    )
    return settings


def run_export(
    description: str,
    export: Callable[[], ExportedFile],
    output_dir: Optional[Path],
    settings: ExportSettings,
) -> Path:
    """Run an export with a spinner, save the workbook, and print where it went."""
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(description, total=None)
            exported = export()
    except Exception as e:
        console.print(f"[red]Export failed:[/red] {e}")
        raise typer.Exit(code=1)

    try:
        filepath = save_export(exported, output_dir or settings.output_dir)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error saving workbook:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("File", str(filepath))
    table.add_row("Sheets", str(exported.sheet_count))
    table.add_row("Size", f"{exported.size} bytes")
    console.print(table)

    console.print(f"[green]Saved:[/green] {filepath}")
    return filepath


# =============================================================================
# Commands
# =============================================================================

@app.command()
def master(
    data_file: Path = data_file_argument(),
    output: Optional[Path] = output_option(),
    template: Optional[str] = template_option(),
    verbose: bool = verbose_option(),
) -> None:
    """
    Export the master schedule: one row per teacher.

    Example:
        python -m schedule_export master data.json -o exports/
    """
    settings = build_settings(verbose, master_template=template)
    data = load_data(data_file)

    run_export(
        "Exporting master schedule...",
        lambda: export_master_schedule(
            data.teachers, data.slots, data.teacher_notes, settings=settings
        ),
        output,
        settings,
    )


@app.command()
def teacher(
    data_file: Path = data_file_argument(),
    teacher_id: str = typer.Argument(..., help="ID of the teacher to export"),
    output: Optional[Path] = output_option(),
    template: Optional[str] = template_option(),
    verbose: bool = verbose_option(),
) -> None:
    """
    Export a single teacher's weekly schedule.

    Example:
        python -m schedule_export teacher data.json t1
    """
    settings = build_settings(verbose, schedule_template=template)
    data = load_data(data_file)

    selected = data.get_teacher(teacher_id)
    if selected is None:
        console.print(f"[red]Error:[/red] Teacher '{teacher_id}' not found")
        console.print(f"Available teachers: {', '.join(t.id for t in data.teachers)}")
        raise typer.Exit(code=1)

    run_export(
        f"Exporting schedule for {selected.name}...",
        lambda: export_teacher_schedule(
            selected, data.get_teacher_slots(selected.id), settings=settings
        ),
        output,
        settings,
    )


@app.command()
def teachers(
    data_file: Path = data_file_argument(),
    output: Optional[Path] = output_option(),
    template: Optional[str] = template_option(),
    verbose: bool = verbose_option(),
) -> None:
    """
    Export every teacher's schedule into one workbook, one sheet each.

    Example:
        python -m schedule_export teachers data.json
    """
    settings = build_settings(verbose, schedule_template=template)
    data = load_data(data_file)

    run_export(
        f"Exporting {len(data.teachers)} teacher schedules...",
        lambda: export_all_teachers(data.teachers, data.slots, settings=settings),
        output,
        settings,
    )


@app.command("class")
def class_(
    data_file: Path = data_file_argument(),
    grade: int = typer.Argument(..., help="Grade level"),
    section: int = typer.Argument(..., help="Section number"),
    output: Optional[Path] = output_option(),
    template: Optional[str] = template_option(),
    verbose: bool = verbose_option(),
) -> None:
    """
    Export a single class's weekly schedule.

    Example:
        python -m schedule_export class data.json 10 2
    """
    settings = build_settings(verbose, schedule_template=template)
    data = load_data(data_file)

    run_export(
        f"Exporting schedule for class {grade}/{section}...",
        lambda: export_class_schedule(
            grade,
            section,
            data.get_class_slots(grade, section),
            data.teachers,
            settings=settings,
        ),
        output,
        settings,
    )


@app.command()
def classes(
    data_file: Path = data_file_argument(),
    output: Optional[Path] = output_option(),
    template: Optional[str] = template_option(),
    verbose: bool = verbose_option(),
) -> None:
    """
    Export every class's schedule into one workbook, one sheet per grade/section.

    Example:
        python -m schedule_export classes data.json
    """
    settings = build_settings(verbose, schedule_template=template)
    data = load_data(data_file)

    run_export(
        "Exporting class schedules...",
        lambda: export_all_classes(
            data.slots, data.teachers, data.grade_sections, settings=settings
        ),
        output,
        settings,
    )


@app.command()
def summary(
    data_file: Path = data_file_argument(),
) -> None:
    """
    Show what a data file contains.

    Example:
        python -m schedule_export summary data.json
    """
    data = load_data(data_file)

    table = Table(title="Summary", show_header=False, box=None)
    table.add_column("Entity", style="cyan")
    table.add_column("Count", style="white")

    for key, value in data.summary().items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print(table)


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
