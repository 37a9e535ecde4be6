"""Command line interface for the ABCU advising assistant."""
from __future__ import annotations

from typing import Optional

import typer

from backend.advising.schemas import (
    CourseDetail,
    CourseListing,
    CourseNotFound,
    DetailResult,
    EmptyCatalog,
    ListResult,
    LoadFailed,
    LoadResult,
)
from backend.advising.settings import AdvisingSettings
from backend.advising.state import AdvisingState


app = typer.Typer(help="Browse the ABCU course catalog and its prerequisites.")

MENU = (
    "  1. Load Data Structure.\n"
    "  2. Print Course List.\n"
    "  3. Print Course.\n"
    "  9. Exit\n"
)
LOAD_FIRST_MESSAGE = "Please load the data structure first (option 1)."


def _catalog_option() -> typer.Option:
    return typer.Option(
        None,
        "--catalog",
        "-c",
        help="Course catalog file (falls back to ABCU_ADVISING_CATALOG_PATH).",
    )


def _create_state() -> AdvisingState:
    return AdvisingState(settings=AdvisingSettings())


def format_course_list(result: CourseListing) -> str:
    lines = ["Here is a sample schedule:"]
    lines.extend(f"{course.number}, {course.title}" for course in result.courses)
    return "\n".join(lines) + "\n"


def format_course_detail(result: CourseDetail) -> str:
    if not result.has_prerequisites:
        prerequisites = "None"
    else:
        prerequisites = ", ".join(prerequisite.number for prerequisite in result.prerequisites)
    return f"{result.number}, {result.title}\nPrerequisites: {prerequisites}\n"


def _echo_load(outcome: LoadResult) -> None:
    if isinstance(outcome, LoadFailed):
        typer.echo(f"Error: {outcome.error.message}\n")
    else:
        typer.echo(f"Data loaded successfully ({outcome.course_count} courses).\n")


def _echo_list(result: ListResult) -> bool:
    """Print a listing outcome; returns False when nothing could be listed."""

    if isinstance(result, EmptyCatalog):
        typer.echo(LOAD_FIRST_MESSAGE, err=True)
        return False
    typer.echo(format_course_list(result))
    return True


def _echo_detail(result: DetailResult, *, err: bool = False) -> bool:
    """Print a detail outcome; returns False for missing courses or catalogs.

    ``err`` routes failure messages to stderr for the one-shot commands.
    """

    if isinstance(result, EmptyCatalog):
        typer.echo(LOAD_FIRST_MESSAGE, err=err)
        return False
    if isinstance(result, CourseNotFound):
        typer.echo(f"{result.number} was not found.\n", err=err)
        return False
    typer.echo(format_course_detail(result))
    return True


def _load_for_command(state: AdvisingState, catalog: Optional[str]) -> None:
    """Load the catalog for a one-shot command or exit with status 1."""

    path = catalog or state.settings.catalog_path
    if not path:
        typer.echo("No catalog file supplied. Use --catalog or ABCU_ADVISING_CATALOG_PATH.", err=True)
        raise typer.Exit(code=1)

    outcome = state.load_catalog_file(path)
    if isinstance(outcome, LoadFailed):
        typer.echo(f"Error: {outcome.error.message}", err=True)
        raise typer.Exit(code=1)


def _prompt(text: str) -> Optional[str]:
    """Prompt for a line of input; returns None when input ends."""

    try:
        value = typer.prompt(text, default="", show_default=False, prompt_suffix=" ")
    except typer.Abort:
        return None
    return value.strip()


def _menu_load(state: AdvisingState) -> None:
    filename = _prompt("Enter the file name to load (e.g., CS 300 ABCU_Advising_Program_Input.csv):")
    if filename is None:
        typer.echo("Input cancelled.\n")
        return
    if not filename:
        typer.echo("File name cannot be empty.\n")
        return

    _echo_load(state.load_catalog_file(filename))


def _menu_describe(state: AdvisingState) -> None:
    if state.catalog.is_empty():
        typer.echo(LOAD_FIRST_MESSAGE + "\n")
        return

    number = _prompt("What course do you want to know about?")
    if number is None:
        typer.echo("Input cancelled.\n")
        return
    if not number:
        typer.echo("Course number cannot be empty.\n")
        return
    _echo_detail(state.describe_course(number))


def run_menu(state: AdvisingState) -> None:
    """Run the interactive menu until the user exits or input ends."""

    typer.echo("Welcome to the course planner.\n")

    while True:
        typer.echo(MENU)
        option_raw = _prompt("What would you like to do?")
        if option_raw is None:
            break
        if not option_raw:
            typer.echo("Please enter a menu option.\n")
            continue
        if len(option_raw) > 2 or not option_raw.isdecimal():
            typer.echo(f"{option_raw} is not a valid option.\n")
            continue

        option = int(option_raw)
        if option == 1:
            _menu_load(state)
        elif option == 2:
            result = state.list_courses()
            if isinstance(result, EmptyCatalog):
                typer.echo(LOAD_FIRST_MESSAGE + "\n")
            else:
                typer.echo(format_course_list(result))
        elif option == 3:
            _menu_describe(state)
        elif option == 9:
            typer.echo("Thank you for using the course planner!")
            break
        else:
            typer.echo(f"{option} is not a valid option.\n")


@app.command()
def menu(catalog: Optional[str] = _catalog_option()) -> None:
    """Start the interactive course planner menu."""

    state = _create_state()
    path = catalog or state.settings.catalog_path
    if path:
        _echo_load(state.load_catalog_file(path))
    run_menu(state)


@app.command("list")
def list_command(catalog: Optional[str] = _catalog_option()) -> None:
    """Print every course in alphanumeric order."""

    state = _create_state()
    _load_for_command(state, catalog)
    if not _echo_list(state.list_courses()):
        raise typer.Exit(code=1)


@app.command()
def show(
    course: str = typer.Argument(..., help="Course number to describe (case-insensitive)."),
    catalog: Optional[str] = _catalog_option(),
) -> None:
    """Print a course title and its prerequisites."""

    state = _create_state()
    _load_for_command(state, catalog)
    if not _echo_detail(state.describe_course(course), err=True):
        raise typer.Exit(code=1)
