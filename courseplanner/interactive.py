"""
Interactive menu loop.

    1. Load Data Structure.
    2. Print Course List.
    3. Print Course.
    9. Exit

The session owns the course list (SessionState) and hands it to the loader
and the lookup helpers. Nothing here ever ends the session except option 9
(or the input stream running dry).

Output goes through a rich Console with markup/highlighting/wrapping turned
off, so every message is printed exactly as written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Optional, Tuple

from rich.console import Console

from courseplanner.catalog import find_course, resolve_prerequisites, sorted_courses
from courseplanner.model import Course
from courseplanner.parse import DEFAULT_SUBJECT_PREFIXES, LoadOutcome, load_courses


def make_console(file: Optional[IO[str]] = None) -> Console:
    return Console(
        file=file,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


console = make_console()


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

WELCOME = "Welcome to the course planner."
MENU = "1. Load Data Structure.\n2. Print Course List.\n3. Print Course.\n9. Exit\nWhat would you like to do? "
GOODBYE = "Thank you for using the course planner!"
NO_DATA_LOADED = "No data loaded. Please load data first."

OPTION_LOAD = 1
OPTION_LIST = 2
OPTION_SHOW = 3
OPTION_EXIT = 9


@dataclass
class SessionState:
    courses: list[Course] = field(default_factory=list)
    prefixes: Tuple[str, ...] = DEFAULT_SUBJECT_PREFIXES

    @property
    def has_data(self) -> bool:
        return bool(self.courses)


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg, markup=False, emoji=False)


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------


def run_interactive(state: Optional[SessionState] = None) -> SessionState:
    """
    Run the menu until the user picks 9. Returns the final session state.
    """
    if state is None:
        state = SessionState()

    _println(WELCOME)

    while True:
        try:
            raw = _prompt(MENU).strip()
        except (EOFError, KeyboardInterrupt):
            # No more input: leave the same way option 9 does
            _println()
            _println(GOODBYE)
            return state

        if not raw:
            continue

        # ASCII digits only: int() would also take "\u0661" or "1_0"
        if not (raw.isascii() and raw.isdigit()):
            _println(f"{raw} is not a valid option.")
            continue

        choice = int(raw)

        try:
            if choice == OPTION_LOAD:
                _flow_load(state)
            elif choice == OPTION_LIST:
                _flow_list(state)
            elif choice == OPTION_SHOW:
                _flow_show(state)
            elif choice == OPTION_EXIT:
                _println(GOODBYE)
                return state
            else:
                _println(f"{raw} is not a valid option.")
        except (EOFError, KeyboardInterrupt):
            _println()
            _println(GOODBYE)
            return state


# ---------------------------------------------------------------------------
# Menu flows
# ---------------------------------------------------------------------------


def _flow_load(state: SessionState) -> None:
    """
    Ask for a file name and replace the whole course list with its content.
    """
    file_name = _prompt("Enter the file name containing course data: ").strip()

    result = load_courses(file_name, state.prefixes)

    # Full replace: failed loads leave an empty list behind
    state.courses = result.courses

    if result.ok:
        _println(f"Data loaded successfully! {result.count} courses read.")
    elif result.outcome is LoadOutcome.SOURCE_UNAVAILABLE:
        _println(f'ERROR: Could not open file "{file_name}"')
    else:
        _println("No valid course data found in the file.")


def _flow_list(state: SessionState) -> None:
    if not state.has_data:
        _println(NO_DATA_LOADED)
        return

    _println("Here is a sample schedule:")
    for c in sorted_courses(state.courses):
        _println(c.label())


def _flow_show(state: SessionState) -> None:
    """
    Show one course and the titles of its prerequisites.

    Unknown prerequisite codes are reported in place, the rest still print.
    """
    if not state.has_data:
        _println(NO_DATA_LOADED)
        return

    code = _prompt("What course do you want to know about? ").strip()

    course = find_course(state.courses, code)
    if course is None:
        _println(f"{code} is not found.")
        return

    _println(course.label())

    if not course.prerequisites:
        _println("No prerequisites.")
        return

    _println("Prerequisites:")
    for pre_code, pre in resolve_prerequisites(state.courses, course):
        if pre is not None:
            _println(pre.label())
        else:
            _println(f"{pre_code} (course not found in data)")
