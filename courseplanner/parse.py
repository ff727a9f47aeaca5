"""
Parsing (course data file -> Course objects).

- Reads a plain text file line by line
- Splits each line on whitespace
- Decides where the title ends and the prerequisite list begins
- Returns the complete replacement collection plus a load outcome

Line layout:

    <number> [<title words>...] [<prerequisite codes>...]

There is no delimiter between title and prerequisites. The boundary is found
with a heuristic: the first token (after the title's first word) that looks
like a course code starts the prerequisite list.

Known limitation (DO NOT "FIX"):
- A title word of 7+ characters starting with a reserved subject prefix
  (e.g. "MATHEMATICS") is taken as a prerequisite if it is not the first title word.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from courseplanner.model import Course


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

# Subject prefixes that mark a token as a course code
DEFAULT_SUBJECT_PREFIXES = ("CSCI", "MATH")

# Prefix (4 chars) + at least a 3 digit number
MIN_COURSE_CODE_LENGTH = 7


# ---------------------------------------------------------------------------
# Load result
# ---------------------------------------------------------------------------


class LoadOutcome(Enum):
    """
    How a load attempt ended. The caller picks its message from this.
    """

    LOADED = "loaded"
    SOURCE_UNAVAILABLE = "source_unavailable"
    NO_DATA = "no_data"


@dataclass
class LoadResult:
    courses: List[Course] = field(default_factory=list)
    outcome: LoadOutcome = LoadOutcome.NO_DATA

    @property
    def count(self) -> int:
        return len(self.courses)

    @property
    def ok(self) -> bool:
        return self.outcome is LoadOutcome.LOADED


# ---------------------------------------------------------------------------
# Line parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def tokenize(line: str) -> List[str]:
    """
    Split a line on runs of whitespace. Empty/blank lines give [].
    """
    return line.split()


def is_course_code(token: str, prefixes: Iterable[str] = DEFAULT_SUBJECT_PREFIXES) -> bool:
    """
    Rough check whether a token looks like a course code, e.g. "CSCI200".
    """
    if len(token) < MIN_COURSE_CODE_LENGTH:
        return False
    return any(token.startswith(p) for p in prefixes)


def parse_course_line(
    line: str,
    prefixes: Iterable[str] = DEFAULT_SUBJECT_PREFIXES,
) -> Optional[Course]:
    """
    Parses exactly one data line into exactly one Course.

    Returns None for lines without any token.
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    prefixes = tuple(prefixes)

    # Title runs until the first course code; tokens[1] is always title
    i = 1
    while i < len(tokens):
        if i != 1 and is_course_code(tokens[i], prefixes):
            break
        i += 1

    return Course(
        number=tokens[0],
        title=" ".join(tokens[1:i]),
        prerequisites=tokens[i:],
    )


def parse_course_lines(
    lines: Iterable[str],
    prefixes: Iterable[str] = DEFAULT_SUBJECT_PREFIXES,
) -> List[Course]:
    """
    Parses all lines, skipping the ones that do not yield a course.
    """
    prefixes = tuple(prefixes)
    courses: List[Course] = []
    for line in lines:
        course = parse_course_line(line, prefixes)
        if course is not None:
            courses.append(course)
    return courses


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_courses(
    path: str | Path,
    prefixes: Iterable[str] = DEFAULT_SUBJECT_PREFIXES,
) -> LoadResult:
    """
    Reads a course data file and returns the full replacement collection.

    Never raises for a missing or unreadable file: the outcome tells the
    caller what happened and the collection is empty on both failure paths.

    Bytes that are not valid UTF-8 are replaced (U+FFFD), the line still loads.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            courses = parse_course_lines(f, prefixes)
    except OSError:
        return LoadResult(courses=[], outcome=LoadOutcome.SOURCE_UNAVAILABLE)

    if not courses:
        return LoadResult(courses=[], outcome=LoadOutcome.NO_DATA)

    return LoadResult(courses=courses, outcome=LoadOutcome.LOADED)
