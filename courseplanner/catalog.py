"""
Lookup and ordering over the in-memory course list.

All functions are pure: they take the list owned by the session and never
modify it.

Rules:
- Course numbers are matched case-insensitively, first match in list order wins
- Listing order is a plain ordinal sort on the raw course number
  (so "csci100" sorts after "MATH201")
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from courseplanner.model import Course


def codes_equal(a: str, b: str) -> bool:
    """
    Compare two course numbers ignoring case, character by character.
    """
    if len(a) != len(b):
        return False
    return all(x.lower() == y.lower() for x, y in zip(a, b))


def find_course(courses: Sequence[Course], code: str) -> Optional[Course]:
    """
    Return the first course whose number matches code, or None.
    """
    for c in courses:
        if codes_equal(c.number, code):
            return c
    return None


def sorted_courses(courses: Sequence[Course]) -> List[Course]:
    """
    Return a new list sorted by course number (stable for duplicates).
    """
    return sorted(courses, key=lambda c: c.number)


def resolve_prerequisites(
    courses: Sequence[Course], course: Course
) -> List[Tuple[str, Optional[Course]]]:
    """
    Pair each prerequisite code of course with its record (None if unknown).

    Unknown codes stay in the result so callers can report them in place.
    """
    return [(code, find_course(courses, code)) for code in course.prerequisites]
