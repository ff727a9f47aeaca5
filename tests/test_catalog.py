"""
Unit tests for course lookup and ordering.
"""

import unittest

from courseplanner.catalog import codes_equal, find_course, resolve_prerequisites, sorted_courses
from courseplanner.model import Course


def _courses() -> list[Course]:
    return [
        Course("MATH201", "Discrete Mathematics"),
        Course("CSCI300", "Introduction to Algorithms", ["CSCI200", "MATH201"]),
        Course("CSCI200", "Data Structures", ["CSCI101"]),
        Course("CSCI100", "Introduction to Computer Science"),
    ]


class TestCodesEqual(unittest.TestCase):
    def test_ignores_case(self) -> None:
        self.assertTrue(codes_equal("csci101", "CSCI101"))
        self.assertTrue(codes_equal("MaTh201", "mAtH201"))

    def test_length_must_match(self) -> None:
        self.assertFalse(codes_equal("CSCI101", "CSCI1010"))
        self.assertFalse(codes_equal("CSCI101", ""))


class TestFindCourse(unittest.TestCase):
    def test_case_insensitive(self) -> None:
        courses = _courses()
        self.assertIs(find_course(courses, "csci200"), find_course(courses, "CSCI200"))
        self.assertEqual(find_course(courses, "csci200").title, "Data Structures")

    def test_not_found(self) -> None:
        self.assertIsNone(find_course(_courses(), "CSCI999"))
        self.assertIsNone(find_course([], "CSCI100"))

    def test_first_match_wins(self) -> None:
        courses = [Course("CSCI100", "First"), Course("csci100", "Second")]
        found = find_course(courses, "Csci100")
        assert found is not None
        self.assertEqual(found.title, "First")


class TestSortedCourses(unittest.TestCase):
    def test_ascending_by_number(self) -> None:
        numbers = [c.number for c in sorted_courses(_courses())]
        self.assertEqual(numbers, ["CSCI100", "CSCI200", "CSCI300", "MATH201"])

    def test_does_not_mutate_input(self) -> None:
        courses = _courses()
        before = list(courses)
        sorted_courses(courses)
        self.assertEqual(courses, before)

    def test_idempotent(self) -> None:
        once = sorted_courses(_courses())
        twice = sorted_courses(once)
        self.assertEqual(once, twice)

    def test_stable_for_duplicates(self) -> None:
        a = Course("CSCI100", "A")
        b = Course("CSCI100", "B")
        result = sorted_courses([Course("MATH201"), a, b])
        self.assertIs(result[0], a)
        self.assertIs(result[1], b)

    def test_ordinal_not_case_insensitive(self) -> None:
        courses = [Course("csci100"), Course("MATH201"), Course("CSCI300")]
        numbers = [c.number for c in sorted_courses(courses)]
        # uppercase letters sort before lowercase ones
        self.assertEqual(numbers, ["CSCI300", "MATH201", "csci100"])


class TestResolvePrerequisites(unittest.TestCase):
    def test_known_and_unknown_codes_in_order(self) -> None:
        courses = _courses()
        pairs = resolve_prerequisites(courses, Course("CSCI400", "X", ["csci300", "CSCI999", "MATH201"]))

        self.assertEqual([code for code, _ in pairs], ["csci300", "CSCI999", "MATH201"])
        self.assertEqual(pairs[0][1].number, "CSCI300")
        self.assertIsNone(pairs[1][1])
        self.assertEqual(pairs[2][1].number, "MATH201")

    def test_no_prerequisites(self) -> None:
        self.assertEqual(resolve_prerequisites(_courses(), Course("CSCI100")), [])


if __name__ == "__main__":
    unittest.main()
