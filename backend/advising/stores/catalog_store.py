"""In-memory course catalog keyed by normalized course number."""
from __future__ import annotations

from typing import Dict, Optional

from ..schemas import CourseModel
from ..utils.identifiers import normalize_course_number


class CourseCatalog:
    """Mapping of canonical course number to course record.

    Sorted output is produced on demand by sorting the keys, so the ordering
    never depends on insertion order.
    """

    def __init__(self) -> None:
        self._courses: Dict[str, CourseModel] = {}

    def upsert(self, course: CourseModel) -> None:
        """Insert the course, replacing any record with the same number."""

        self._courses[normalize_course_number(course.number)] = course

    def get(self, number: str) -> Optional[CourseModel]:
        """Return the course for ``number`` (case-insensitive) if present."""

        return self._courses.get(normalize_course_number(number))

    def contains(self, number: str) -> bool:
        return normalize_course_number(number) in self._courses

    def sorted_numbers(self) -> list[str]:
        """Return every course number in ascending order."""

        return sorted(self._courses)

    def is_empty(self) -> bool:
        return not self._courses

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and self.contains(number)

    def __len__(self) -> int:
        return len(self._courses)
