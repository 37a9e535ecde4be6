"""Read-only queries over a course catalog."""
from __future__ import annotations

from ..schemas import (
    CourseDetail,
    CourseListing,
    CourseNotFound,
    CourseSummary,
    DetailResult,
    EmptyCatalog,
    ListResult,
    PrerequisiteModel,
)
from ..stores.catalog_store import CourseCatalog
from ..utils.identifiers import normalize_course_number


def list_courses(catalog: CourseCatalog) -> ListResult:
    """Return every course as (number, title) in ascending course number order."""

    if catalog.is_empty():
        return EmptyCatalog()

    courses: list[CourseSummary] = []
    for number in catalog.sorted_numbers():
        course = catalog.get(number)
        if course is not None:
            courses.append(CourseSummary(number=course.number, title=course.title))
    return CourseListing(courses=courses)


def describe_course(catalog: CourseCatalog, raw_number: str) -> DetailResult:
    """Return the title and prerequisite chain for ``raw_number``.

    Prerequisites present in the catalog are displayed with the catalog's
    canonical number; dangling ones keep their stored value.
    """

    if catalog.is_empty():
        return EmptyCatalog()

    number = normalize_course_number(raw_number)
    course = catalog.get(number)
    if course is None:
        return CourseNotFound(number=number)

    prerequisites: list[PrerequisiteModel] = []
    for prerequisite in course.prerequisites:
        resolved = catalog.get(prerequisite)
        if resolved is not None:
            prerequisites.append(PrerequisiteModel(number=resolved.number, resolved=True))
        else:
            prerequisites.append(PrerequisiteModel(number=prerequisite, resolved=False))

    return CourseDetail(number=course.number, title=course.title, prerequisites=prerequisites)
