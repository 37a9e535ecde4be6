"""Tests for listing and describing courses."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.advising import AdvisingState, CourseCatalog  # noqa: E402
from backend.advising.schemas import (  # noqa: E402
    CourseDetail,
    CourseListing,
    CourseModel,
    CourseNotFound,
    CourseSummary,
    EmptyCatalog,
    PrerequisiteModel,
)
from backend.advising.services import describe_course, list_courses  # noqa: E402


@pytest.fixture()
def state() -> AdvisingState:
    """Provide state loaded with a two-course catalog."""

    advising_state = AdvisingState()
    advising_state.load_catalog(
        "CSCI100,Intro to Programming\nCSCI200,Data Structures,CSCI100\n"
    )
    return advising_state


def test_list_courses_returns_sorted_pairs(state: AdvisingState) -> None:
    result = state.list_courses()

    assert isinstance(result, CourseListing)
    assert result.courses == [
        CourseSummary(number="CSCI100", title="Intro to Programming"),
        CourseSummary(number="CSCI200", title="Data Structures"),
    ]


def test_describe_course_resolves_prerequisites(state: AdvisingState) -> None:
    result = state.describe_course("csci200")

    assert isinstance(result, CourseDetail)
    assert result.number == "CSCI200"
    assert result.title == "Data Structures"
    assert result.prerequisites == [PrerequisiteModel(number="CSCI100", resolved=True)]
    assert result.has_prerequisites


def test_describe_course_not_found_carries_normalized_number(state: AdvisingState) -> None:
    result = state.describe_course("  csci999 ")

    assert result == CourseNotFound(number="CSCI999")


def test_describe_course_without_prerequisites(state: AdvisingState) -> None:
    result = state.describe_course("CSCI100")

    assert isinstance(result, CourseDetail)
    assert result.prerequisites == []
    assert not result.has_prerequisites


def test_describe_course_keeps_dangling_prerequisite() -> None:
    catalog = CourseCatalog()
    catalog.upsert(CourseModel(number="CSCI300", title="Algorithms", prerequisites=["CSCI200", "MATH201"]))
    catalog.upsert(CourseModel(number="MATH201", title="Discrete Mathematics"))

    result = describe_course(catalog, "CSCI300")

    assert result.prerequisites == [
        PrerequisiteModel(number="CSCI200", resolved=False),
        PrerequisiteModel(number="MATH201", resolved=True),
    ]


def test_queries_on_empty_catalog_report_empty_catalog() -> None:
    catalog = CourseCatalog()

    assert isinstance(list_courses(catalog), EmptyCatalog)
    assert isinstance(describe_course(catalog, "CSCI100"), EmptyCatalog)


def test_queries_do_not_mutate_catalog(state: AdvisingState) -> None:
    before = state.catalog.sorted_numbers()

    state.list_courses()
    state.describe_course("CSCI200")
    state.describe_course("nope")

    assert state.catalog.sorted_numbers() == before
    assert len(state.catalog) == 2
