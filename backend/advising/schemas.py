"""Pydantic models describing course records and operation outcomes."""
from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.identifiers import normalize_course_number


class CourseModel(BaseModel):
    """A single catalog record. Records are immutable once built."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(..., description="Canonical uppercase course number.")
    title: str = Field(..., description="Course title exactly as it appeared in the source.")
    prerequisites: tuple[str, ...] = Field(
        default=(),
        description="Normalized prerequisite course numbers in source order.",
    )

    @field_validator("number")
    @classmethod
    def normalize_number(cls, value: str) -> str:
        return normalize_course_number(value)

    @field_validator("prerequisites")
    @classmethod
    def normalize_prerequisites(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_course_number(number) for number in value)


class CourseSummary(BaseModel):
    """Course number and title pair emitted by the course listing."""

    number: str
    title: str


class PrerequisiteModel(BaseModel):
    """A prerequisite as displayed alongside a course."""

    number: str = Field(..., description="Canonical number from the catalog, or the stored value when absent.")
    resolved: bool = Field(..., description="Whether the prerequisite exists in the catalog.")


LoadErrorKind = Literal["source_unavailable", "malformed_line", "invalid_field"]


class LoadError(BaseModel):
    """Describes why a catalog load was rejected."""

    kind: LoadErrorKind
    line_number: int | None = Field(
        default=None, description="1-based source line that caused the failure, if any."
    )
    reason: str

    @property
    def message(self) -> str:
        if self.kind == "source_unavailable":
            return f"Could not open file: {self.reason}"
        if self.kind == "malformed_line":
            return f"Parse error on line {self.line_number}: {self.reason}"
        return f"Invalid data on line {self.line_number}: {self.reason}"


class LoadSucceeded(BaseModel):
    """Outcome of a load that replaced the live catalog."""

    status: Literal["loaded"] = Field(default="loaded")
    course_count: int


class LoadFailed(BaseModel):
    """Outcome of a load that left the live catalog untouched."""

    status: Literal["failed"] = Field(default="failed")
    error: LoadError


class EmptyCatalog(BaseModel):
    """Returned by queries issued before any successful load."""

    status: Literal["empty_catalog"] = Field(default="empty_catalog")


class CourseListing(BaseModel):
    """All courses in ascending course number order."""

    status: Literal["ok"] = Field(default="ok")
    courses: list[CourseSummary]


class CourseDetail(BaseModel):
    """Title and prerequisite chain for a single course."""

    status: Literal["found"] = Field(default="found")
    number: str
    title: str
    prerequisites: list[PrerequisiteModel] = Field(default_factory=list)

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)


class CourseNotFound(BaseModel):
    """Returned when the requested course is absent; carries the normalized number."""

    status: Literal["not_found"] = Field(default="not_found")
    number: str


LoadResult = Union[LoadSucceeded, LoadFailed]
ListResult = Union[CourseListing, EmptyCatalog]
DetailResult = Union[CourseDetail, CourseNotFound, EmptyCatalog]
