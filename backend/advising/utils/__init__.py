"""Small helpers shared across the advising package."""

from .identifiers import normalize_course_number

__all__ = ["normalize_course_number"]
