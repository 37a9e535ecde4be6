"""Course number normalization shared by the loader, store and queries."""
from __future__ import annotations


def normalize_course_number(raw: str) -> str:
    """Return the canonical form of a course number: trimmed and uppercased."""

    return raw.strip().upper()
