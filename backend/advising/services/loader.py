"""Parse comma-delimited course sources into a fresh catalog."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from ..schemas import (
    CourseModel,
    LoadError,
    LoadErrorKind,
    LoadFailed,
    LoadResult,
    LoadSucceeded,
)
from ..stores.catalog_store import CourseCatalog
from ..utils.identifiers import normalize_course_number

logger = logging.getLogger(__name__)

DELIMITER = ","

CatalogParseResult = Tuple[Optional[CourseCatalog], LoadResult]


class SourceUnavailableError(RuntimeError):
    """Raised when the catalog source text cannot be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not open file: {path}")
        self.path = path


def read_catalog_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Return the whole contents of ``path`` as a single text buffer."""

    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(str(path)) from exc


def split_fields(line: str) -> list[str]:
    """Split a trimmed line on commas and trim every field.

    A trailing delimiter does not open an extra field, so ``"CSCI100,"``
    yields a single field.
    """

    parts = line.split(DELIMITER)
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return [part.strip() for part in parts]


def parse_catalog(source_text: str) -> CatalogParseResult:
    """Build a scratch catalog from ``source_text``.

    Returns the populated catalog with a success outcome, or ``None`` with the
    first fatal error. Nothing outside the returned catalog is touched.
    """

    scratch = CourseCatalog()

    for line_number, raw_line in enumerate(source_text.split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue

        fields = split_fields(line)
        if len(fields) < 2:
            return None, _fail(
                "malformed_line", line_number, "need at least courseNumber and courseTitle."
            )

        number = normalize_course_number(fields[0])
        title = fields[1]
        if not number or not title:
            return None, _fail("invalid_field", line_number, "empty course number or title.")

        # Empty prerequisite fields are dropped, unlike an empty title.
        prerequisites = [normalize_course_number(field) for field in fields[2:] if field]
        scratch.upsert(CourseModel(number=number, title=title, prerequisites=prerequisites))

    logger.info("Parsed catalog source with %d courses", len(scratch))
    return scratch, LoadSucceeded(course_count=len(scratch))


def source_unavailable(path: str) -> LoadFailed:
    """Build the failure outcome for a source that could not be read."""

    logger.warning("Catalog source unavailable: %s", path)
    return LoadFailed(error=LoadError(kind="source_unavailable", reason=path))


def _fail(kind: LoadErrorKind, line_number: int, reason: str) -> LoadFailed:
    error = LoadError(kind=kind, line_number=line_number, reason=reason)
    logger.warning("Catalog load rejected: %s", error.message)
    return LoadFailed(error=error)
