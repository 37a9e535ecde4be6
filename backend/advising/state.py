"""Shared state container owning the live course catalog."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .schemas import DetailResult, ListResult, LoadResult
from .services.loader import (
    SourceUnavailableError,
    parse_catalog,
    read_catalog_source,
    source_unavailable,
)
from .services.queries import describe_course, list_courses
from .settings import AdvisingSettings
from .stores.catalog_store import CourseCatalog

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AdvisingState:
    """Holds the one catalog the CLI queries and swaps it on successful loads."""

    settings: AdvisingSettings = field(default_factory=AdvisingSettings)
    catalog: CourseCatalog = field(default_factory=CourseCatalog)

    def load_catalog(self, source_text: str) -> LoadResult:
        """Parse ``source_text`` and replace the live catalog only on success."""

        scratch, outcome = parse_catalog(source_text)
        if scratch is not None:
            self.catalog = scratch
            logger.info("Replaced live catalog (%d courses)", len(scratch))
        return outcome

    def load_catalog_file(self, path: str | Path) -> LoadResult:
        """Read ``path`` and load it; unreadable files leave the catalog untouched."""

        try:
            source_text = read_catalog_source(path, encoding=self.settings.source_encoding)
        except SourceUnavailableError as exc:
            return source_unavailable(exc.path)
        return self.load_catalog(source_text)

    def list_courses(self) -> ListResult:
        return list_courses(self.catalog)

    def describe_course(self, raw_number: str) -> DetailResult:
        return describe_course(self.catalog, raw_number)
