"""Service layer for loading and querying the course catalog."""

from .loader import (
    CatalogParseResult,
    SourceUnavailableError,
    parse_catalog,
    read_catalog_source,
    source_unavailable,
)
from .queries import describe_course, list_courses

__all__ = [
    "CatalogParseResult",
    "SourceUnavailableError",
    "parse_catalog",
    "read_catalog_source",
    "source_unavailable",
    "describe_course",
    "list_courses",
]
