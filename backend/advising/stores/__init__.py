"""Storage layer for the advising catalog."""

from .catalog_store import CourseCatalog

__all__ = ["CourseCatalog"]
