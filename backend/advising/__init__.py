"""Course catalog core for the ABCU advising assistant."""

from .settings import AdvisingSettings
from .state import AdvisingState
from .stores.catalog_store import CourseCatalog

__all__ = ["AdvisingSettings", "AdvisingState", "CourseCatalog"]
