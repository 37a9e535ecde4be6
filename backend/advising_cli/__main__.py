"""Console entry point for the advising CLI."""
from __future__ import annotations

import logging

from backend.advising.settings import AdvisingSettings

from .app import app


def main() -> None:
    """Configure logging and execute the Typer application."""

    settings = AdvisingSettings()
    logging.basicConfig(level=settings.log_level.upper())
    app()


if __name__ == "__main__":
    main()
