"""Tests for environment-driven advising settings."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.advising import AdvisingSettings, AdvisingState  # noqa: E402
from backend.advising.schemas import LoadFailed, LoadSucceeded  # noqa: E402

LATIN1_SOURCE = "SPAN101,Introducción al español\n"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CATALOG_PATH", "SOURCE_ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"ABCU_ADVISING_{name}", raising=False)


def test_settings_defaults() -> None:
    settings = AdvisingSettings()

    assert settings.catalog_path is None
    assert settings.source_encoding == "utf-8"
    assert settings.log_level == "WARNING"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ABCU_ADVISING_CATALOG_PATH", "/data/courses.csv")
    monkeypatch.setenv("ABCU_ADVISING_SOURCE_ENCODING", "latin-1")
    monkeypatch.setenv("ABCU_ADVISING_LOG_LEVEL", "DEBUG")

    settings = AdvisingSettings()

    assert settings.catalog_path == "/data/courses.csv"
    assert settings.source_encoding == "latin-1"
    assert settings.log_level == "DEBUG"


def test_source_encoding_is_used_when_reading_files(tmp_path: Path) -> None:
    source = tmp_path / "courses.csv"
    source.write_bytes(LATIN1_SOURCE.encode("latin-1"))

    state = AdvisingState(settings=AdvisingSettings(source_encoding="latin-1"))
    outcome = state.load_catalog_file(source)

    assert isinstance(outcome, LoadSucceeded)
    assert state.catalog.get("span101").title == "Introducción al español"


def test_undecodable_source_is_unavailable(tmp_path: Path) -> None:
    source = tmp_path / "courses.csv"
    source.write_bytes(LATIN1_SOURCE.encode("latin-1"))

    state = AdvisingState(settings=AdvisingSettings(source_encoding="utf-8"))
    outcome = state.load_catalog_file(source)

    assert isinstance(outcome, LoadFailed)
    assert outcome.error.kind == "source_unavailable"
    assert state.catalog.is_empty()


def test_console_entry_point_applies_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    import backend.advising_cli.__main__ as entry_point

    calls: list[dict[str, object]] = []
    monkeypatch.setenv("ABCU_ADVISING_LOG_LEVEL", "debug")
    monkeypatch.setattr(entry_point.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(entry_point, "app", lambda: None)

    entry_point.main()

    assert calls == [{"level": "DEBUG"}]
