"""Shared pytest fixtures for the breeding test suite.

Provides horse entries, race headers, entry DataFrames and a helper for
writing alternate reference tables, used across unit and integration tests.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import polars as pl
import pytest
import structlog
import yaml

from src.breeding.types import HorseEntry, RaceHeader
from src.common.config import get_settings

# ---------------------------------------------------------------------------
# Logging and settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def _stdlib_logging() -> Iterator[None]:
    """Route structlog through stdlib logging so stdout carries only CLI output."""
    structlog.configure(
        processors=[structlog.stdlib.add_log_level, structlog.processors.KeyValueRenderer()],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default settings and packaged reference data."""
    monkeypatch.delenv("BREEDING_REFERENCE_DATA_DIR", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Race headers
# ---------------------------------------------------------------------------


@pytest.fixture
def dirt_sprint() -> RaceHeader:
    return RaceHeader(surface="dirt", distance="6f")


@pytest.fixture
def dirt_route() -> RaceHeader:
    return RaceHeader(surface="dirt", distance="1 1/8m")


@pytest.fixture
def turf_route() -> RaceHeader:
    return RaceHeader(surface="turf", distance="1 1/4m")


# ---------------------------------------------------------------------------
# Horse entries
# ---------------------------------------------------------------------------


@pytest.fixture
def elite_debut() -> HorseEntry:
    """Into Mischief debut runner with unknown dam and damsire."""
    return HorseEntry(sire="Into Mischief", dam="", damsire="", lifetime_starts=0)


@pytest.fixture
def elite_pedigree() -> Callable[[int], HorseEntry]:
    """Factory for a horse with elite sire, dam and damsire."""

    def _make(starts: int) -> HorseEntry:
        return HorseEntry(
            sire="Into Mischief",
            dam="Zenyatta",
            damsire="A.P. Indy",
            lifetime_starts=starts,
        )

    return _make


@pytest.fixture
def unknown_pedigree() -> HorseEntry:
    return HorseEntry(
        sire="Nobody Special",
        dam="Plain Jane",
        damsire="Some Stallion",
        lifetime_starts=1,
    )


# ---------------------------------------------------------------------------
# Entry DataFrames
# ---------------------------------------------------------------------------


@pytest.fixture
def entries_df() -> pl.DataFrame:
    """Race entries in the layout the batch extractor expects."""
    return pl.DataFrame(
        {
            "horse_name": ["Mischief Maker", "Veteran", "Mystery", "Grass Runner"],
            "sire": ["Into Mischief", "Into Mischief", "Nobody Special", "Kitten's Joy"],
            "dam": ["", "Zenyatta", "Plain Jane", "--"],
            "damsire": ["", "A.P. Indy", "Curlin", "unknown"],
            "sires_sire": ["Harlan's Holiday", "", "", "El Prado"],
            "lifetime_starts": [0, 12, 3, 2],
            "surface": ["dirt", "dirt", "dirt", "dirt"],
            "distance": ["6f", "6f", "6f", "6f"],
        }
    )


# ---------------------------------------------------------------------------
# Reference table helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[[str, list[dict[str, Any]]], Path]:
    """Write a reference table YAML under tmp_path and return its path."""

    def _write(filename: str, entries: list[dict[str, Any]], version: str = "test") -> Path:
        path = tmp_path / filename
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"version": version, "entries": entries}, f)
        return path

    return _write


@pytest.fixture
def sire_entry() -> dict[str, Any]:
    """A valid sire table entry."""
    return {
        "name": "Test Sire",
        "tier": "strong",
        "base_score": 16,
        "win_rate": 14.0,
        "win_rate_2yo": 13.0,
        "win_rate_3yo": 15.0,
        "earnings_per_start": 40000,
        "surface_preference": "dirt",
        "distance_preference": {"min_furlongs": 6, "max_furlongs": 9, "category": "versatile"},
        "first_time_starter_win_rate": 12.0,
        "lightly_raced_win_rate": 13.5,
    }
