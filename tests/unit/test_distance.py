"""Unit tests for distance and surface parsing."""

from __future__ import annotations

import pytest

from src.breeding.distance import (
    categorize_furlongs,
    parse_distance_category,
    parse_distance_furlongs,
    parse_surface,
)
from src.breeding.types import DistanceCategory, Surface

# ---------------------------------------------------------------------------
# Furlong conversion
# ---------------------------------------------------------------------------


class TestParseDistanceFurlongs:
    """Tests for parse_distance_furlongs."""

    @pytest.mark.parametrize(
        ("descriptor", "expected"),
        [
            ("6f", 6.0),
            ("6 F", 6.0),
            ("5 1/2f", 5.5),
            ("5½f", 5.5),
            ("7 furlongs", 7.0),
            ("1m", 8.0),
            ("1 mile", 8.0),
            ("1 1/8m", 9.0),
            ("1⅛ miles", 9.0),
            ("1 1/16 Miles", 8.5),
            ("1-1/8m", 9.0),
            ("1-1/16 miles", 8.5),
            ("1 - 1/4M", 10.0),
            ("1.5m", 12.0),
        ],
    )
    def test_descriptors(self, descriptor: str, expected: float):
        assert parse_distance_furlongs(descriptor) == pytest.approx(expected)

    def test_miles_and_yards(self):
        assert parse_distance_furlongs("1m70y") == pytest.approx(8 + 70 / 220)

    @pytest.mark.parametrize("descriptor", [None, "", "about a mile", "TBD", "m"])
    def test_unreadable(self, descriptor: str | None):
        assert parse_distance_furlongs(descriptor) is None


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class TestDistanceCategory:
    """Tests for furlong thresholds and descriptor categorization."""

    @pytest.mark.parametrize(
        ("furlongs", "expected"),
        [
            (4.5, DistanceCategory.SPRINT),
            (7.0, DistanceCategory.SPRINT),
            (7.5, DistanceCategory.VERSATILE),
            (8.0, DistanceCategory.VERSATILE),
            (8.5, DistanceCategory.VERSATILE),
            (9.0, DistanceCategory.ROUTE),
            (12.0, DistanceCategory.ROUTE),
        ],
    )
    def test_thresholds(self, furlongs: float, expected: DistanceCategory):
        assert categorize_furlongs(furlongs) is expected

    def test_one_mile_is_versatile(self):
        assert parse_distance_category("1m") is DistanceCategory.VERSATILE

    def test_route(self):
        assert parse_distance_category("1 1/8m") is DistanceCategory.ROUTE

    def test_hyphenated_route(self):
        assert parse_distance_category("1-1/8m") is DistanceCategory.ROUTE
        assert parse_distance_category("1-1/16M") is DistanceCategory.VERSATILE

    def test_sprint(self):
        assert parse_distance_category("6f") is DistanceCategory.SPRINT

    def test_malformed_defaults_to_versatile(self):
        assert parse_distance_category("???") is DistanceCategory.VERSATILE


# ---------------------------------------------------------------------------
# Surfaces
# ---------------------------------------------------------------------------


class TestParseSurface:
    """Tests for parse_surface."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("dirt", Surface.DIRT),
            ("DIRT", Surface.DIRT),
            ("D", Surface.DIRT),
            ("Turf", Surface.TURF),
            ("grass", Surface.TURF),
            ("inner  turf", Surface.TURF),
            ("AW", Surface.SYNTHETIC),
            ("Tapeta", Surface.SYNTHETIC),
            ("synthetic", Surface.SYNTHETIC),
        ],
    )
    def test_aliases(self, value: str, expected: Surface):
        assert parse_surface(value) is expected

    @pytest.mark.parametrize("value", [None, "", "mud", "snow"])
    def test_unknown(self, value: str | None):
        assert parse_surface(value) is Surface.UNKNOWN

    def test_passes_enum_through(self):
        assert parse_surface(Surface.TURF) is Surface.TURF

    def test_concrete_surfaces(self):
        assert Surface.DIRT.is_concrete
        assert Surface.SYNTHETIC.is_concrete
        assert not Surface.VERSATILE.is_concrete
        assert not Surface.UNKNOWN.is_concrete
