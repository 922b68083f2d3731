"""Unit tests for the sire's sire refinement."""

from __future__ import annotations

import pytest

from src.breeding.sires_sire import analyze_sires_sire
from src.breeding.types import Surface


class TestAnalyzeSiresSire:
    """Tests for analyze_sires_sire."""

    def test_unknown(self):
        result = analyze_sires_sire("Nobody Special", "dirt", 6.0)

        assert not result.known
        assert result.adjustment == 0
        assert result.reasoning == 'Unknown sire\'s sire "Nobody Special" - no adjustment'

    def test_strong_fit_on_both(self):
        # A.P. Indy: dirt, route, strong
        result = analyze_sires_sire("A.P. Indy", "dirt", 9.0)

        assert result.known
        assert result.surface_affinity == pytest.approx(1.0)
        assert result.distance_affinity == pytest.approx(1.0)
        assert result.adjustment == 1
        assert result.reasoning == (
            "A.P. Indy (strong influence) | +surface fit (dirt) | "
            "+distance fit (route) | +1 pt adjustment"
        )

    def test_strong_clash_on_both(self):
        # Galileo: turf, route, strong
        result = analyze_sires_sire("Galileo", Surface.DIRT, 6.0)

        assert result.surface_affinity == pytest.approx(-0.5)
        assert result.distance_affinity == pytest.approx(-0.5)
        assert result.adjustment == -1
        assert "surface mismatch" in result.reasoning
        assert "distance mismatch" in result.reasoning
        assert result.reasoning.endswith("-1 pt adjustment")

    def test_single_fit_is_not_enough(self):
        # Mr. Prospector: dirt, versatile distance
        result = analyze_sires_sire("Mr. Prospector", "dirt", 6.0)

        assert result.surface_affinity == pytest.approx(1.0)
        assert result.distance_affinity == 0.0
        assert result.adjustment == 0

    def test_moderate_influence_never_reaches_threshold(self):
        # Candy Ride: dirt, route, moderate -> (0.5 + 0.5) / 2
        result = analyze_sires_sire("Candy Ride", "dirt", 10.0)

        assert result.surface_affinity == pytest.approx(0.5)
        assert result.adjustment == 0

    def test_eight_furlongs_is_not_a_sprint(self):
        # Uncle Mo: dirt, sprint, strong
        result = analyze_sires_sire("Uncle Mo", "dirt", 8.0)

        assert result.distance_affinity == pytest.approx(-0.5)
        assert result.adjustment == 0

    def test_unknown_distance_skips_distance_affinity(self):
        result = analyze_sires_sire("A.P. Indy", "dirt", None)

        assert result.distance_affinity == 0.0
        assert result.adjustment == 0

    def test_to_dict(self):
        data = analyze_sires_sire("A.P. Indy", "dirt", 9.0).to_dict()
        assert data["adjustment"] == 1
        assert data["known"] is True
