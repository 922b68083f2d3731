"""Unit tests for name normalization and placeholder detection."""

from __future__ import annotations

import pytest

from src.breeding.normalize import clean_display_name, is_placeholder_name, normalize_name


class TestNormalizeName:
    """Tests for normalize_name."""

    def test_uppercases_and_trims(self):
        assert normalize_name("  into mischief ") == "INTO MISCHIEF"

    def test_collapses_internal_whitespace(self):
        assert normalize_name("Into   Mischief\t") == "INTO MISCHIEF"

    @pytest.mark.parametrize(
        "spelling",
        ["Kitten's Joy", "Kitten’s Joy", "Kitten‘s Joy", "Kittenʼs Joy", "Kitten`s Joy"],
    )
    def test_apostrophe_variants_are_equivalent(self, spelling: str):
        assert normalize_name(spelling) == "KITTEN'S JOY"

    def test_idempotent(self):
        once = normalize_name(" medaglia  d’oro ")
        assert normalize_name(once) == once


class TestPlaceholderNames:
    """Tests for is_placeholder_name."""

    @pytest.mark.parametrize(
        "name",
        [None, "", "   ", "-", "--", "Unknown", "N/A", "na", "UNK", "unraced", "Not  Recorded"],
    )
    def test_placeholders(self, name: str | None):
        assert is_placeholder_name(name)

    @pytest.mark.parametrize("name", ["Tapit", "Unknown Soldier", "N/A Express"])
    def test_real_names(self, name: str):
        assert not is_placeholder_name(name)


class TestCleanDisplayName:
    def test_keeps_casing(self):
        assert clean_display_name("  Medaglia   d'Oro ") == "Medaglia d'Oro"
