"""Unit tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.common.config import (
    AppSettings,
    BreedingConfig,
    Environment,
    _deep_merge,
    _resolve_env_vars,
    get_settings,
)


class TestGetSettings:
    """Tests for get_settings and YAML/env layering."""

    def test_defaults_from_base_yaml(self):
        settings = get_settings()

        assert settings.environment is Environment.DEV
        assert settings.breeding.reference_data_dir == ""
        assert settings.breeding.debut_sire_fts_threshold == pytest.approx(13.0)
        assert settings.breeding.route_stamina_threshold == 70

    def test_dev_yaml_overrides_logging(self):
        settings = get_settings()

        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "text"

    def test_prod_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ENVIRONMENT", "prod")
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.environment is Environment.PROD
        assert settings.logging.format == "json"

    def test_env_var_placeholder_resolved(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BREEDING_REFERENCE_DATA_DIR", "/srv/pedigree")
        get_settings.cache_clear()

        assert get_settings().breeding.reference_data_dir == "/srv/pedigree"

    def test_nested_env_var_wins_over_yaml(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BREEDING__ROUTE_STAMINA_THRESHOLD", "65")
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.breeding.route_stamina_threshold == 65
        assert settings.breeding.debut_sire_fts_threshold == pytest.approx(13.0)

    def test_cached(self):
        assert get_settings() is get_settings()


class TestValidation:
    def test_threshold_range(self):
        with pytest.raises(ValidationError):
            BreedingConfig(debut_sire_fts_threshold=120.0)

    def test_log_format(self):
        with pytest.raises(ValidationError):
            AppSettings(logging={"format": "xml"})


class TestHelpers:
    """Tests for config merge and placeholder helpers."""

    def test_deep_merge(self):
        merged = _deep_merge(
            {"breeding": {"route_stamina_threshold": 70, "reference_data_dir": ""}},
            {"breeding": {"route_stamina_threshold": 60}},
        )
        assert merged == {"breeding": {"route_stamina_threshold": 60, "reference_data_dir": ""}}

    def test_unresolved_placeholder_dropped(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("MISSING_VAR", raising=False)
        assert _resolve_env_vars({"a": "${MISSING_VAR}", "b": 1}) == {"b": 1}

    def test_placeholder_resolved(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DATA_ROOT", "/data")
        assert _resolve_env_vars({"x": {"dir": "${DATA_ROOT}/pedigree"}}) == {
            "x": {"dir": "/data/pedigree"}
        }
