"""Pydantic models for pedigree reference profiles.

Profiles are frozen once loaded. Each tier owns a score band, and a
profile whose base score falls outside its tier's band is rejected at
load time so tier gating and score bands can never disagree.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.breeding.constants import DAM_MAX_SCORE, DAMSIRE_MAX_SCORE, SIRE_MAX_SCORE
from src.breeding.types import (
    DamsireTier,
    DamTier,
    DistanceCategory,
    Influence,
    SireTier,
    Surface,
)

SIRE_TIER_BANDS: MappingProxyType[SireTier, tuple[int, int]] = MappingProxyType(
    {
        SireTier.ELITE: (20, 25),
        SireTier.STRONG: (15, 19),
        SireTier.ABOVE_AVERAGE: (10, 14),
        SireTier.AVERAGE: (5, 9),
        SireTier.BELOW_AVERAGE: (0, 4),
    }
)

DAM_TIER_BANDS: MappingProxyType[DamTier, tuple[int, int]] = MappingProxyType(
    {
        DamTier.ELITE: (16, 20),
        DamTier.GOOD: (11, 15),
        DamTier.AVERAGE: (6, 10),
        DamTier.BELOW_AVERAGE: (0, 5),
    }
)

DAMSIRE_TIER_BANDS: MappingProxyType[DamsireTier, tuple[int, int]] = MappingProxyType(
    {
        DamsireTier.ELITE: (12, 15),
        DamsireTier.STRONG: (8, 11),
        DamsireTier.AVERAGE: (4, 7),
        DamsireTier.BELOW_AVERAGE: (0, 3),
    }
)


def _check_band(name: str, tier: Any, base_score: int, bands: Any) -> None:
    low, high = bands[tier]
    if not low <= base_score <= high:
        raise ValueError(
            f"{name}: base_score {base_score} outside {tier.value} band {low}-{high}"
        )


class _Profile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    notes: str = ""


class DistancePreference(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    min_furlongs: float = Field(gt=0)
    max_furlongs: float = Field(gt=0)
    category: DistanceCategory

    @model_validator(mode="after")
    def _check_range(self) -> DistancePreference:
        if self.min_furlongs > self.max_furlongs:
            raise ValueError("min_furlongs must not exceed max_furlongs")
        return self


class SireProfile(_Profile):
    """Sire statistics from progeny performance."""

    tier: SireTier
    base_score: int = Field(ge=0, le=SIRE_MAX_SCORE)
    win_rate: float = Field(ge=0, le=100)
    win_rate_2yo: float = Field(ge=0, le=100)
    win_rate_3yo: float = Field(ge=0, le=100)
    earnings_per_start: float = Field(ge=0)
    surface_preference: Surface
    distance_preference: DistancePreference
    first_time_starter_win_rate: float = Field(ge=0, le=100)
    lightly_raced_win_rate: float = Field(ge=0, le=100)
    first_crop_year: int | None = None
    notable_offspring: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_tier_band(self) -> SireProfile:
        _check_band(self.name, self.tier, self.base_score, SIRE_TIER_BANDS)
        return self


class DamProfile(_Profile):
    """Broodmare production record."""

    tier: DamTier
    base_score: int = Field(ge=0, le=DAM_MAX_SCORE)
    producer_quality: int = Field(ge=0, le=100)
    offspring_win_rate: float = Field(ge=0, le=100)
    foals_produced: int = Field(ge=0)
    stakes_winners_produced: int = Field(ge=0)
    foals: int = Field(ge=0)
    winners: int = Field(ge=0)
    winner_rate: float = Field(ge=0, le=1)
    graded_stakes_winners: int = Field(ge=0)
    notable_offspring: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_tier_band(self) -> DamProfile:
        _check_band(self.name, self.tier, self.base_score, DAM_TIER_BANDS)
        if self.winners > self.foals:
            raise ValueError(f"{self.name}: more winners than foals")
        return self


class DamsireProfile(_Profile):
    """Broodmare sire influence through daughters."""

    tier: DamsireTier
    base_score: int = Field(ge=0, le=DAMSIRE_MAX_SCORE)
    broodmare_sire_index: float = Field(ge=0)
    surface_influence: Surface
    stamina_influence: int = Field(ge=0, le=100)
    notable_through_daughters: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_tier_band(self) -> DamsireProfile:
        _check_band(self.name, self.tier, self.base_score, DAMSIRE_TIER_BANDS)
        return self


class SiresSireProfile(_Profile):
    """Paternal grandsire influence."""

    surface_preference: Surface
    distance_preference: DistanceCategory
    influence: Influence
