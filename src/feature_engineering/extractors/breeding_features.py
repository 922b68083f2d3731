"""Breeding feature extractor.

Scores every entry's pedigree with the breeding engine and adds the total,
its breakdown, confidence, and the experience-weighted contribution as
feature columns. Rows are independent; the same pure engine runs on each.
"""

from __future__ import annotations

from typing import Any

import polars as pl

from src.breeding.engine import analyze_horse_sires_sire, calculate_detailed_breeding_score
from src.breeding.extractor import validate_lifetime_starts
from src.breeding.types import HorseEntry, RaceHeader
from src.breeding.weighting import calculate_breeding_contribution, get_breeding_weight
from src.common.logging import get_logger
from src.feature_engineering.extractors.base import BaseFeatureExtractor

logger = get_logger(__name__)

# Column -> default used when the column is absent
_INPUT_DEFAULTS: dict[str, Any] = {
    "sire": None,
    "dam": None,
    "damsire": None,
    "sires_sire": None,
    "lifetime_starts": 0,
    "surface": "",
    "distance": "",
}


class BreedingFeatureExtractor(BaseFeatureExtractor):
    """Extracts pedigree-based features for lightly raced horses.

    Expected input columns:
        sire, dam, damsire, lifetime_starts, surface, distance
        and optionally sires_sire. Missing columns are treated as unknown
        names, zero starts, or an empty race context.
    """

    _FEATURES = [
        "feat_breeding_total",
        "feat_breeding_sire",
        "feat_breeding_dam",
        "feat_breeding_damsire",
        "feat_breeding_bonus",
        "feat_breeding_confidence",
        "feat_breeding_applied",
        "feat_breeding_weight",
        "feat_breeding_contribution",
    ]

    _INT_FEATURES = {
        "feat_breeding_total",
        "feat_breeding_sire",
        "feat_breeding_dam",
        "feat_breeding_damsire",
        "feat_breeding_bonus",
        "feat_breeding_confidence",
        "feat_breeding_applied",
        "feat_breeding_contribution",
    }

    @property
    def feature_names(self) -> list[str]:
        return self._FEATURES

    def extract(self, df: pl.DataFrame) -> pl.DataFrame:
        """Extract breeding features.

        Args:
            df: DataFrame with one row per horse entry.

        Returns:
            DataFrame with added breeding feature columns.

        Raises:
            BreedingInputError: If any row has an invalid lifetime_starts.
        """
        result = df.clone()

        source = df
        missing = [col for col in _INPUT_DEFAULTS if col not in df.columns]
        if missing:
            source = source.with_columns(
                [pl.lit(_INPUT_DEFAULTS[col]).alias(col) for col in missing]
            )
        source = source.select(list(_INPUT_DEFAULTS))

        columns: dict[str, list[Any]] = {name: [] for name in self._FEATURES}
        for row in source.iter_rows(named=True):
            for name, value in self._score_row(row).items():
                columns[name].append(value)

        result = result.with_columns(
            [
                pl.Series(
                    name,
                    values,
                    dtype=pl.Int64 if name in self._INT_FEATURES else pl.Float64,
                )
                for name, values in columns.items()
            ]
        )

        logger.info(
            "Breeding features extracted",
            rows=result.height,
            applied=int(result["feat_breeding_applied"].sum()),
        )
        return result

    @staticmethod
    def _score_row(row: dict[str, Any]) -> dict[str, Any]:
        horse = HorseEntry.from_mapping(row)
        race = RaceHeader(
            surface=str(row["surface"] or ""),
            distance=str(row["distance"] or ""),
        )

        detailed = calculate_detailed_breeding_score(horse, race)
        score = detailed.score
        starts = validate_lifetime_starts(horse.lifetime_starts)
        contribution = calculate_breeding_contribution(
            score, starts, analyze_horse_sires_sire(horse, race)
        )

        return {
            "feat_breeding_total": score.total,
            "feat_breeding_sire": score.breakdown.sire_score,
            "feat_breeding_dam": score.breakdown.dam_score,
            "feat_breeding_damsire": score.breakdown.damsire_score,
            "feat_breeding_bonus": score.breakdown.bonus_score,
            "feat_breeding_confidence": score.confidence.rank,
            "feat_breeding_applied": int(score.was_applied),
            "feat_breeding_weight": get_breeding_weight(starts),
            "feat_breeding_contribution": contribution,
        }
