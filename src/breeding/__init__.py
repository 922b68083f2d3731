"""Breeding-based scoring for debut and lightly raced horses."""

from src.breeding.engine import (
    breeding_score_display,
    calculate_breeding_score,
    calculate_detailed_breeding_score,
    calculate_weighted_contribution,
)
from src.breeding.errors import BreedingInputError, ReferenceDataError
from src.breeding.extractor import (
    extract_breeding_info,
    format_breeding_display,
    parse_breeding_line,
)
from src.breeding.types import (
    BreedingScore,
    Confidence,
    DetailedBreedingScore,
    HorseEntry,
    RaceHeader,
)
from src.breeding.weighting import (
    calculate_breeding_contribution,
    get_breeding_weight,
    should_show_breeding_analysis,
)

__all__ = [
    "BreedingInputError",
    "BreedingScore",
    "Confidence",
    "DetailedBreedingScore",
    "HorseEntry",
    "RaceHeader",
    "ReferenceDataError",
    "breeding_score_display",
    "calculate_breeding_contribution",
    "calculate_breeding_score",
    "calculate_detailed_breeding_score",
    "calculate_weighted_contribution",
    "extract_breeding_info",
    "format_breeding_display",
    "get_breeding_weight",
    "parse_breeding_line",
    "should_show_breeding_analysis",
]
