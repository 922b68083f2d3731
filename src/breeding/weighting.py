"""Experience weighting of the breeding score.

Pedigree counts fully for a debut runner and fades out by exact start
count; from 8 starts on the horse is judged on its own form.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from src.breeding.constants import BREEDING_WEIGHT_BY_STARTS, EXPERIENCED_STARTS_THRESHOLD
from src.breeding.extractor import validate_lifetime_starts
from src.breeding.sires_sire import SiresSireAnalysis
from src.breeding.types import BreedingScore, HorseEntry


def get_breeding_weight(starts: int) -> float:
    """Blend weight for a lifetime start count.

    Raises:
        BreedingInputError: If starts is negative or not a whole number.
    """
    starts = validate_lifetime_starts(starts)
    return BREEDING_WEIGHT_BY_STARTS.get(starts, 0.0)


def weighted_round(total: int, weight: float) -> int:
    """Round total * weight to an integer, halves going up (15 * 0.3 -> 5)."""
    product = Decimal(total) * Decimal(str(weight))
    return int(product.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_breeding_contribution(
    score: BreedingScore,
    starts: int,
    sires_sire: SiresSireAnalysis | None = None,
) -> int:
    """Weighted contribution of a breeding score to an overall rating.

    Rounding happens once, here. A known sire's sire adds its adjustment
    on top; nothing is contributed when the score was not applied.

    Args:
        score: Breeding score for the horse.
        starts: Lifetime starts used to pick the weight.
        sires_sire: Optional grandsire analysis.

    Returns:
        Integer contribution.
    """
    if not score.was_applied:
        return 0

    contribution = weighted_round(score.total, get_breeding_weight(starts))
    if sires_sire is not None and sires_sire.known:
        contribution += sires_sire.adjustment
    return contribution


def should_show_breeding_analysis(horse: HorseEntry) -> bool:
    """True when breeding analysis applies, i.e. fewer than 8 starts."""
    return validate_lifetime_starts(horse.lifetime_starts) < EXPERIENCED_STARTS_THRESHOLD
