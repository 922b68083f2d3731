"""Contextual bonus calculator.

Bonuses are evaluated in a fixed order (elite sire debut, surface fit,
distance fit) and each one that triggers appends its reason in that order.
"""

from __future__ import annotations

from src.breeding.constants import (
    DAMSIRE_SURFACE_FIT_BONUS,
    DISTANCE_FIT_BONUS,
    ELITE_SIRE_DEBUT_BONUS,
    SURFACE_FIT_BONUS,
)
from src.breeding.reference.models import DamsireProfile, SireProfile
from src.breeding.types import BonusResult, DistanceCategory, ScoreContext, SireTier


def calculate_bonuses(
    sire_profile: SireProfile | None,
    damsire_profile: DamsireProfile | None,
    context: ScoreContext,
) -> BonusResult:
    """Compute the contextual bonuses for a horse in a race.

    Args:
        sire_profile: Known sire profile, or None.
        damsire_profile: Known damsire profile, or None. Only consulted for
            the reduced surface bonus when the sire is unknown.
        context: Race context.

    Returns:
        BonusResult with per-bonus points and ordered reasons.
    """
    reasons: list[str] = []
    elite_sire_debut = 0
    surface_fit = 0
    distance_fit = 0
    surface = context.surface

    # Hard tier gate: strong sires earn nothing here
    if context.is_debut and sire_profile is not None and sire_profile.tier is SireTier.ELITE:
        elite_sire_debut = ELITE_SIRE_DEBUT_BONUS
        reasons.append(
            f"+{ELITE_SIRE_DEBUT_BONUS} elite sire debut "
            f"({sire_profile.name} first-time starter)"
        )

    if sire_profile is not None:
        preference = sire_profile.surface_preference
        if preference.is_concrete and preference is surface:
            surface_fit = SURFACE_FIT_BONUS
            reasons.append(
                f"+{SURFACE_FIT_BONUS} surface fit "
                f"({sire_profile.name} {preference.value} specialist on {surface.value})"
            )
    elif damsire_profile is not None:
        influence = damsire_profile.surface_influence
        if influence.is_concrete and influence is surface:
            surface_fit = DAMSIRE_SURFACE_FIT_BONUS
            reasons.append(f"+{DAMSIRE_SURFACE_FIT_BONUS} damsire surface influence")

    if sire_profile is not None:
        category = sire_profile.distance_preference.category
        if category is not DistanceCategory.VERSATILE and category is context.distance_category:
            distance_fit = DISTANCE_FIT_BONUS
            reasons.append(
                f"+{DISTANCE_FIT_BONUS} distance fit "
                f"({sire_profile.name} {category.value} specialist)"
            )

    return BonusResult(
        elite_sire_debut=elite_sire_debut,
        surface_fit=surface_fit,
        distance_fit=distance_fit,
        reasons=tuple(reasons),
    )
