"""Sire's sire (paternal grandsire) refinement.

A known influential grandsire nudges the weighted breeding contribution
by at most one point, and only when its surface and distance leanings
both line up with the race (or both clearly clash).
"""

from __future__ import annotations

from dataclasses import dataclass

from src.breeding.constants import SPRINT_MAX_FURLONGS
from src.breeding.distance import parse_surface
from src.breeding.reference.store import lookup_sires_sire
from src.breeding.scorers import is_surface_mismatch
from src.breeding.types import DistanceCategory, Influence, Surface

_MATCH_AFFINITY = {Influence.STRONG: 1.0, Influence.MODERATE: 0.5}
_MISMATCH_AFFINITY = {Influence.STRONG: -0.5, Influence.MODERATE: -0.25}

POSITIVE_AFFINITY_THRESHOLD = 0.75
NEGATIVE_AFFINITY_THRESHOLD = -0.5


@dataclass(frozen=True)
class SiresSireAnalysis:
    """Affinity of the paternal grandsire for a race."""

    known: bool
    name: str
    surface_affinity: float = 0.0
    distance_affinity: float = 0.0
    adjustment: int = 0
    reasoning: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "known": self.known,
            "name": self.name,
            "surface_affinity": self.surface_affinity,
            "distance_affinity": self.distance_affinity,
            "adjustment": self.adjustment,
            "reasoning": self.reasoning,
        }


def analyze_sires_sire(
    name: str | None,
    surface: Surface | str | None,
    distance_furlongs: float | None,
) -> SiresSireAnalysis:
    """Score the grandsire's fit for the race surface and distance.

    Args:
        name: Sire's sire name.
        surface: Race surface.
        distance_furlongs: Race distance in furlongs; None skips the
            distance affinity.

    Returns:
        SiresSireAnalysis with an adjustment of -1, 0 or +1.
    """
    display_name = name or ""
    profile = lookup_sires_sire(name)
    if profile is None:
        return SiresSireAnalysis(
            known=False,
            name=display_name,
            reasoning=f'Unknown sire\'s sire "{display_name}" - no adjustment',
        )

    race_surface = parse_surface(surface)
    surface_affinity = 0.0
    if profile.surface_preference.is_concrete:
        if profile.surface_preference is race_surface:
            surface_affinity = _MATCH_AFFINITY[profile.influence]
        elif is_surface_mismatch(profile.surface_preference, race_surface):
            surface_affinity = _MISMATCH_AFFINITY[profile.influence]

    distance_affinity = 0.0
    preference = profile.distance_preference
    if distance_furlongs is not None and preference is not DistanceCategory.VERSATILE:
        is_sprint = distance_furlongs <= SPRINT_MAX_FURLONGS
        wanted = DistanceCategory.SPRINT if is_sprint else DistanceCategory.ROUTE
        if preference is wanted:
            distance_affinity = _MATCH_AFFINITY[profile.influence]
        else:
            distance_affinity = _MISMATCH_AFFINITY[profile.influence]

    combined = (surface_affinity + distance_affinity) / 2
    adjustment = 0
    if combined >= POSITIVE_AFFINITY_THRESHOLD:
        adjustment = 1
    elif combined <= NEGATIVE_AFFINITY_THRESHOLD:
        adjustment = -1

    reasons = [f"{display_name} ({profile.influence.value} influence)"]
    if surface_affinity > 0:
        reasons.append(f"+surface fit ({profile.surface_preference.value})")
    elif surface_affinity < 0:
        reasons.append("surface mismatch")
    if distance_affinity > 0:
        reasons.append(f"+distance fit ({preference.value})")
    elif distance_affinity < 0:
        reasons.append("distance mismatch")
    if adjustment:
        reasons.append(f"{adjustment:+d} pt adjustment")

    return SiresSireAnalysis(
        known=True,
        name=display_name,
        surface_affinity=surface_affinity,
        distance_affinity=distance_affinity,
        adjustment=adjustment,
        reasoning=" | ".join(reasons),
    )
