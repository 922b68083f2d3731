"""Tier scorers for the sire, dam and damsire roles.

Each scorer looks the individual up in its reference store and returns a
RoleScore. Known individuals start from their base score and may be
adjusted for the race context; the result is clamped to the role ceiling.
Unknown individuals get the fixed baseline and no profile.
"""

from __future__ import annotations

from src.breeding.constants import (
    DAM_MAX_SCORE,
    DAMSIRE_MAX_SCORE,
    DAMSIRE_ROUTE_STAMINA,
    DAMSIRE_SURFACE_MATCH,
    NEUTRAL_COLOR,
    SIRE_DEBUT_UPLIFT,
    SIRE_DISTANCE_MATCH,
    SIRE_MAX_SCORE,
    SIRE_SURFACE_MATCH,
    SIRE_SURFACE_MISMATCH,
    UNKNOWN_DAM_SCORE,
    UNKNOWN_DAMSIRE_SCORE,
    UNKNOWN_SIRE_SCORE,
)
from src.breeding.distance import parse_surface
from src.breeding.reference.store import lookup_dam, lookup_damsire, lookup_sire
from src.breeding.types import (
    DamsireTier,
    DamTier,
    DistanceCategory,
    RoleScore,
    SireTier,
    Surface,
)
from src.common.config import get_settings

_TIER_COLORS = {
    "elite": "#22c55e",
    "strong": "#36d1da",
    "good": "#36d1da",
    "above_average": "#19abb5",
    "average": NEUTRAL_COLOR,
    "below_average": "#ef4444",
}

_SIRE_TIER_LABELS = {
    SireTier.ELITE: "Elite",
    SireTier.STRONG: "Strong",
    SireTier.ABOVE_AVERAGE: "Above Avg",
    SireTier.AVERAGE: "Average",
    SireTier.BELOW_AVERAGE: "Below Avg",
}

_DAM_TIER_LABELS = {
    DamTier.ELITE: "Elite Producer",
    DamTier.GOOD: "Good Producer",
    DamTier.AVERAGE: "Average",
    DamTier.BELOW_AVERAGE: "Below Avg",
}

_DAMSIRE_TIER_LABELS = {
    DamsireTier.ELITE: "Elite BMS",
    DamsireTier.STRONG: "Strong BMS",
    DamsireTier.AVERAGE: "Average BMS",
    DamsireTier.BELOW_AVERAGE: "Below Avg",
}

_OPPOSITE_SURFACE = {Surface.DIRT: Surface.TURF, Surface.TURF: Surface.DIRT}


def _clamp(score: int, ceiling: int) -> int:
    return max(0, min(ceiling, score))


def is_surface_mismatch(preference: Surface, surface: Surface) -> bool:
    """True for a direct dirt/turf clash."""
    return _OPPOSITE_SURFACE.get(preference) is surface


def score_sire(
    name: str | None,
    surface: Surface | str | None = None,
    distance_category: DistanceCategory | None = None,
    is_debut: bool = False,
    debut_fts_threshold: float | None = None,
) -> RoleScore:
    """Score a sire, optionally adjusted for the race context.

    Args:
        name: Sire name as it appears on the race card.
        surface: Race surface.
        distance_category: Race distance category.
        is_debut: Whether the horse is making its first start.
        debut_fts_threshold: First-time-starter win rate (%) needed for the
            debut uplift. Defaults to the configured threshold.

    Returns:
        RoleScore clamped to 0..25.
    """
    profile = lookup_sire(name)
    if profile is None:
        return RoleScore(
            score=UNKNOWN_SIRE_SCORE,
            profile=None,
            reasoning=f'Unknown sire "{name or ""}" - using neutral baseline',
        )

    if debut_fts_threshold is None:
        debut_fts_threshold = get_settings().breeding.debut_sire_fts_threshold

    race_surface = parse_surface(surface)
    preference = profile.surface_preference
    score = profile.base_score
    reasons = [f"{profile.name}: {profile.tier.value} tier (base {profile.base_score})"]

    if preference.is_concrete:
        if preference is race_surface:
            score += SIRE_SURFACE_MATCH
            reasons.append(f"+{SIRE_SURFACE_MATCH} surface fit ({preference.value})")
        elif is_surface_mismatch(preference, race_surface):
            score += SIRE_SURFACE_MISMATCH
            reasons.append(f"{SIRE_SURFACE_MISMATCH} surface mismatch")

    category = profile.distance_preference.category
    if category is not DistanceCategory.VERSATILE and category is distance_category:
        score += SIRE_DISTANCE_MATCH
        reasons.append(f"+{SIRE_DISTANCE_MATCH} distance fit ({category.value})")

    if is_debut and profile.first_time_starter_win_rate >= debut_fts_threshold:
        score += SIRE_DEBUT_UPLIFT
        reasons.append(
            f"+{SIRE_DEBUT_UPLIFT} elite debut sire "
            f"({profile.first_time_starter_win_rate:.1f}% FTS win rate)"
        )

    return RoleScore(
        score=_clamp(score, SIRE_MAX_SCORE),
        profile=profile,
        reasoning="; ".join(reasons),
    )


def score_dam(name: str | None) -> RoleScore:
    """Score a dam from her production record. No race context applies."""
    profile = lookup_dam(name)
    if profile is None:
        return RoleScore(
            score=UNKNOWN_DAM_SCORE,
            profile=None,
            reasoning="Unknown dam - baseline score (most dams not in database)",
        )

    reasons = [
        f"{profile.name}: {profile.tier.value} producer ({profile.base_score} pts)",
        f"{profile.winners}/{profile.foals} winners ({profile.winner_rate * 100:.0f}%)",
    ]
    if profile.stakes_winners_produced > 0:
        reasons.append(f"{profile.stakes_winners_produced} stakes winner(s)")

    return RoleScore(
        score=_clamp(profile.base_score, DAM_MAX_SCORE),
        profile=profile,
        reasoning="; ".join(reasons),
    )


def score_damsire(
    name: str | None,
    surface: Surface | str | None = None,
    distance_category: DistanceCategory | None = None,
    route_stamina_threshold: int | None = None,
) -> RoleScore:
    """Score a broodmare sire.

    Adds +1 when the damsire's surface influence matches the race and +1
    in a route when its stamina influence reaches the threshold.
    """
    profile = lookup_damsire(name)
    if profile is None:
        return RoleScore(
            score=UNKNOWN_DAMSIRE_SCORE,
            profile=None,
            reasoning="Unknown damsire - baseline score",
        )

    if route_stamina_threshold is None:
        route_stamina_threshold = get_settings().breeding.route_stamina_threshold

    race_surface = parse_surface(surface)
    score = profile.base_score
    reasons = [f"{profile.name}: {profile.tier.value} damsire (base {profile.base_score})"]

    if profile.surface_influence.is_concrete and profile.surface_influence is race_surface:
        score += DAMSIRE_SURFACE_MATCH
        reasons.append(f"+{DAMSIRE_SURFACE_MATCH} surface fit")

    is_route = distance_category is DistanceCategory.ROUTE
    if is_route and profile.stamina_influence >= route_stamina_threshold:
        score += DAMSIRE_ROUTE_STAMINA
        reasons.append(f"+{DAMSIRE_ROUTE_STAMINA} stamina for route")

    return RoleScore(
        score=_clamp(score, DAMSIRE_MAX_SCORE),
        profile=profile,
        reasoning="; ".join(reasons),
    )


# ---------------------------------------------------------------------------
# Tier badges
# ---------------------------------------------------------------------------


def sire_tier_label(tier: SireTier) -> str:
    return _SIRE_TIER_LABELS[tier]


def dam_tier_label(tier: DamTier) -> str:
    return _DAM_TIER_LABELS[tier]


def damsire_tier_label(tier: DamsireTier) -> str:
    return _DAMSIRE_TIER_LABELS[tier]


def tier_color(tier: SireTier | DamTier | DamsireTier) -> str:
    """Badge color for a tier of any role."""
    return _TIER_COLORS[tier.value]
