"""Breeding score aggregation.

Entry point of the engine: extracts the breeding record, runs the three
tier scorers and the bonus calculator, then caps the total, rates
confidence by how many pedigree roles were recognized and writes a
summary. Horses with 8 or more starts short-circuit before any lookup.

Every call is pure: identical inputs give identical output.
"""

from __future__ import annotations

from src.breeding.bonuses import calculate_bonuses
from src.breeding.constants import (
    EXPERIENCED_STARTS_THRESHOLD,
    NEUTRAL_COLOR,
    TOTAL_MAX_SCORE,
)
from src.breeding.distance import (
    parse_distance_category,
    parse_distance_furlongs,
    parse_surface,
)
from src.breeding.extractor import extract_breeding_info
from src.breeding.reference.models import DamProfile, DamsireProfile, SireProfile
from src.breeding.scorers import (
    dam_tier_label,
    damsire_tier_label,
    score_dam,
    score_damsire,
    score_sire,
    sire_tier_label,
    tier_color,
)
from src.breeding.sires_sire import SiresSireAnalysis, analyze_sires_sire
from src.breeding.types import (
    BonusResult,
    BreedingBreakdown,
    BreedingDisplay,
    BreedingRecord,
    BreedingScore,
    Confidence,
    DetailedBreedingScore,
    HorseEntry,
    RaceHeader,
    RoleDetails,
    ScoreContext,
    SireTier,
)
from src.breeding.weighting import calculate_breeding_contribution
from src.common.logging import get_logger

logger = get_logger(__name__)

NOT_APPLICABLE_SUMMARY = "Breeding analysis not applicable"
EXPERIENCED_REASON = (
    f"Horse has {EXPERIENCED_STARTS_THRESHOLD}+ starts - "
    "experience data prioritized over breeding"
)

_CONFIDENCE_BY_KNOWN = {
    3: Confidence.HIGH,
    2: Confidence.MEDIUM,
    1: Confidence.LOW,
    0: Confidence.NONE,
}

# (minimum total, label, color, description), highest band first
_DISPLAY_BANDS = (
    (50, "Elite", "#22c55e", "Exceptional breeding profile"),
    (40, "Strong", "#36d1da", "Strong breeding profile"),
    (30, "Above Avg", "#19abb5", "Above average breeding"),
    (20, "Average", NEUTRAL_COLOR, "Average breeding profile"),
)
_LOWEST_DISPLAY = BreedingDisplay("Below Avg", "#ef4444", "Limited breeding support")


def build_score_context(record: BreedingRecord, race: RaceHeader) -> ScoreContext:
    """Build the race context for one horse/race pair."""
    return ScoreContext(
        surface=parse_surface(race.surface),
        distance=race.distance,
        distance_category=parse_distance_category(race.distance),
        is_debut=record.is_debut,
        starts=record.lifetime_starts,
        distance_furlongs=parse_distance_furlongs(race.distance),
    )


def determine_confidence(
    sire_profile: SireProfile | None,
    dam_profile: DamProfile | None,
    damsire_profile: DamsireProfile | None,
) -> Confidence:
    """Rate data availability by the number of recognized individuals."""
    known = sum(p is not None for p in (sire_profile, dam_profile, damsire_profile))
    return _CONFIDENCE_BY_KNOWN[known]


def generate_summary(total: int, sire_profile: SireProfile | None, is_debut: bool) -> str:
    if total >= 50:
        if is_debut and sire_profile is not None and sire_profile.tier is SireTier.ELITE:
            return (
                f"Elite breeding profile: {sire_profile.name} debut runner "
                "with top pedigree support"
            )
        return "Exceptional breeding profile - strong from all angles"
    if total >= 40:
        if sire_profile is not None:
            return f"Strong breeding: {sire_profile.name} progeny with solid pedigree"
        return "Strong breeding profile with good pedigree support"
    if total >= 30:
        return "Above average breeding - positive pedigree factors"
    if total >= 20:
        return "Average breeding profile - standard expectations"
    if total >= 10:
        return "Below average breeding profile"
    return "Limited breeding data available"


def _not_applicable(reason: str) -> DetailedBreedingScore:
    score = BreedingScore(
        total=0,
        breakdown=BreedingBreakdown(),
        confidence=Confidence.NONE,
        summary=NOT_APPLICABLE_SUMMARY,
        was_applied=False,
        not_applied_reason=reason,
    )
    return DetailedBreedingScore(
        score=score,
        sire=RoleDetails(0, None, "N/A", NEUTRAL_COLOR, reason),
        dam=RoleDetails(0, None, None, NEUTRAL_COLOR, reason),
        damsire=RoleDetails(0, None, None, NEUTRAL_COLOR, reason),
        bonuses=BonusResult(),
    )


def calculate_detailed_breeding_score(
    horse: HorseEntry, race: RaceHeader
) -> DetailedBreedingScore:
    """Score a horse's breeding for a race, with per-role detail.

    Args:
        horse: Pedigree and experience snapshot.
        race: Race surface and distance.

    Returns:
        DetailedBreedingScore. For horses with 8+ starts the score is
        not applied and every component is zero.

    Raises:
        BreedingInputError: If the horse's lifetime_starts is invalid.
    """
    record = extract_breeding_info(horse)

    if record.lifetime_starts >= EXPERIENCED_STARTS_THRESHOLD:
        logger.debug(
            "Breeding analysis skipped",
            sire=record.sire,
            starts=record.lifetime_starts,
        )
        return _not_applicable(EXPERIENCED_REASON)

    context = build_score_context(record, race)

    sire = score_sire(
        record.sire,
        surface=context.surface,
        distance_category=context.distance_category,
        is_debut=context.is_debut,
    )
    dam = score_dam(record.dam)
    damsire = score_damsire(
        record.damsire,
        surface=context.surface,
        distance_category=context.distance_category,
    )

    bonuses = calculate_bonuses(sire.profile, damsire.profile, context)

    total = min(TOTAL_MAX_SCORE, sire.score + dam.score + damsire.score + bonuses.total)
    confidence = determine_confidence(sire.profile, dam.profile, damsire.profile)

    score = BreedingScore(
        total=total,
        breakdown=BreedingBreakdown(
            sire_score=sire.score,
            dam_score=dam.score,
            damsire_score=damsire.score,
            bonus_score=bonuses.total,
        ),
        confidence=confidence,
        summary=generate_summary(total, sire.profile, context.is_debut),
        was_applied=True,
    )

    logger.debug(
        "Breeding score calculated",
        sire=record.sire,
        dam=record.dam,
        damsire=record.damsire,
        starts=record.lifetime_starts,
        total=total,
        confidence=confidence.value,
    )

    return DetailedBreedingScore(
        score=score,
        sire=RoleDetails(
            score=sire.score,
            profile=sire.profile,
            tier_label=sire_tier_label(sire.profile.tier) if sire.profile else "Unknown",
            tier_color=tier_color(sire.profile.tier) if sire.profile else NEUTRAL_COLOR,
            reasoning=sire.reasoning,
        ),
        dam=RoleDetails(
            score=dam.score,
            profile=dam.profile,
            tier_label=dam_tier_label(dam.profile.tier) if dam.profile else None,
            tier_color=tier_color(dam.profile.tier) if dam.profile else NEUTRAL_COLOR,
            reasoning=dam.reasoning,
        ),
        damsire=RoleDetails(
            score=damsire.score,
            profile=damsire.profile,
            tier_label=damsire_tier_label(damsire.profile.tier) if damsire.profile else None,
            tier_color=tier_color(damsire.profile.tier) if damsire.profile else NEUTRAL_COLOR,
            reasoning=damsire.reasoning,
        ),
        bonuses=bonuses,
    )


def calculate_breeding_score(horse: HorseEntry, race: RaceHeader) -> BreedingScore:
    """Plain breeding score without per-role detail."""
    return calculate_detailed_breeding_score(horse, race).score


def analyze_horse_sires_sire(horse: HorseEntry, race: RaceHeader) -> SiresSireAnalysis:
    """Grandsire analysis for a horse in a race."""
    record = extract_breeding_info(horse)
    return analyze_sires_sire(
        record.sires_sire,
        race.surface,
        parse_distance_furlongs(race.distance),
    )


def calculate_weighted_contribution(horse: HorseEntry, race: RaceHeader) -> int:
    """Breeding points a horse contributes to an overall rating.

    The capped total is weighted by lifetime starts and the sire's sire
    adjustment is added on top.
    """
    record = extract_breeding_info(horse)
    score = calculate_breeding_score(horse, race)
    return calculate_breeding_contribution(
        score, record.lifetime_starts, analyze_horse_sires_sire(horse, race)
    )


def breeding_score_display(score: DetailedBreedingScore | BreedingScore) -> BreedingDisplay:
    """Label, color and description for a breeding score badge."""
    if not score.was_applied:
        return BreedingDisplay(
            "N/A", NEUTRAL_COLOR, score.not_applied_reason or "Not applicable"
        )
    for minimum, label, color, description in _DISPLAY_BANDS:
        if score.total >= minimum:
            return BreedingDisplay(label, color, description)
    return _LOWEST_DISPLAY
