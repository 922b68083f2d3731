"""Enums and immutable value objects for breeding analysis.

Inputs (HorseEntry, RaceHeader) mirror what the race-card parser hands
over; everything else is produced fresh per scoring call and never
mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from src.breeding.constants import EXPERIENCED_STARTS_THRESHOLD, UNKNOWN_NAME

if TYPE_CHECKING:
    from src.breeding.reference.models import DamProfile, DamsireProfile, SireProfile

    PedigreeProfile = Union[SireProfile, DamProfile, DamsireProfile]


class Surface(str, Enum):
    DIRT = "dirt"
    TURF = "turf"
    SYNTHETIC = "synthetic"
    VERSATILE = "versatile"
    UNKNOWN = "unknown"

    @property
    def is_concrete(self) -> bool:
        """True for an actual racing surface rather than a non-preference."""
        return self in (Surface.DIRT, Surface.TURF, Surface.SYNTHETIC)


class DistanceCategory(str, Enum):
    SPRINT = "sprint"
    ROUTE = "route"
    VERSATILE = "versatile"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    Confidence.HIGH: 3,
    Confidence.MEDIUM: 2,
    Confidence.LOW: 1,
    Confidence.NONE: 0,
}


class ExperienceLevel(str, Enum):
    DEBUT = "debut"
    LIGHTLY_RACED = "lightly_raced"
    EXPERIENCED = "experienced"


class _OrderedTier(str, Enum):
    """Tier enum whose declaration order runs from best to worst."""

    @property
    def rank(self) -> int:
        members = list(type(self))
        return len(members) - members.index(self)

    def _other_rank(self, other: object) -> int:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot order {type(self).__name__} against {type(other).__name__}"
            )
        return other.rank  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        return self.rank >= self._other_rank(other)

    def __gt__(self, other: object) -> bool:
        return self.rank > self._other_rank(other)

    def __le__(self, other: object) -> bool:
        return self.rank <= self._other_rank(other)

    def __lt__(self, other: object) -> bool:
        return self.rank < self._other_rank(other)


class SireTier(_OrderedTier):
    ELITE = "elite"
    STRONG = "strong"
    ABOVE_AVERAGE = "above_average"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"


class DamTier(_OrderedTier):
    ELITE = "elite"
    GOOD = "good"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"


class DamsireTier(_OrderedTier):
    ELITE = "elite"
    STRONG = "strong"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"


class Influence(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HorseEntry:
    """Pedigree and experience snapshot of one horse."""

    sire: str | None = None
    dam: str | None = None
    damsire: str | None = None
    lifetime_starts: int | None = None
    sires_sire: str | None = None
    name: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> HorseEntry:
        """Build an entry from a dict-like row (CSV, DataFrame, JSON).

        Accepts both ``sire`` and ``sire_name`` style keys.
        """

        def _get(*keys: str) -> Any:
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return None

        return cls(
            sire=_get("sire", "sire_name"),
            dam=_get("dam", "dam_name"),
            damsire=_get("damsire", "damsire_name", "dam_sire"),
            lifetime_starts=_get("lifetime_starts", "starts"),
            sires_sire=_get("sires_sire", "sire_of_sire"),
            name=_get("horse_name", "name") or "",
        )


@dataclass(frozen=True)
class RaceHeader:
    """Race context supplied by the caller."""

    surface: str = ""
    distance: str = ""


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BreedingRecord:
    """Canonical breeding record; placeholder names become ``Unknown``."""

    sire: str
    dam: str
    damsire: str
    lifetime_starts: int
    sires_sire: str = UNKNOWN_NAME

    @property
    def is_debut(self) -> bool:
        return self.lifetime_starts == 0

    @property
    def is_lightly_raced(self) -> bool:
        return self.lifetime_starts < EXPERIENCED_STARTS_THRESHOLD

    @property
    def is_complete(self) -> bool:
        return UNKNOWN_NAME not in (self.sire, self.dam, self.damsire)


@dataclass(frozen=True)
class BreedingParseResult:
    """Outcome of parsing a free-text breeding line."""

    original: str
    sire: str | None = None
    dam: str | None = None
    damsire: str | None = None
    success: bool = False
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoreContext:
    """Race context as seen by the scorers and bonus calculator."""

    surface: Surface
    distance: str
    distance_category: DistanceCategory
    is_debut: bool
    starts: int
    distance_furlongs: float | None = None


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RoleScore:
    """Output of a single tier scorer."""

    score: int
    profile: PedigreeProfile | None
    reasoning: str

    @property
    def is_known(self) -> bool:
        return self.profile is not None


@dataclass(frozen=True)
class BonusResult:
    """Contextual bonuses; reasons keep the order they were awarded in."""

    elite_sire_debut: int = 0
    surface_fit: int = 0
    distance_fit: int = 0
    reasons: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return self.elite_sire_debut + self.surface_fit + self.distance_fit

    def to_dict(self) -> dict[str, Any]:
        return {
            "elite_sire_debut": self.elite_sire_debut,
            "surface_fit": self.surface_fit,
            "distance_fit": self.distance_fit,
            "total": self.total,
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class BreedingBreakdown:
    sire_score: int = 0
    dam_score: int = 0
    damsire_score: int = 0
    bonus_score: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "sire_score": self.sire_score,
            "dam_score": self.dam_score,
            "damsire_score": self.damsire_score,
            "bonus_score": self.bonus_score,
        }


@dataclass(frozen=True)
class BreedingScore:
    """Breeding score for one horse in one race."""

    total: int
    breakdown: BreedingBreakdown
    confidence: Confidence
    summary: str
    was_applied: bool
    not_applied_reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "breakdown": self.breakdown.to_dict(),
            "confidence": self.confidence.value,
            "summary": self.summary,
            "was_applied": self.was_applied,
            "not_applied_reason": self.not_applied_reason,
        }


@dataclass(frozen=True)
class RoleDetails:
    """Per-role detail used by presentation layers."""

    score: int
    profile: PedigreeProfile | None
    tier_label: str | None
    tier_color: str
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "profile": self.profile.model_dump(mode="json") if self.profile else None,
            "tier_label": self.tier_label,
            "tier_color": self.tier_color,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class DetailedBreedingScore:
    """Superset of BreedingScore with profiles, tier badges and bonus reasons."""

    score: BreedingScore
    sire: RoleDetails
    dam: RoleDetails
    damsire: RoleDetails
    bonuses: BonusResult = field(default_factory=BonusResult)

    @property
    def total(self) -> int:
        return self.score.total

    @property
    def was_applied(self) -> bool:
        return self.score.was_applied

    @property
    def confidence(self) -> Confidence:
        return self.score.confidence

    @property
    def summary(self) -> str:
        return self.score.summary

    @property
    def not_applied_reason(self) -> str | None:
        return self.score.not_applied_reason

    def to_dict(self) -> dict[str, Any]:
        result = self.score.to_dict()
        result.update(
            {
                "sire_details": self.sire.to_dict(),
                "dam_details": self.dam.to_dict(),
                "damsire_details": self.damsire.to_dict(),
                "bonuses": self.bonuses.to_dict(),
            }
        )
        return result


@dataclass(frozen=True)
class BreedingDisplay:
    label: str
    color: str
    description: str
