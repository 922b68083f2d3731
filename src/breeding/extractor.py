"""Breeding info extraction.

Turns a horse snapshot into a canonical BreedingRecord and provides the
helpers that go with it: free-text breeding line parsing, display
formatting and experience levels. Missing data never raises here; only a
start count that cannot be valid does.
"""

from __future__ import annotations

import re
from numbers import Integral, Real
from typing import Any

from src.breeding.constants import EXPERIENCED_STARTS_THRESHOLD, UNKNOWN_NAME
from src.breeding.errors import BreedingInputError
from src.breeding.normalize import clean_display_name, is_placeholder_name
from src.breeding.types import (
    BreedingParseResult,
    BreedingRecord,
    ExperienceLevel,
    HorseEntry,
)

_DASHES = re.compile(r"\s*[-–—]+\s*")
_FULL_PATTERN = re.compile(r"^(.+?)\s*-\s*(.+?)(?:,\s*by|\s+by)\s+(.+)$", re.IGNORECASE)
_SIRE_DAM_PATTERN = re.compile(r"^(.+?)\s*-\s*(.+)$")
_PARENTHESIZED = re.compile(r"\(([^)]+)\)")
_BRACKETS = re.compile(r"[()\[\]]")
_LEADING_NUMBER = re.compile(r"^\d+\s*")


def validate_lifetime_starts(value: Any) -> int:
    """Validate a lifetime start count, treating an absent one as a debut.

    Raises:
        BreedingInputError: If the count is negative or not a whole number.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise BreedingInputError(f"lifetime_starts must be an integer, got {value!r}")
    if isinstance(value, Integral):
        starts = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        starts = int(value)
    else:
        raise BreedingInputError(f"lifetime_starts must be an integer, got {value!r}")
    if starts < 0:
        raise BreedingInputError(f"lifetime_starts cannot be negative, got {starts}")
    return starts


def _resolve_name(name: str | None) -> str:
    if name is None:
        return UNKNOWN_NAME
    text = str(name)
    if is_placeholder_name(text):
        return UNKNOWN_NAME
    return clean_display_name(text)


def extract_breeding_info(horse: HorseEntry) -> BreedingRecord:
    """Build the canonical breeding record for a horse.

    Args:
        horse: Horse snapshot; names may be empty or placeholders.

    Returns:
        BreedingRecord with placeholder names replaced by ``Unknown``.

    Raises:
        BreedingInputError: If lifetime_starts is negative or non-integral.
    """
    return BreedingRecord(
        sire=_resolve_name(horse.sire),
        dam=_resolve_name(horse.dam),
        damsire=_resolve_name(horse.damsire),
        lifetime_starts=validate_lifetime_starts(horse.lifetime_starts),
        sires_sire=_resolve_name(horse.sires_sire),
    )


# ---------------------------------------------------------------------------
# Breeding line parsing
# ---------------------------------------------------------------------------


def _clean_name(name: str) -> str:
    name = _BRACKETS.sub("", " ".join(name.split()))
    return _LEADING_NUMBER.sub("", name).strip()


def parse_breeding_line(breeding_line: str | None) -> BreedingParseResult:
    """Parse a race-card breeding line.

    Handles "Horse Name (Sire - Dam, by Damsire)", "Sire - Dam by Damsire",
    "Sire -- Dam" and a bare "Sire".

    Args:
        breeding_line: Raw breeding text.

    Returns:
        Parse result with whichever components could be read.
    """
    original = breeding_line or ""
    if not original.strip():
        return BreedingParseResult(original=original, warnings=("Empty breeding line",))

    trimmed = original.strip()
    paren = _PARENTHESIZED.search(trimmed)
    content = paren.group(1) if paren else trimmed
    normalized = " ".join(_DASHES.sub(" - ", content).split())

    full = _FULL_PATTERN.match(normalized)
    if full:
        return BreedingParseResult(
            original=original,
            sire=_clean_name(full.group(1)),
            dam=_clean_name(full.group(2)),
            damsire=_clean_name(full.group(3)),
            success=True,
        )

    sire_dam = _SIRE_DAM_PATTERN.match(normalized)
    if sire_dam:
        return BreedingParseResult(
            original=original,
            sire=_clean_name(sire_dam.group(1)),
            dam=_clean_name(sire_dam.group(2)),
            success=True,
            warnings=("No damsire found in breeding line",),
        )

    if normalized and "-" not in normalized:
        return BreedingParseResult(
            original=original,
            sire=_clean_name(normalized),
            success=True,
            warnings=("Only sire found in breeding line",),
        )

    return BreedingParseResult(
        original=original,
        warnings=(f'Unable to parse breeding line: "{content}"',),
    )


def horse_from_breeding_line(
    breeding_line: str, lifetime_starts: int | None = None
) -> HorseEntry:
    """Build a HorseEntry from a breeding line and a start count."""
    parsed = parse_breeding_line(breeding_line)
    return HorseEntry(
        sire=parsed.sire,
        dam=parsed.dam,
        damsire=parsed.damsire,
        lifetime_starts=lifetime_starts,
    )


def format_breeding_display(
    sire: str | None, dam: str | None, damsire: str | None
) -> str:
    """Format parentage as "Sire - Dam, by Damsire"."""
    sire_display = _resolve_name(sire)
    dam_display = _resolve_name(dam)
    if damsire and damsire.strip() and not is_placeholder_name(damsire):
        return f"{sire_display} - {dam_display}, by {clean_display_name(damsire)}"
    return f"{sire_display} - {dam_display}"


# ---------------------------------------------------------------------------
# Experience levels
# ---------------------------------------------------------------------------

_EXPERIENCE_LABELS = {
    ExperienceLevel.DEBUT: "First-Time Starter",
    ExperienceLevel.LIGHTLY_RACED: "Lightly Raced",
    ExperienceLevel.EXPERIENCED: "Experienced",
}


def experience_level(lifetime_starts: int) -> ExperienceLevel:
    starts = validate_lifetime_starts(lifetime_starts)
    if starts == 0:
        return ExperienceLevel.DEBUT
    if starts < EXPERIENCED_STARTS_THRESHOLD:
        return ExperienceLevel.LIGHTLY_RACED
    return ExperienceLevel.EXPERIENCED


def experience_label(level: ExperienceLevel) -> str:
    return _EXPERIENCE_LABELS[level]


def experience_description(lifetime_starts: int) -> str:
    """Describe how much race experience a horse has."""
    starts = validate_lifetime_starts(lifetime_starts)
    if starts == 0:
        return "Making career debut - no race experience"
    if starts == 1:
        return "Second lifetime start - limited data"
    if starts <= 3:
        return f"Only {starts} lifetime starts - breeding analysis valuable"
    if starts < EXPERIENCED_STARTS_THRESHOLD:
        return f"{starts} lifetime starts - still developing"
    return f"{starts} lifetime starts - experienced runner"
