"""Race distance and surface parsing.

Distance descriptors arrive as race-card text ("6f", "5 1/2f", "1m",
"1 1/8m", "1m70y"). They are converted to furlongs (1 mile = 8 furlongs,
1 furlong = 220 yards) and bucketed into a distance category:
7f or less is a sprint, 9f or more a route, anything in between versatile.
"""

from __future__ import annotations

import re

from src.breeding.constants import ROUTE_MIN_FURLONGS, SPRINT_MAX_FURLONGS
from src.breeding.types import DistanceCategory, Surface
from src.common.logging import get_logger

logger = get_logger(__name__)

_FURLONGS_PER_MILE = 8.0
_YARDS_PER_FURLONG = 220.0

_UNICODE_FRACTIONS = {
    "½": " 1/2",
    "¼": " 1/4",
    "¾": " 3/4",
    "⅛": " 1/8",
    "⅜": " 3/8",
    "⅝": " 5/8",
    "⅞": " 7/8",
    "⅓": " 1/3",
    "⅔": " 2/3",
}

_DISTANCE_RE = re.compile(
    r"(?P<whole>\d+(?:\.\d+)?)?"
    # Mixed fractions: "1 1/8m" or "1-1/8m"
    r"(?:(?:\s*-\s*|\s*)(?P<num>\d+)\s*/\s*(?P<den>\d+))?\s*"
    r"(?P<unit>miles?|mi|m|furlongs?|fur|f)(?![a-z])"
    r"(?:\s*(?P<yards>\d+)\s*(?:yards?|yds?|y)(?![a-z]))?",
    re.IGNORECASE,
)

_SURFACE_ALIASES: dict[str, Surface] = {
    "dirt": Surface.DIRT,
    "d": Surface.DIRT,
    "main track": Surface.DIRT,
    "turf": Surface.TURF,
    "t": Surface.TURF,
    "grass": Surface.TURF,
    "inner turf": Surface.TURF,
    "outer turf": Surface.TURF,
    "synthetic": Surface.SYNTHETIC,
    "s": Surface.SYNTHETIC,
    "aw": Surface.SYNTHETIC,
    "a": Surface.SYNTHETIC,
    "all weather": Surface.SYNTHETIC,
    "all-weather": Surface.SYNTHETIC,
    "polytrack": Surface.SYNTHETIC,
    "tapeta": Surface.SYNTHETIC,
    "cushion track": Surface.SYNTHETIC,
    "versatile": Surface.VERSATILE,
}


def parse_distance_furlongs(descriptor: str | None) -> float | None:
    """Convert a distance descriptor to furlongs.

    Args:
        descriptor: Race-card distance text.

    Returns:
        Distance in furlongs, or None when no distance can be read.
    """
    if not descriptor:
        return None

    text = descriptor
    for symbol, replacement in _UNICODE_FRACTIONS.items():
        text = text.replace(symbol, replacement)

    for match in _DISTANCE_RE.finditer(text):
        whole = match.group("whole")
        num = match.group("num")
        den = match.group("den")
        if whole is None and num is None:
            continue

        amount = float(whole) if whole else 0.0
        if num is not None and den is not None and int(den) != 0:
            amount += int(num) / int(den)

        unit = match.group("unit").lower()
        furlongs = amount * _FURLONGS_PER_MILE if unit.startswith("m") else amount

        yards = match.group("yards")
        if yards:
            furlongs += int(yards) / _YARDS_PER_FURLONG

        return furlongs

    return None


def categorize_furlongs(furlongs: float) -> DistanceCategory:
    """Bucket a distance in furlongs into sprint, route or versatile."""
    if furlongs <= SPRINT_MAX_FURLONGS:
        return DistanceCategory.SPRINT
    if furlongs >= ROUTE_MIN_FURLONGS:
        return DistanceCategory.ROUTE
    return DistanceCategory.VERSATILE


def parse_distance_category(descriptor: str | None) -> DistanceCategory:
    """Derive the distance category from a distance descriptor.

    Unreadable descriptors fall back to versatile so no distance bonus
    is awarded rather than the scoring call failing.
    """
    furlongs = parse_distance_furlongs(descriptor)
    if furlongs is None:
        logger.debug("Unparseable distance descriptor", distance=descriptor)
        return DistanceCategory.VERSATILE
    return categorize_furlongs(furlongs)


def parse_surface(value: str | Surface | None) -> Surface:
    """Map race-card surface text onto a Surface."""
    if isinstance(value, Surface):
        return value
    if not value:
        return Surface.UNKNOWN

    key = " ".join(value.lower().split())
    surface = _SURFACE_ALIASES.get(key)
    if surface is None:
        logger.debug("Unrecognized surface", surface=value)
        return Surface.UNKNOWN
    return surface
