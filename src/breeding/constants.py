"""Score ceilings, baselines and thresholds for breeding analysis.

These are fixed properties of the scoring model rather than settings:
changing any of them changes what a breeding score means.
"""

from __future__ import annotations

from types import MappingProxyType

# Horses with this many lifetime starts or more are scored on performance only
EXPERIENCED_STARTS_THRESHOLD = 8

SIRE_MAX_SCORE = 25
DAM_MAX_SCORE = 20
DAMSIRE_MAX_SCORE = 15

ELITE_SIRE_DEBUT_BONUS = 10
SURFACE_FIT_BONUS = 5
DAMSIRE_SURFACE_FIT_BONUS = 3
DISTANCE_FIT_BONUS = 5

TOTAL_MAX_SCORE = 60

# Unknown individuals score as average rather than zero
UNKNOWN_SIRE_SCORE = 5
UNKNOWN_DAM_SCORE = 5
UNKNOWN_DAMSIRE_SCORE = 5

# Per-scorer adjustments
SIRE_SURFACE_MATCH = 2
SIRE_SURFACE_MISMATCH = -2
SIRE_DISTANCE_MATCH = 1
SIRE_DEBUT_UPLIFT = 2
DAMSIRE_SURFACE_MATCH = 1
DAMSIRE_ROUTE_STAMINA = 1

# Furlong boundaries for distance categories (8f is versatile)
SPRINT_MAX_FURLONGS = 7.0
ROUTE_MIN_FURLONGS = 9.0

# Blend weight by exact lifetime start count; 8+ starts weigh nothing
BREEDING_WEIGHT_BY_STARTS: MappingProxyType[int, float] = MappingProxyType(
    {0: 1.0, 1: 0.9, 2: 0.8, 3: 0.7, 4: 0.6, 5: 0.5, 6: 0.4, 7: 0.3}
)

NEUTRAL_COLOR = "#888888"

UNKNOWN_NAME = "Unknown"
