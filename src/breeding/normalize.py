"""Name normalization shared by every pedigree reference store.

Two spellings that normalize identically always resolve to the same
profile: lookup keys are uppercase, trimmed, with apostrophe variants
unified and internal whitespace collapsed to single spaces.
"""

from __future__ import annotations

import re

# Curly quotes, modifier letter apostrophe, backtick and acute accent
_APOSTROPHE_VARIANTS = re.compile("[‘’ʼ`´]")

PLACEHOLDER_NAMES = frozenset(
    {
        "",
        "-",
        "--",
        "unknown",
        "n/a",
        "na",
        "unk",
        "unraced",
        "not recorded",
    }
)


def normalize_name(name: str) -> str:
    """Return the lookup key for a horse name.

    Example:
        >>> normalize_name("  medaglia  d’oro ")
        "MEDAGLIA D'ORO"
    """
    unified = _APOSTROPHE_VARIANTS.sub("'", name.upper())
    return " ".join(unified.split())


def is_placeholder_name(name: str | None) -> bool:
    """Check whether a name stands in for missing parentage."""
    if name is None:
        return True
    return " ".join(name.split()).lower() in PLACEHOLDER_NAMES


def clean_display_name(name: str) -> str:
    """Trim and collapse whitespace while keeping the original casing."""
    return " ".join(name.split())
