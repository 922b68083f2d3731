"""Pedigree reference stores for sires, dams, damsires and sire's sires."""

from src.breeding.reference.models import (
    DAM_TIER_BANDS,
    DAMSIRE_TIER_BANDS,
    SIRE_TIER_BANDS,
    DamProfile,
    DamsireProfile,
    DistancePreference,
    SireProfile,
    SiresSireProfile,
)
from src.breeding.reference.store import (
    ReferenceStore,
    get_dam_store,
    get_damsire_store,
    get_sire_store,
    get_sires_sire_store,
    lookup_dam,
    lookup_damsire,
    lookup_sire,
    lookup_sires_sire,
)

__all__ = [
    "DAM_TIER_BANDS",
    "DAMSIRE_TIER_BANDS",
    "SIRE_TIER_BANDS",
    "DamProfile",
    "DamsireProfile",
    "DistancePreference",
    "ReferenceStore",
    "SireProfile",
    "SiresSireProfile",
    "get_dam_store",
    "get_damsire_store",
    "get_sire_store",
    "get_sires_sire_store",
    "lookup_dam",
    "lookup_damsire",
    "lookup_sire",
    "lookup_sires_sire",
]
