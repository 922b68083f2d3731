"""Errors raised by breeding analysis.

Data-quality gaps (missing names, unknown horses, odd distances) are
absorbed by the engine; only caller contract violations and broken
reference data raise.
"""

from __future__ import annotations


class BreedingInputError(ValueError):
    """Caller passed input that indicates an upstream bug."""


class ReferenceDataError(RuntimeError):
    """A pedigree reference table is missing or malformed."""
