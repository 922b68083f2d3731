"""Read-only pedigree reference stores.

Each store is loaded from a versioned YAML table, validated into frozen
profile models, and keyed by normalized name. The cached accessors build
every store once per process; nothing mutates a store afterwards, so
concurrent scoring calls can share them freely.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Generic, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from src.breeding.errors import ReferenceDataError
from src.breeding.normalize import normalize_name
from src.breeding.reference.models import (
    DamProfile,
    DamsireProfile,
    SireProfile,
    SiresSireProfile,
)
from src.common.config import get_settings
from src.common.logging import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound=BaseModel)

SIRES_FILE = "sires.yaml"
DAMS_FILE = "dams.yaml"
DAMSIRES_FILE = "damsires.yaml"
SIRES_SIRES_FILE = "sires_sires.yaml"


class ReferenceStore(Generic[P]):
    """Immutable name-keyed lookup table of pedigree profiles.

    Args:
        role: Pedigree role served by the store (e.g. "sire").
        profiles: Validated profiles; names must be unique once normalized.
        version: Version tag of the source table.

    Raises:
        ReferenceDataError: If two profiles normalize to the same name.
    """

    def __init__(self, role: str, profiles: Iterable[P], version: str = "") -> None:
        entries: dict[str, P] = {}
        for profile in profiles:
            key = normalize_name(profile.name)  # type: ignore[attr-defined]
            if key in entries:
                raise ReferenceDataError(f"Duplicate {role} entry: {key}")
            entries[key] = profile
        self._role = role
        self._version = version
        self._entries: MappingProxyType[str, P] = MappingProxyType(entries)

    @property
    def role(self) -> str:
        return self._role

    @property
    def version(self) -> str:
        return self._version

    def lookup(self, name: str | None) -> P | None:
        """Find a profile by name (case and punctuation insensitive)."""
        if not name:
            return None
        return self._entries.get(normalize_name(name))

    def names(self) -> list[str]:
        return list(self._entries)

    def by_tier(self, tier: Any) -> list[P]:
        return [p for p in self._entries.values() if getattr(p, "tier", None) == tier]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._entries

    def __iter__(self) -> Iterator[P]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(role={self._role!r}, entries={len(self)})"

    @classmethod
    def from_yaml_text(
        cls, role: str, text: str, model: type[P], source: str = "<string>"
    ) -> ReferenceStore[P]:
        """Parse and validate a YAML reference table.

        Expected layout::

            version: "2024.2"
            entries:
              - name: "Into Mischief"
                ...

        Raises:
            ReferenceDataError: If the YAML or any entry is invalid.
        """
        try:
            raw = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ReferenceDataError(f"Invalid YAML in {source}: {e}") from e

        if not isinstance(raw, dict) or not isinstance(raw.get("entries"), list):
            raise ReferenceDataError(f"{source} must contain an 'entries' list")

        try:
            profiles = [model.model_validate(entry) for entry in raw["entries"]]
        except ValidationError as e:
            raise ReferenceDataError(f"Invalid {role} entry in {source}: {e}") from e

        return cls(role, profiles, version=str(raw.get("version", "")))

    @classmethod
    def from_yaml(
        cls, role: str, path: Path | resources.abc.Traversable, model: type[P]
    ) -> ReferenceStore[P]:
        """Load a reference table from a YAML file."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ReferenceDataError(f"Cannot read {role} table {path}: {e}") from e

        store = cls.from_yaml_text(role, text, model, source=str(path))
        logger.info(
            "Reference store loaded",
            role=role,
            entries=len(store),
            version=store.version,
            source=str(path),
        )
        return store


def _data_path(filename: str) -> Path | resources.abc.Traversable:
    """Resolve a reference table from the configured dir or packaged data."""
    data_dir = get_settings().breeding.reference_data_dir
    if data_dir:
        return Path(data_dir) / filename
    return resources.files("src.breeding.reference").joinpath("data", filename)


@lru_cache(maxsize=1)
def get_sire_store() -> ReferenceStore[SireProfile]:
    return ReferenceStore.from_yaml("sire", _data_path(SIRES_FILE), SireProfile)


@lru_cache(maxsize=1)
def get_dam_store() -> ReferenceStore[DamProfile]:
    return ReferenceStore.from_yaml("dam", _data_path(DAMS_FILE), DamProfile)


@lru_cache(maxsize=1)
def get_damsire_store() -> ReferenceStore[DamsireProfile]:
    return ReferenceStore.from_yaml("damsire", _data_path(DAMSIRES_FILE), DamsireProfile)


@lru_cache(maxsize=1)
def get_sires_sire_store() -> ReferenceStore[SiresSireProfile]:
    return ReferenceStore.from_yaml(
        "sires_sire", _data_path(SIRES_SIRES_FILE), SiresSireProfile
    )


def lookup_sire(name: str | None) -> SireProfile | None:
    return get_sire_store().lookup(name)


def lookup_dam(name: str | None) -> DamProfile | None:
    return get_dam_store().lookup(name)


def lookup_damsire(name: str | None) -> DamsireProfile | None:
    return get_damsire_store().lookup(name)


def lookup_sires_sire(name: str | None) -> SiresSireProfile | None:
    return get_sires_sire_store().lookup(name)
