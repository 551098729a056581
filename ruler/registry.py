"""
Run-scoped scale registry.

One ScaleRegistry lives for exactly one processing run.  It may be seeded
from the run configuration before any stylesheet is visited; seeds are
copied, never aliased, and an in-run ``scale()`` with the same prefix
replaces the seeded entry for the rest of that run.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from ruler.schemas.scale import ScaleConfig, ScaleEntry
from ruler.scale import compile_scale


class ScaleRegistry:
    """Mapping of scale prefix → compiled entries, in generation order."""

    def __init__(self, seed: Optional[Mapping[str, Iterable[ScaleEntry]]] = None) -> None:
        self._scales: dict[str, tuple[ScaleEntry, ...]] = {
            prefix: tuple(entries) for prefix, entries in (seed or {}).items()
        }

    @classmethod
    def from_configs(cls, configs: Mapping[str, ScaleConfig]) -> ScaleRegistry:
        """Compile each seed ScaleConfig and register it under its mapping key."""
        return cls({prefix: compile_scale(config) for prefix, config in configs.items()})

    def register(self, prefix: str, entries: Iterable[ScaleEntry]) -> None:
        """Store *entries* under *prefix*, replacing any earlier definition."""
        self._scales[prefix] = tuple(entries)

    def get(self, name: str) -> Optional[tuple[ScaleEntry, ...]]:
        """Return the entries for *name*, or None if no such scale is registered."""
        return self._scales.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._scales

    def __len__(self) -> int:
        return len(self._scales)

    def names(self) -> list[str]:
        """Registered prefixes, in registration order."""
        return list(self._scales)
