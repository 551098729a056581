"""
Scale Compiler — expands a ScaleConfig into an ordered list of ScaleEntries.

Base entries come first, one per pair in definition order.  With cross pairs
enabled, one extra entry follows for every unordered pair of distinct pairs
(i < j in definition order), spanning from the smaller pair's minimum to the
larger pair's maximum, where "smaller" is the pair with the lower minimum
(definition order breaks ties).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import combinations

from ruler.clamp import calculate_clamp
from ruler.schemas.scale import ScaleConfig, ScaleEntry, SizePair

logger = logging.getLogger(__name__)


def generate_clamps(
    pairs: Sequence[SizePair],
    min_width: float,
    max_width: float,
    generate_all_cross_pairs: bool,
) -> list[ScaleEntry]:
    """Compute base entries, then (optionally) the C(n, 2) cross-pair entries."""
    entries = [
        ScaleEntry(
            label=pair.name,
            rendered=calculate_clamp(pair.min_size, pair.max_size, min_width, max_width),
        )
        for pair in pairs
    ]

    if generate_all_cross_pairs:
        for first, second in combinations(pairs, 2):
            smaller, larger = sorted((first, second), key=lambda p: p.min_size)
            entries.append(
                ScaleEntry(
                    label=f"{smaller.name}-{larger.name}",
                    rendered=calculate_clamp(
                        smaller.min_size, larger.max_size, min_width, max_width
                    ),
                )
            )

    return entries


def compile_scale(config: ScaleConfig) -> tuple[ScaleEntry, ...]:
    """Compile every entry of *config*; raises RangeError on an inverted pair or width."""
    entries = generate_clamps(
        config.pairs,
        config.min_width,
        config.max_width,
        config.generate_all_cross_pairs,
    )
    logger.debug("Compiled scale %r: %d entries", config.prefix, len(entries))
    return tuple(entries)


def custom_property_name(prefix: str, label: str) -> str:
    """``--<prefix>-<label>``: the custom property a scale entry is published under."""
    return f"--{prefix}-{label}"
