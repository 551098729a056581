"""
Scale schema: named size pairs, the configuration of one scale, and the
entries a compiled scale is made of.

All objects are immutable once built.  Order matters everywhere: pairs keep
their definition order and entries keep generation order (base entries
first, cross pairs after).
"""

from __future__ import annotations

from dataclasses import dataclass

from ruler.errors import ConfigurationError

DEFAULT_PREFIX = "space"


@dataclass(frozen=True)
class SizePair:
    """
    A named (minSize, maxSize) pair in pixels.

    ``min_size > max_size`` is accepted here and rejected by the Clamp
    Calculator, so the error surfaces with the calculator's message.
    """

    name: str
    values: tuple[float, float]

    @property
    def min_size(self) -> float:
        return self.values[0]

    @property
    def max_size(self) -> float:
        return self.values[1]


@dataclass(frozen=True)
class ScaleConfig:
    """
    Everything needed to compile one scale.

    Attributes:
        min_width: Viewport width (px) where every pair sits at its minimum.
        max_width: Viewport width (px) where every pair reaches its maximum.
        prefix: Registry key and custom-property prefix (``--<prefix>-<label>``).
        generate_all_cross_pairs: Also derive one entry per unordered pair of pairs.
        pairs: Size pairs in definition order.
    """

    min_width: float
    max_width: float
    prefix: str = DEFAULT_PREFIX
    generate_all_cross_pairs: bool = False
    pairs: tuple[SizePair, ...] = ()

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ConfigurationError("Scale prefix cannot be empty")


@dataclass(frozen=True)
class ScaleEntry:
    """One labelled value of a compiled scale.

    ``rendered`` is either a plain rem length or a ``clamp()`` expression.
    Cross-pair labels are ``"<smaller>-<larger>"``.
    """

    label: str
    rendered: str

    @property
    def is_cross_pair(self) -> bool:
        # A hyphen is the only marker; base names containing "-" look the same.
        return "-" in self.label
