"""
Utility schema: the parameters of one ``@ruler utility()`` directive and the
rules it expands into.
"""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class UtilityConfig:
    """
    Parameters of a utility directive, as extracted (not yet validated).

    ``None`` for ``generate_all_cross_pairs`` / ``low_specificity`` means
    "inherit the run-level default".

    Attributes:
        selector: Selector pattern the entry label is appended to.
        attribute: Attribute name for ``[attr="label"]`` selectors.
        property: One property name, or several in output order.
        scale: Name (prefix) of a previously registered scale.
        generate_all_cross_pairs: Include cross-pair entries.
        low_specificity: Wrap generated selectors in ``:where()``.
    """

    selector: Optional[str] = None
    attribute: Optional[str] = None
    property: Union[str, tuple[str, ...], None] = None
    scale: Optional[str] = None
    generate_all_cross_pairs: Optional[bool] = None
    low_specificity: Optional[bool] = None

    # The field shadows the builtin inside the class body.
    @builtins.property
    def properties(self) -> tuple[str, ...]:
        """``property`` normalized to a tuple (scalars are wrapped), empty names dropped."""
        if self.property is None:
            return ()
        names = (self.property,) if isinstance(self.property, str) else self.property
        return tuple(name for name in names if name)


@dataclass(frozen=True)
class GeneratedRule:
    """A selector plus its ``(property, value)`` declarations, in output order."""

    selector: str
    declarations: tuple[tuple[str, str], ...]
