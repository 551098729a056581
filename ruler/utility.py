"""
Utility Expander — resolves a registered scale and generates one rule per entry.

Selector construction is driven by an explicit SelectorKind:

  ATTRIBUTE       ``[attr="label"]``, optionally appended to the selector;
                  the value indirects through ``var(--<scale>-<label>)``
  PARENT_CONTEXT  selector ends with `` &``: ``.container &-label``
  PATTERN         class / id / element / ``&.``-nested: ``<selector>-<label>``

Low specificity wraps the part that carries the label in ``:where()``.  For
PARENT_CONTEXT only the ``&-label`` part is wrapped, so the parent keeps its
specificity.  PATTERN and PARENT_CONTEXT use the entry's rendered value
directly.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from ruler.config import RulerConfig
from ruler.errors import ConfigurationError
from ruler.registry import ScaleRegistry
from ruler.scale import custom_property_name
from ruler.schemas.scale import ScaleEntry
from ruler.schemas.utility import GeneratedRule, UtilityConfig

logger = logging.getLogger(__name__)

_ATTRIBUTE_NAME = re.compile(r"[a-zA-Z0-9_-]+")
_PARENT_SUFFIX = " &"


class SelectorKind(str, Enum):
    ATTRIBUTE = "attribute"
    PARENT_CONTEXT = "parent_context"
    PATTERN = "pattern"


def validate_utility(config: UtilityConfig, registry: ScaleRegistry) -> tuple[ScaleEntry, ...]:
    """
    Check a utility config and return the entries of the scale it references.

    Checks run in a fixed order and the first failure wins.

    Raises
    ------
    ConfigurationError
        Empty or malformed attribute, neither selector nor attribute,
        missing property, missing scale, or scale not registered.
    """
    if config.attribute is not None:
        if config.attribute == "":
            raise ConfigurationError("@ruler utility() attribute parameter cannot be empty")
        if not _ATTRIBUTE_NAME.fullmatch(config.attribute):
            raise ConfigurationError(
                "@ruler utility() attribute parameter must contain only letters, "
                "numbers, hyphens, and underscores"
            )
    if not config.selector and not config.attribute:
        raise ConfigurationError(
            '@ruler utility() requires either "selector" or "attribute" parameter'
        )
    if not config.properties:
        raise ConfigurationError('@ruler utility() requires a "property" parameter')
    if not config.scale:
        raise ConfigurationError('@ruler utility() requires a "scale" parameter')

    entries = registry.get(config.scale)
    if entries is None:
        raise ConfigurationError(
            f'Scale "{config.scale}" not found. Define it with @ruler scale() first.'
        )
    return entries


def classify_selector(config: UtilityConfig) -> SelectorKind:
    if config.attribute:
        return SelectorKind.ATTRIBUTE
    if config.selector and config.selector.endswith(_PARENT_SUFFIX):
        return SelectorKind.PARENT_CONTEXT
    return SelectorKind.PATTERN


def _where(selector: str, low_specificity: bool) -> str:
    return f":where({selector})" if low_specificity else selector


def render_selector(
    kind: SelectorKind,
    config: UtilityConfig,
    label: str,
    low_specificity: bool,
) -> str:
    """Build the final selector for one scale entry."""
    selector = config.selector or ""
    match kind:
        case SelectorKind.ATTRIBUTE:
            return _where(f'{selector}[{config.attribute}="{label}"]', low_specificity)
        case SelectorKind.PARENT_CONTEXT:
            parent = selector[:-1]  # drop the trailing "&"
            return parent + _where(f"&-{label}", low_specificity)
        case SelectorKind.PATTERN:
            return _where(f"{selector}-{label}", low_specificity)


def render_value(kind: SelectorKind, config: UtilityConfig, entry: ScaleEntry) -> str:
    if kind == SelectorKind.ATTRIBUTE:
        return f"var({custom_property_name(config.scale or '', entry.label)})"
    return entry.rendered


def expand_utility(
    config: UtilityConfig,
    registry: ScaleRegistry,
    defaults: RulerConfig,
) -> list[GeneratedRule]:
    """
    Expand a utility directive into rules, one per selected scale entry.

    Parameters
    ----------
    config:
        Extracted utility parameters.
    registry:
        The run's scale registry.
    defaults:
        Run-level configuration supplying ``low_specificity`` and
        ``generate_all_cross_pairs`` when the directive leaves them unset.

    Returns
    -------
    list[GeneratedRule]
        Rules in scale-entry order, each declaring every property in order.
    """
    entries = validate_utility(config, registry)

    low_specificity = (
        defaults.low_specificity if config.low_specificity is None else config.low_specificity
    )
    cross_pairs = (
        defaults.generate_all_cross_pairs
        if config.generate_all_cross_pairs is None
        else config.generate_all_cross_pairs
    )
    if not cross_pairs:
        entries = tuple(entry for entry in entries if not entry.is_cross_pair)

    kind = classify_selector(config)
    rules = [
        GeneratedRule(
            selector=render_selector(kind, config, entry.label, low_specificity),
            declarations=tuple(
                (prop, render_value(kind, config, entry)) for prop in config.properties
            ),
        )
        for entry in entries
    ]
    logger.debug(
        "Expanded utility on scale %r (%s selector): %d rules",
        config.scale,
        kind.value,
        len(rules),
    )
    return rules
