"""
Run-level configuration: viewport defaults, directive flag defaults, and
scales pre-seeded into the registry before any stylesheet is processed.

Defaults live in ``data/defaults.yaml`` and are loaded once at import time.
User configuration arrives either as a mapping (``RulerConfig.from_mapping``)
or as a YAML file (``load_config``).  Both accept the camelCase option names
used by the directives as well as the snake_case field names; unknown keys
are ignored.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from ruler.errors import ConfigurationError
from ruler.schemas.scale import ScaleConfig, SizePair

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

# camelCase option name -> RulerConfig field
_OPTION_FIELDS: dict[str, str] = {
    "minWidth": "min_width",
    "maxWidth": "max_width",
    "generateAllCrossPairs": "generate_all_cross_pairs",
    "lowSpecificity": "low_specificity",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Ruler config file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return cast(dict[str, Any], data)


_DEFAULTS: dict[str, Any] = _load_yaml(_DATA_DIR / "defaults.yaml")


def _normalize_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    """Translate camelCase option names to field names, dropping unknown keys."""
    known = set(_OPTION_FIELDS.values()) | {"scales"}
    result: dict[str, Any] = {}
    for key, value in options.items():
        name = _OPTION_FIELDS.get(key, key)
        if name in known:
            result[name] = value
    return result


def _as_number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"Config option {key!r} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"Config option {key!r} must be finite, got {value!r}")
    return value


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"Config option {key!r} must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class RulerConfig:
    """
    Configuration consumed once at the start of a run.

    Attributes:
        min_width: Default viewport minimum (px) for scales and inline calls.
        max_width: Default viewport maximum (px) for scales and inline calls.
        generate_all_cross_pairs: Default for the directives' flag of the same name.
        low_specificity: Default for utility directives' ``lowSpecificity``.
        scales: Scales to pre-seed into every run's registry, keyed by prefix.
    """

    min_width: float = _DEFAULTS["minWidth"]
    max_width: float = _DEFAULTS["maxWidth"]
    generate_all_cross_pairs: bool = _DEFAULTS["generateAllCrossPairs"]
    low_specificity: bool = _DEFAULTS["lowSpecificity"]
    scales: MappingProxyType[str, ScaleConfig] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Callers may hand in a plain dict; freeze it.
        if not isinstance(self.scales, MappingProxyType):
            object.__setattr__(self, "scales", MappingProxyType(dict(self.scales)))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> RulerConfig:
        """Build a config from user options layered over the packaged defaults."""
        merged = _normalize_keys(_DEFAULTS)
        merged.update(_normalize_keys(options or {}))

        min_width = _as_number(merged["min_width"], "minWidth")
        max_width = _as_number(merged["max_width"], "maxWidth")
        cross_pairs = _as_bool(merged["generate_all_cross_pairs"], "generateAllCrossPairs")
        low_specificity = _as_bool(merged["low_specificity"], "lowSpecificity")

        raw_scales = merged.get("scales") or {}
        if not isinstance(raw_scales, Mapping):
            raise ConfigurationError(f"Config option 'scales' must be a mapping, got {raw_scales!r}")
        scales = {
            str(prefix): _build_seed_scale(str(prefix), raw, min_width, max_width, cross_pairs)
            for prefix, raw in raw_scales.items()
        }
        return cls(
            min_width=min_width,
            max_width=max_width,
            generate_all_cross_pairs=cross_pairs,
            low_specificity=low_specificity,
            scales=MappingProxyType(scales),
        )


def _build_seed_scale(
    prefix: str,
    raw: Any,
    min_width: float,
    max_width: float,
    generate_all_cross_pairs: bool,
) -> ScaleConfig:
    """Convert one ``scales`` entry into a ScaleConfig; unset fields inherit the run values."""
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Scale {prefix!r} in config must be a mapping, got {raw!r}")
    options = _normalize_keys(raw)
    raw_pairs = raw.get("pairs") or {}
    if not isinstance(raw_pairs, Mapping) or not raw_pairs:
        raise ConfigurationError(f"No pairs defined for scale {prefix!r} in config")

    pairs: list[SizePair] = []
    for name, values in raw_pairs.items():
        if not isinstance(values, (list, tuple)) or len(values) < 2:
            raise ConfigurationError(
                f"Pair {name!r} of scale {prefix!r} must be a [min, max] list, got {values!r}"
            )
        pairs.append(
            SizePair(
                name=str(name),
                values=(
                    _as_number(values[0], f"{prefix}.{name}"),
                    _as_number(values[1], f"{prefix}.{name}"),
                ),
            )
        )

    return ScaleConfig(
        min_width=_as_number(options.get("min_width", min_width), f"{prefix}.minWidth"),
        max_width=_as_number(options.get("max_width", max_width), f"{prefix}.maxWidth"),
        prefix=prefix,
        generate_all_cross_pairs=_as_bool(
            options.get("generate_all_cross_pairs", generate_all_cross_pairs),
            f"{prefix}.generateAllCrossPairs",
        ),
        pairs=tuple(pairs),
    )


def load_config(path: str | Path) -> RulerConfig:
    """Read a YAML config file into a RulerConfig.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigurationError
        If the file is not valid YAML, is not a mapping, or holds invalid values.
    """
    path = Path(path)
    logger.debug("Loading ruler config from %s", path)
    return RulerConfig.from_mapping(_load_yaml(path))
