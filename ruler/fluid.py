"""
Declaration Rewriter — substitutes inline ``ruler.fluid(...)`` calls.

    padding: ruler.fluid(16, 24) ruler.fluid(8, 8);
    → padding: clamp(1rem, 0.5556vw + 0.8889rem, 1.5rem) 0.5rem;

Arguments are ``minSize, maxSize[, minWidth, maxWidth]``.  Widths that are
missing, zero or not numbers fall back to the run defaults.  A size that is
missing, zero or not a number is an error, so ``ruler.fluid(0, 16)`` is
rejected.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from ruler.clamp import calculate_clamp
from ruler.errors import ConfigurationError

logger = logging.getLogger(__name__)

FLUID_CALL = re.compile(r"ruler\.fluid\(([^)]+)\)")


def _coerce(text: str) -> float:
    """Blank text is 0; anything unparseable or infinite is NaN."""
    text = text.strip()
    if not text:
        return 0
    try:
        value = float(text)
    except ValueError:
        return math.nan
    return value if math.isfinite(value) else math.nan


def _given(value: Optional[float]) -> bool:
    return value is not None and value != 0 and not math.isnan(value)


def rewrite_fluid_calls(value: str, min_width: float, max_width: float) -> str:
    """Replace every inline call in *value*, left to right.

    Text outside the calls is untouched; a value without calls is returned
    as-is.

    Raises
    ------
    ConfigurationError
        If a call lacks a usable minSize or maxSize.
    RangeError
        If the sizes or widths of a call are inverted.
    """

    def substitute(match: re.Match[str]) -> str:
        args: list[Optional[float]] = [_coerce(arg) for arg in match.group(1).split(",")]
        args += [None] * (4 - len(args))
        min_size, max_size, call_min_width, call_max_width = args[:4]

        if not _given(min_size) or not _given(max_size):
            raise ConfigurationError("ruler.fluid() requires minSize and maxSize")

        result = calculate_clamp(
            min_size,
            max_size,
            call_min_width if _given(call_min_width) else min_width,
            call_max_width if _given(call_max_width) else max_width,
        )
        logger.debug("Rewrote %s -> %s", match.group(0), result)
        return result

    return FLUID_CALL.sub(substitute, value)
