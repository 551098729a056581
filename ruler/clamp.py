"""
Clamp Calculator — the linear-interpolation core.

calculate_clamp turns a (minSize, maxSize) pixel pair and a viewport range
into either a static rem length (equal sizes) or a ``clamp()`` expression
whose middle term is the line through (minWidth, minSize) and
(maxWidth, maxSize):

    slope     = (maxSize - minSize) / (maxWidth - minWidth)
    intersect = -minWidth * slope + minSize
    clamp(<minSize rem>, <slope * 100>vw + <intersect rem>, <maxSize rem>)
"""

from __future__ import annotations

import math

from ruler.errors import ConfigurationError, RangeError
from ruler.units import format_vw, px_to_rem


def validate_min_max(minimum: float, maximum: float, context: str) -> None:
    """Raise RangeError unless *minimum* is strictly below *maximum*."""
    if minimum >= maximum:
        raise RangeError(context, minimum, maximum)


def calculate_clamp(
    min_size: float,
    max_size: float,
    min_width: float,
    max_width: float,
) -> str:
    """
    Compute the fluid value for one size pair.

    Parameters
    ----------
    min_size, max_size:
        Sizes in pixels at the narrow and wide ends of the viewport range.
    min_width, max_width:
        Viewport widths in pixels between which the value scales.

    Returns
    -------
    str
        ``px_to_rem(min_size)`` when the sizes are equal, otherwise a
        ``clamp()`` expression.

    Raises
    ------
    RangeError
        If ``min_size > max_size`` (context ``"size"``) or
        ``min_width >= max_width`` (context ``"width"``).  Widths are not
        checked when the sizes are equal.
    ConfigurationError
        If the interpolation overflows to a non-finite slope or intercept.
    """
    if min_size == max_size:
        return px_to_rem(min_size)

    validate_min_max(min_size, max_size, "size")
    validate_min_max(min_width, max_width, "width")

    slope = (max_size - min_size) / (max_width - min_width)
    intersect = -min_width * slope + min_size
    if not (math.isfinite(slope * 100) and math.isfinite(intersect)):
        raise ConfigurationError(
            f"Fluid value out of range for sizes {min_size}..{max_size} "
            f"between widths {min_width}..{max_width}"
        )

    return (
        f"clamp({px_to_rem(min_size)}, "
        f"{format_vw(slope)} + {px_to_rem(intersect)}, "
        f"{px_to_rem(max_size)})"
    )
