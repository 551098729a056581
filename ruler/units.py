"""
Length formatting for generated CSS values.

All sizes enter the package as pixels and leave it as ``rem`` at a fixed
16px root font size.  Rounding is half-away-from-zero at the 4th decimal,
applied to the exact binary value of the float, so results match what a
browser-side ``toFixed(4)`` would print.

All functions are pure: no side effects, no state.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

REM_BASE_PX: int = 16
DECIMAL_PLACES: int = 4

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)


def round_fixed(value: float) -> Decimal:
    """Round *value* to exactly four decimal places."""
    exact = Decimal(value)
    with localcontext() as ctx:
        # room for every integer digit plus the fixed fraction
        ctx.prec = max(ctx.prec, exact.adjusted() + DECIMAL_PLACES + 2)
        rounded = exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    # -0.0000 prints as "-0.0000"; a negative zero is never meaningful in CSS
    return rounded if rounded != 0 else Decimal(0).quantize(_QUANTUM)


def px_to_rem(px: float) -> str:
    """Convert pixels to a terse rem length: ``20 -> "1.25rem"``.

    Trailing zeros and a trailing decimal point are stripped; the result never
    contains a ``+`` sign or exponent notation.
    """
    text = f"{round_fixed(px / REM_BASE_PX):f}"
    return text.rstrip("0").rstrip(".") + "rem"


def format_vw(slope: float) -> str:
    """Render a px-per-px slope as a viewport coefficient with exactly four decimals.

    Unlike :func:`px_to_rem`, trailing zeros are kept: ``0.005 -> "0.5000vw"``.
    """
    return f"{round_fixed(slope * 100):f}vw"
