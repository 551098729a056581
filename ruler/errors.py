"""
Error taxonomy for the fluid-value compiler.

Every error raised by the package derives from RulerError and carries the
fixed ``[ruler]`` subsystem tag in its message.  Nothing inside the package
catches these: a failing directive aborts the whole run and the caller (or
the CLI) decides how to surface it.
"""

from __future__ import annotations

TAG = "ruler"


class RulerError(Exception):
    """Base class for all fatal processing errors.

    Attributes:
        detail: The message without the subsystem tag.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"[{TAG}] {detail}")
        self.detail = detail


class ConfigurationError(RulerError):
    """Raised for malformed or missing directive / run-level parameters."""


class RangeError(ConfigurationError):
    """Raised when a minimum is not strictly below its maximum.

    Attributes:
        context: What was being compared (``"size"`` or ``"width"``).
        minimum: The offending minimum.
        maximum: The offending maximum.
    """

    def __init__(self, context: str, minimum: float, maximum: float) -> None:
        super().__init__(
            f"Invalid {context}: min ({format_number(minimum)}) "
            f"must be less than max ({format_number(maximum)})"
        )
        self.context = context
        self.minimum = minimum
        self.maximum = maximum


class CssSyntaxError(RulerError):
    """Raised when the host stylesheet cannot be parsed into a node tree."""


def format_number(value: float) -> str:
    """Render a number the way a user would write it (``24`` rather than ``24.0``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
