"""
ruler — fluid-value compiler for CSS.

Turns ``@ruler scale()`` / ``@ruler utility()`` directives and inline
``ruler.fluid()`` calls into viewport-fluid ``clamp()`` values.
"""

from ruler.api import process_css, process_file, process_files
from ruler.clamp import calculate_clamp
from ruler.config import RulerConfig, load_config
from ruler.errors import ConfigurationError, CssSyntaxError, RangeError, RulerError
from ruler.processor import RulerProcessor
from ruler.registry import ScaleRegistry
from ruler.units import px_to_rem

__all__ = [
    # Entry points
    "process_css",
    "process_file",
    "process_files",
    "RulerProcessor",
    # Configuration
    "RulerConfig",
    "load_config",
    "ScaleRegistry",
    # Core computations
    "calculate_clamp",
    "px_to_rem",
    # Errors
    "RulerError",
    "ConfigurationError",
    "RangeError",
    "CssSyntaxError",
]
