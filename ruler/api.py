"""
Public processing API.

process_css() is the single entry point for turning authored CSS with
``@ruler`` directives and ``ruler.fluid()`` calls into plain CSS.  It wires
the whole run: parse → RulerProcessor → serialize.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ruler.config import RulerConfig
from ruler.css.parser import parse_stylesheet
from ruler.processor import RulerProcessor


def process_css(source: str, config: Optional[RulerConfig] = None) -> str:
    """
    Compile one stylesheet in a fresh run.

    Parameters
    ----------
    source:
        CSS text containing ruler directives and/or inline calls.
    config:
        Run-level configuration; the packaged defaults when omitted.

    Returns
    -------
    str
        The serialized stylesheet.

    Raises
    ------
    RulerError
        On the first malformed directive, inverted range, or CSS syntax error.
    """
    root = parse_stylesheet(source)
    RulerProcessor(config).process(root)
    return root.to_css()


def process_file(path: str | Path, config: Optional[RulerConfig] = None) -> str:
    """Read a UTF-8 file and compile it with :func:`process_css`."""
    return process_css(Path(path).read_text(encoding="utf-8"), config)


def process_files(
    paths: Iterable[str | Path], config: Optional[RulerConfig] = None
) -> dict[Path, str]:
    """Compile several files in one run, in the given order.

    Scales defined in an earlier file are available to utilities in later
    files.  Returns the output CSS keyed by input path.
    """
    processor = RulerProcessor(config)
    outputs: dict[Path, str] = {}
    for path in paths:
        path = Path(path)
        root = parse_stylesheet(path.read_text(encoding="utf-8"))
        processor.process(root)
        outputs[path] = root.to_css()
    return outputs
