"""
Command-line entry point: ``ruler INPUT... [-o OUTPUT] [-c CONFIG] [-v]``.

All inputs share one run, so scales defined in an earlier file can be used
by utilities in a later one.  Output goes to stdout unless ``-o`` is given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ruler.api import process_files
from ruler.config import RulerConfig, load_config
from ruler.errors import RulerError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ruler",
        description="Compile @ruler scale/utility directives and ruler.fluid() calls to CSS.",
    )
    ap.add_argument("inputs", nargs="+", type=Path, help="CSS files, processed in order")
    ap.add_argument("-o", "--output", type=Path, help="Write the combined output here")
    ap.add_argument("-c", "--config", type=Path, help="YAML run configuration")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else RulerConfig()
        outputs = process_files(args.inputs, config)
    except (RulerError, FileNotFoundError) as exc:
        print(exc, file=sys.stderr)
        return 1

    css = "\n".join(outputs.values()) + "\n"
    if args.output:
        args.output.write_text(css, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(css), args.output)
    else:
        sys.stdout.write(css)
    return 0


if __name__ == "__main__":
    sys.exit(main())
