"""
Turn pasted HTML into a call-notation literal.

Usage:
  # from stdin
  pbpaste | htmlliteral

  # from file, LF line endings
  htmlliteral page.html --newline lf -o page.js
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bs4 import FeatureNotFound

from .converter import HtmlLiteral

logger = logging.getLogger(__name__)

NEWLINES = {"crlf": "\r\n", "lf": "\n"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlliteral",
        description="Collapse HTML whitespace and print the markup as nested call literals.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="HTML file to read (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--out",
        help="file to write the literal to (default: stdout)",
    )
    parser.add_argument(
        "--parser",
        default="lxml",
        help="BeautifulSoup tree builder, e.g. lxml or html.parser (default: lxml)",
    )
    parser.add_argument(
        "--newline",
        choices=sorted(NEWLINES),
        default="crlf",
        help="line separator used inside literals (default: crlf)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log each pipeline stage",
    )
    return parser


def _read_input(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write_output(path: Optional[str], text: str) -> None:
    if path is None:
        sys.stdout.write(text + "\n")
        return
    # newline="" keeps CRLF separators from being doubled on Windows
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        raw_html = _read_input(args.input)
        converter = HtmlLiteral(raw_html, parser=args.parser, newline=NEWLINES[args.newline])
        text = converter.run().to_literal()
        _write_output(args.out, text)
    except FeatureNotFound:
        logger.error("tree builder %r is not installed", args.parser)
        return 1
    except RecursionError:
        logger.error("markup is nested too deeply to convert")
        return 1
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("wrote %d chars", len(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())
