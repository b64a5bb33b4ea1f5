"""Command-line driver: read markup from a file, print Markdown."""

import argparse
import logging
import sys
from pathlib import Path

from .converter import HTML2Markdown
from .errors import Html2MdError
from .serialize import to_test_format

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="html2md", description="Convert HTML markup to Markdown.")
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="HTML file to convert; '-' or omitted reads standard input",
    )
    parser.add_argument("-o", "--output", type=Path, help="Write Markdown to this file instead of stdout")
    dump = parser.add_mutually_exclusive_group()
    dump.add_argument("--tokens", action="store_true", help="Print the token list instead of Markdown")
    dump.add_argument("--tree", action="store_true", help="Print the restructured tree in html5lib test format")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed tags instead of skipping them",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity: -v info, -vv debug (includes skipped malformed tags)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser.parse_args(argv)


def _configure_logging(verbose, quiet):
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _read_source(path):
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv=None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        source = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        result = HTML2Markdown(source, strict=args.strict)
    except Html2MdError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.tokens:
        output = "".join(f"{token!r}\n" for token in result.tokens)
    elif args.tree:
        output = to_test_format(result.canonical) + "\n"
    else:
        output = result.markdown

    if args.output is not None:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        logger.info("wrote %s", args.output)
    else:
        sys.stdout.write(output)
    return 0
