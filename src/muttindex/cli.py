"""Command-line filter for mutt's index_format.

mutt runs a format string ending in "|" as a filter once per message in
the index view and re-parses whatever the filter prints. Usage:

    set index_format="muttindex \"%4C  %Z  [S:%d]  %D  [LIST: %-16.16B]  %-30.30F (b: %6c; l: %6l) %?X?%2X&  ?  %s\""|

Exactly one index line must be given. Lines that do not look like the
expected layout are printed back unchanged. A lone argument is always taken
as the line, even one that looks like an option, so options such as
--version only act when given together with other arguments.
"""

import argparse
import logging
import sys

from muttindex import __version__
from muttindex.exceptions import ConfigurationError, UsageError
from muttindex.patterns.alternates import KnownAlternates, load_known_alternates
from muttindex.patterns.index_line import VARIANTS
from muttindex.rewriter import LineRewriter

PROG = "muttindex"

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Blank out redundant dates and list names in a mutt index line",
    )
    # Counted by hand so a wrong count exits 1 instead of argparse's 2
    p.add_argument("lines", nargs="*", metavar="LINE", help="Formatted index line (exactly one)")
    p.add_argument(
        "--variant",
        choices=VARIANTS,
        default="extended",
        help="Index layout: dates only (simple) or dates and list name (extended, default)",
    )
    p.add_argument(
        "--alternates",
        default="",
        metavar="FILE",
        help="YAML file of list names to suppress (default: built-in list)",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log informational messages to stderr",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=f"{PROG} (%(levelname)s): %(message)s",
        stream=sys.stderr,
    )


def _single_line(lines: list[str]) -> str:
    if len(lines) != 1:
        raise UsageError(
            message=f"expected exactly one mutt index_format line, got {len(lines)}; bailing out"
        )
    return lines[0]


def _load_alternates(path: str) -> KnownAlternates | None:
    if not path:
        return None
    alternates = load_known_alternates(path)
    logger.debug("Loaded %d alternate list names from %s", len(alternates), path)
    return alternates


def _parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse options without ever mistaking the index line for one.

    mutt passes the line last. A lone argument is always the line, and a
    line that looks like an option ("-x", "-v", "--help") is still a line.
    """
    parser = _build_parser()
    if len(argv) == 1:
        return parser.parse_args(["--", argv[0]])

    args, extras = parser.parse_known_args(argv)
    args.lines.extend(extras)
    if not args.lines and argv and argv[-1].startswith("-"):
        # The last token was taken as a flag; give it back as the line
        args = parser.parse_args([*argv[:-1], "--", argv[-1]])
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.verbose)

    try:
        line = _single_line(args.lines)
        alternates = _load_alternates(args.alternates)
    except (UsageError, ConfigurationError) as exc:
        print(f"{PROG} (error): {exc}", file=sys.stderr)
        return 1

    rewriter = LineRewriter(variant=args.variant, alternates=alternates)
    print(rewriter.rewrite_safe(line))
    return 0


if __name__ == "__main__":
    sys.exit(main())
