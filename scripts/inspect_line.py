#!/usr/bin/env python
"""Show how index lines are parsed and rewritten.

Prints each input line (O:) above its rewritten form (N:), followed by the
parsed fields and the decisions taken.

Usage:
    python scripts/inspect_line.py "23666  N    [S:2015-10-26 12:55:52]  ..."
    python scripts/inspect_line.py --file lines.txt
    python scripts/inspect_line.py --file lines.txt --variant simple --alternates alternates.yaml
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from muttindex.patterns.alternates import load_known_alternates
from muttindex.patterns.index_line import VARIANTS
from muttindex.rewriter import LineRewriter, RewriteResult


def load_lines(path: Path) -> list[str]:
    """Load non-empty lines from a text file."""
    with open(path, encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def print_result(line: str, result: RewriteResult, show_fields: bool) -> None:
    """Print the before/after pair and, optionally, the parse details."""
    print(f"O:{line}")
    print(f"N:{result.output}")

    if not result.matched:
        print("  (no match; passed through)")
        print()
        return

    print(f"  width: {len(line)} -> {len(result.output)}")
    print(f"  sender date suppressed: {result.sender_date_suppressed}")
    if result.list_name is not None:
        print(f"  list name: {result.list_name!r} (suppressed: {result.list_name_suppressed})")

    if show_fields and result.fields is not None:
        fields = result.fields
        print("  fields:")
        print(f"    leading:     {fields.leading!r}")
        print(f"    sender_date: {fields.sender_date!r}  tail: {fields.sender_tail!r}")
        print(f"    local_date:  {fields.local_date!r}  tail: {fields.local_tail!r}")
        if fields.list_raw is not None:
            print(f"    list_raw:    {fields.list_raw!r}")
        print(f"    trailing:    {fields.trailing!r}")
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("lines", nargs="*", help="Index lines to inspect")
    parser.add_argument("--file", type=Path, help="Read index lines from a file, one per line")
    parser.add_argument("--variant", choices=VARIANTS, default="extended")
    parser.add_argument("--alternates", type=Path, help="YAML file of list names to suppress")
    parser.add_argument("--fields", action="store_true", help="Show parsed fields")
    args = parser.parse_args()

    lines = list(args.lines)
    if args.file:
        lines.extend(load_lines(args.file))
    if not lines:
        parser.error("no index lines given")

    alternates = load_known_alternates(args.alternates) if args.alternates else None
    rewriter = LineRewriter(variant=args.variant, alternates=alternates)

    matched = 0
    for line in lines:
        result = rewriter.rewrite_with_metadata(line)
        matched += result.matched
        print_result(line, result, args.fields)

    print("=" * 80)
    print(f"{matched}/{len(lines)} lines matched the {args.variant} layout")


if __name__ == "__main__":
    main()
