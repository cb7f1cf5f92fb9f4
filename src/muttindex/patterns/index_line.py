"""Structural patterns for mutt index lines.

Two layouts are recognized. Both carry the sender's date in an ``[S:...]``
tag followed by the local date:

    simple:
        "23666  N    [S:2015-10-26 12:55:52]  2015-10-26 12:55:52  sender@example.com ..."

    extended (adds the list name tag):
        "23666  N    [S:2015-10-26 12:55:52]  2015-10-26 12:55:52  [LIST: ads             ]  sender@example.com ..."

These come from index_format strings like:

    set index_format="muttindex \"%4C  %Z  [S:%d]  %D  [LIST: %-16.16B]  %-30.30F (b: %6c; l: %6l) %?X?%2X&  ?  %s\""|

The date groups stop at the minutes, so two dates that differ only in their
seconds compare equal. Digits and whitespace are the ASCII classes.
"""

import re
from typing import Literal

Variant = Literal["simple", "extended"]

VARIANTS: tuple[Variant, ...] = ("simple", "extended")

# "YYYY-MM-DD hh:mm", month/day/hour/minute may be one digit
_DATE = r"\d{4}-\d{1,2}-\d{1,2}\s+\d{1,2}:\d{1,2}"

# Seconds, closing bracket, and the gap before the local date
_SENDER_TAIL = r":\d{1,2}\]\s+"

_SIMPLE_PATTERN = re.compile(
    r"(?P<leading>.*\s)"
    r"(?P<sender_open>\[S:)"
    rf"(?P<sender_date>{_DATE})"
    rf"(?P<sender_tail>{_SENDER_TAIL})"
    rf"(?P<local_date>{_DATE})"
    # Everything after the local minutes belongs to the local tail
    r"(?P<local_tail>:\d{1,2}.*)",
    re.ASCII | re.DOTALL,
)

# The "[LIST:" landmark and its closing "]" are not captured; the list name
# field is re-bracketed on output without the "LIST:" token.
_EXTENDED_PATTERN = re.compile(
    r"(?P<leading>\s*\d+\s+[^\[]+)"
    r"(?P<sender_open>\[S:)"
    rf"(?P<sender_date>{_DATE})"
    rf"(?P<sender_tail>{_SENDER_TAIL})"
    rf"(?P<local_date>{_DATE})"
    r"(?P<local_tail>:\d{1,2}\s+)"
    r"\[LIST:"
    r"(?P<list_raw>\s*[^\]]+)"
    r"\]"
    r"(?P<trailing>\s.*)",
    re.ASCII | re.DOTALL,
)

_PATTERNS: dict[Variant, re.Pattern[str]] = {
    "simple": _SIMPLE_PATTERN,
    "extended": _EXTENDED_PATTERN,
}

LIST_TAG_OPEN = "[LIST:"
LIST_TAG_CLOSE = "]"


def get_pattern(variant: Variant) -> re.Pattern[str]:
    """Return the compiled pattern for a layout variant.

    Args:
        variant: Either "simple" or "extended".

    Returns:
        The compiled pattern.

    Raises:
        ValueError: If the variant is unknown.
    """
    try:
        return _PATTERNS[variant]
    except KeyError:
        raise ValueError(f"Unknown variant {variant!r}; expected one of {VARIANTS}") from None


def match_index_line(line: str, variant: Variant = "extended") -> re.Match[str] | None:
    """Match a whole index line against a layout variant.

    Matching is all-or-nothing: a line that only partially conforms
    does not match.

    Args:
        line: A single formatted index line.
        variant: Layout variant to match against.

    Returns:
        The match object, or None if the line does not conform.
    """
    return get_pattern(variant).fullmatch(line)
