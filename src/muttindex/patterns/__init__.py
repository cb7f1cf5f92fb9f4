"""Patterns and static lookups for mutt index lines."""

from muttindex.patterns.alternates import (
    DEFAULT_KNOWN_ALTERNATES,
    KnownAlternates,
    load_known_alternates,
)
from muttindex.patterns.index_line import (
    VARIANTS,
    Variant,
    get_pattern,
    match_index_line,
)

__all__ = [
    "DEFAULT_KNOWN_ALTERNATES",
    "KnownAlternates",
    "VARIANTS",
    "Variant",
    "get_pattern",
    "load_known_alternates",
    "match_index_line",
]
