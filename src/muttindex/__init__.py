"""muttindex - Blank out redundant fields in mutt index lines."""

from muttindex.exceptions import (
    ConfigurationError,
    FieldMissingError,
    PatternMismatchError,
    RewriteError,
    UsageError,
)
from muttindex.patterns import (
    DEFAULT_KNOWN_ALTERNATES,
    VARIANTS,
    KnownAlternates,
    Variant,
    load_known_alternates,
)
from muttindex.pipeline import (
    DateDecision,
    FieldSuppressor,
    IndexLineParser,
    LineAssembler,
    ListNameDecision,
    ParsedFields,
)
from muttindex.rewriter import LineRewriter, RewriteResult, rewrite_line

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DateDecision",
    "DEFAULT_KNOWN_ALTERNATES",
    "FieldMissingError",
    "FieldSuppressor",
    "IndexLineParser",
    "KnownAlternates",
    "LineAssembler",
    "LineRewriter",
    "ListNameDecision",
    "ParsedFields",
    "PatternMismatchError",
    "RewriteError",
    "RewriteResult",
    "UsageError",
    "VARIANTS",
    "Variant",
    "load_known_alternates",
    "rewrite_line",
]
