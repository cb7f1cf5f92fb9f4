"""Pipeline components for index line rewriting."""

from muttindex.pipeline.assembler import LineAssembler
from muttindex.pipeline.parser import IndexLineParser, ParsedFields
from muttindex.pipeline.suppression import (
    DateDecision,
    FieldSuppressor,
    ListNameDecision,
)

__all__ = [
    "DateDecision",
    "FieldSuppressor",
    "IndexLineParser",
    "LineAssembler",
    "ListNameDecision",
    "ParsedFields",
]
