"""LineRewriter - Main public interface for index line rewriting.

Provides three rewriting methods:
- rewrite(): Strict rewriting, raises if the line does not match
- rewrite_safe(): Safe rewriting, returns the line unchanged on mismatch
- rewrite_with_metadata(): Full result with debugging info
"""

import logging
from dataclasses import dataclass

from muttindex.exceptions import PatternMismatchError
from muttindex.patterns.alternates import KnownAlternates
from muttindex.patterns.index_line import Variant, get_pattern
from muttindex.pipeline.assembler import LineAssembler
from muttindex.pipeline.parser import IndexLineParser, ParsedFields
from muttindex.pipeline.suppression import FieldSuppressor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RewriteResult:
    """Full rewriting result with metadata.

    Attributes:
        output: The rewritten line, or the input unchanged if it did not match.
        matched: Whether the input matched the index pattern.
        variant: Layout variant the line was matched against.
        fields: Parsed fields, or None if the line did not match.
        sender_date_suppressed: Whether the sender date was blanked.
        list_name: Trimmed list name, or None if there was no list tag.
        list_name_suppressed: Whether the list name field was blanked.
    """

    output: str
    matched: bool
    variant: Variant
    fields: ParsedFields | None
    sender_date_suppressed: bool
    list_name: str | None
    list_name_suppressed: bool


class LineRewriter:
    """Rewrites mutt index lines to drop redundant information.

    The rewriting pipeline:
    1. Parse the line against the layout pattern
    2. Decide whether to blank the sender date
    3. Decide whether to blank or tighten the list name (extended layout)
    4. Assemble the output line

    Example:
        rewriter = LineRewriter()

        # Strict (raises PatternMismatchError on unexpected input)
        line = rewriter.rewrite(index_line)

        # Safe (echoes unexpected input)
        line = rewriter.rewrite_safe(index_line)

        # Full metadata
        result = rewriter.rewrite_with_metadata(index_line)
    """

    def __init__(
        self,
        variant: Variant = "extended",
        alternates: KnownAlternates | None = None,
    ) -> None:
        """Initialize the rewriter.

        Args:
            variant: Index layout, "simple" (dates only) or "extended"
                (dates and list name).
            alternates: List names to suppress. Defaults to the
                compiled-in set.

        Raises:
            ValueError: If the variant is unknown.
        """
        # Fail on a bad variant now rather than on the first line
        get_pattern(variant)

        self._variant: Variant = variant
        self._parser = IndexLineParser(variant)
        self._suppressor = FieldSuppressor(alternates)
        self._assembler = LineAssembler()

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def alternates(self) -> KnownAlternates:
        return self._suppressor.alternates

    def rewrite(self, line: str) -> str:
        """Rewrite an index line.

        Args:
            line: The formatted index line.

        Returns:
            The rewritten line.

        Raises:
            PatternMismatchError: If the line does not match the layout.
        """
        fields = self._parser.parse(line)
        return self._rewrite_fields(fields).output

    def rewrite_safe(self, line: str) -> str:
        """Rewrite an index line, echoing it unchanged if it does not match.

        Args:
            line: The formatted index line.

        Returns:
            The rewritten line, or the input as is.
        """
        return self.rewrite_with_metadata(line).output

    def rewrite_with_metadata(self, line: str) -> RewriteResult:
        """Rewrite with full metadata.

        Args:
            line: The formatted index line.

        Returns:
            RewriteResult with the output line and the decisions taken.
        """
        try:
            fields = self._parser.parse(line)
        except PatternMismatchError:
            logger.warning("input line did not match regex; passing through unchanged")
            return RewriteResult(
                output=line,
                matched=False,
                variant=self._variant,
                fields=None,
                sender_date_suppressed=False,
                list_name=None,
                list_name_suppressed=False,
            )

        return self._rewrite_fields(fields)

    def _rewrite_fields(self, fields: ParsedFields) -> RewriteResult:
        dates = self._suppressor.decide_dates(fields)
        list_name = self._suppressor.decide_list_name(fields)
        output = self._assembler.assemble(fields, dates, list_name)

        return RewriteResult(
            output=output,
            matched=True,
            variant=self._variant,
            fields=fields,
            sender_date_suppressed=dates.suppressed,
            list_name=list_name.name if list_name is not None else None,
            list_name_suppressed=list_name is not None and list_name.suppressed,
        )


def rewrite_line(
    line: str,
    variant: Variant = "extended",
    alternates: KnownAlternates | None = None,
) -> str:
    """Rewrite a single line, echoing it unchanged if it does not match."""
    return LineRewriter(variant=variant, alternates=alternates).rewrite_safe(line)
