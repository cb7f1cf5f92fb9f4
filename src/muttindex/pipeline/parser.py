"""Index line parsing.

Splits a formatted index line into the fields the rewriter works on.
"""

import logging
import re
from dataclasses import dataclass

from muttindex.exceptions import FieldMissingError, PatternMismatchError
from muttindex.patterns.index_line import (
    LIST_TAG_CLOSE,
    LIST_TAG_OPEN,
    Variant,
    match_index_line,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedFields:
    """Fields of a matched index line, in left-to-right order.

    Attributes:
        leading: Message number, flags, and anything else before "[S:".
        sender_open: The literal "[S:" tag.
        sender_date: Sender's date and time, minutes precision.
        sender_tail: Sender's seconds, closing bracket, and following spaces.
        local_date: Local date and time, minutes precision.
        local_tail: Local seconds and what follows them up to the list tag
            (or to the end of the line in the simple variant).
        list_raw: Text between "[LIST:" and "]", surrounding whitespace
            included. None in the simple variant.
        trailing: Rest of the line after the list tag. Empty in the
            simple variant.
    """

    leading: str
    sender_open: str
    sender_date: str
    sender_tail: str
    local_date: str
    local_tail: str
    list_raw: str | None
    trailing: str

    @property
    def sender_chunk(self) -> str:
        """The full column span of the sender date, "[S:" through trailing spaces."""
        return self.sender_open + self.sender_date + self.sender_tail

    @property
    def local_chunk(self) -> str:
        return self.local_date + self.local_tail

    def reconstruct(self) -> str:
        """Rebuild the original line exactly."""
        list_tag = ""
        if self.list_raw is not None:
            list_tag = LIST_TAG_OPEN + self.list_raw + LIST_TAG_CLOSE
        return self.leading + self.sender_chunk + self.local_chunk + list_tag + self.trailing


def _group(match: re.Match[str], name: str) -> str:
    """Get a capture group that the pattern guarantees to be present."""
    value = match.group(name)
    if value is None:
        raise FieldMissingError(message="Capture group absent after a successful match", group=name)
    return value


class IndexLineParser:
    """Parses index lines for one layout variant."""

    def __init__(self, variant: Variant = "extended") -> None:
        self._variant = variant

    @property
    def variant(self) -> Variant:
        return self._variant

    def parse(self, line: str) -> ParsedFields:
        """Parse a single index line.

        Args:
            line: The formatted index line, without a line ending.

        Returns:
            ParsedFields for the line.

        Raises:
            PatternMismatchError: If the line does not match the layout.
            FieldMissingError: If the match lacks a required group.
        """
        match = match_index_line(line, self._variant)
        if match is None:
            raise PatternMismatchError(
                message="Input line did not match the index pattern",
                line=line,
                variant=self._variant,
            )

        logger.debug("Input line matched %s pattern", self._variant)

        extended = self._variant == "extended"
        return ParsedFields(
            leading=_group(match, "leading"),
            sender_open=_group(match, "sender_open"),
            sender_date=_group(match, "sender_date"),
            sender_tail=_group(match, "sender_tail"),
            local_date=_group(match, "local_date"),
            local_tail=_group(match, "local_tail"),
            list_raw=_group(match, "list_raw") if extended else None,
            trailing=_group(match, "trailing") if extended else "",
        )
