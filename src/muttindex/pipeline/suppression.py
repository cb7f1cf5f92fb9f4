"""Field suppression decisions.

Two independent decisions are made for each parsed line:

1. Sender date: blanked when it equals the local date to the minute.
2. List name: blanked when it is a known alternate, otherwise re-bracketed
   without the "LIST:" landmark.

Either way the emitted text has the same width, in code points, as the
original field, so the index columns stay aligned.
"""

import logging
from dataclasses import dataclass

from muttindex.patterns.alternates import DEFAULT_KNOWN_ALTERNATES, KnownAlternates
from muttindex.pipeline.parser import ParsedFields

logger = logging.getLogger(__name__)

# "[" and "]" around the list name
_BRACKETS_WIDTH = 2


@dataclass(frozen=True, slots=True)
class DateDecision:
    """Outcome of the sender date decision.

    Attributes:
        text: Replacement for the sender chunk plus the local chunk.
        suppressed: Whether the sender chunk was blanked.
    """

    text: str
    suppressed: bool


@dataclass(frozen=True, slots=True)
class ListNameDecision:
    """Outcome of the list name decision.

    Attributes:
        text: Replacement for the whole "[LIST: ...]" field.
        name: The trimmed list name.
        width: Declared field width, brackets included.
        suppressed: Whether the field was blanked.
    """

    text: str
    name: str
    width: int
    suppressed: bool


def blank(width: int) -> str:
    """Spaces to fill a field of the given width."""
    return " " * width


class FieldSuppressor:
    """Decides which fields of a parsed line to blank out."""

    def __init__(self, alternates: KnownAlternates | None = None) -> None:
        """Initialize the suppressor.

        Args:
            alternates: List names to suppress. Defaults to the
                compiled-in set.
        """
        self._alternates = alternates if alternates is not None else DEFAULT_KNOWN_ALTERNATES

    @property
    def alternates(self) -> KnownAlternates:
        return self._alternates

    def decide_dates(self, fields: ParsedFields) -> DateDecision:
        """Blank the sender date when it matches the local date.

        Both dates stop at the minutes, so seconds never take part in the
        comparison. They are truncated, not rounded.
        """
        if fields.sender_date == fields.local_date:
            return DateDecision(
                text=blank(len(fields.sender_chunk)) + fields.local_chunk,
                suppressed=True,
            )

        logger.debug("Dates are different; passing through unchanged")
        return DateDecision(text=fields.sender_chunk + fields.local_chunk, suppressed=False)

    def decide_list_name(self, fields: ParsedFields) -> ListNameDecision | None:
        """Blank or tighten the list name field.

        Returns:
            The decision, or None if the line carries no list tag.
        """
        if fields.list_raw is None:
            return None

        width = _BRACKETS_WIDTH + len(fields.list_raw)
        name = fields.list_raw.strip()

        if name in self._alternates:
            return ListNameDecision(text=blank(width), name=name, width=width, suppressed=True)

        # The closing bracket moves up against the name; the padding after
        # it keeps the field at its declared width
        padding = width - len(name) - _BRACKETS_WIDTH
        return ListNameDecision(
            text=f"[{name}]" + blank(padding),
            name=name,
            width=width,
            suppressed=False,
        )
