"""Output line assembly from parsed fields and suppression decisions."""

from muttindex.pipeline.parser import ParsedFields
from muttindex.pipeline.suppression import DateDecision, ListNameDecision


class LineAssembler:
    """Puts the rewritten fields back together, in original order."""

    def assemble(
        self,
        fields: ParsedFields,
        dates: DateDecision,
        list_name: ListNameDecision | None,
    ) -> str:
        """Assemble the output line.

        Args:
            fields: The parsed input line.
            dates: Decision covering the sender and local date chunks.
            list_name: Decision for the list name field, or None when the
                line has no list tag.

        Returns:
            The rewritten line, without a line ending.
        """
        parts = [fields.leading, dates.text]
        if list_name is not None:
            parts.append(list_name.text)
        parts.append(fields.trailing)
        return "".join(parts)
