"""Tests for the IndexLineParser component."""

import pytest

from muttindex import FieldMissingError, IndexLineParser, ParsedFields, PatternMismatchError
from muttindex.pipeline.parser import _group

LEADING = "23666  N    "
SENDER = "[S:2015-10-26 12:55:52]  "
LOCAL = "2015-10-26 12:55:52  "
LIST_TAG = f"[LIST: {'ads':<16}]"
REST = "  " + f"{'sender@example.com':<30}" + " (b:   1.3K; l:   144)     blah blah blah some random subject"

EXTENDED_LINE = LEADING + SENDER + LOCAL + LIST_TAG + REST


class TestExtendedParsing:
    """Parsing extended layout lines."""

    def test_fields(self) -> None:
        """All fields are extracted in order."""
        fields = IndexLineParser("extended").parse(EXTENDED_LINE)

        assert fields.leading == LEADING
        assert fields.sender_open == "[S:"
        assert fields.sender_date == "2015-10-26 12:55"
        assert fields.sender_tail == ":52]  "
        assert fields.local_date == "2015-10-26 12:55"
        assert fields.local_tail == ":52  "
        assert fields.list_raw == " ads             "
        assert fields.trailing == REST

    def test_chunks(self) -> None:
        """Sender and local chunks cover their full column spans."""
        fields = IndexLineParser("extended").parse(EXTENDED_LINE)

        assert fields.sender_chunk == SENDER
        assert fields.local_chunk == LOCAL

    def test_reconstruct(self) -> None:
        """Reconstruction gives back the original line exactly."""
        fields = IndexLineParser("extended").parse(EXTENDED_LINE)

        assert fields.reconstruct() == EXTENDED_LINE

    def test_reconstruct_non_ascii(self) -> None:
        """Reconstruction is exact for non-ASCII subjects too."""
        line = EXTENDED_LINE.replace("blah blah blah some random subject", "会議の件 – résumé")
        fields = IndexLineParser().parse(line)

        assert fields.reconstruct() == line

    def test_reconstruct_embedded_newline(self) -> None:
        """Trailing text is kept whole even if it spans lines."""
        line = EXTENDED_LINE + "\ncontinued"
        fields = IndexLineParser().parse(line)

        assert fields.trailing.endswith("\ncontinued")
        assert fields.reconstruct() == line

    def test_mismatch_raises(self) -> None:
        """Non-conforming lines raise PatternMismatchError."""
        parser = IndexLineParser("extended")

        with pytest.raises(PatternMismatchError) as excinfo:
            parser.parse("not an index line")

        assert excinfo.value.line == "not an index line"
        assert excinfo.value.variant == "extended"
        assert "variant: extended" in str(excinfo.value)


class TestSimpleParsing:
    """Parsing simple layout lines."""

    def test_fields(self) -> None:
        """No list tag; the local tail runs to the end of the line."""
        line = LEADING + SENDER + LOCAL + "sender@example.com  (   144)  subject"
        parser = IndexLineParser("simple")
        fields = parser.parse(line)

        assert parser.variant == "simple"
        assert fields.list_raw is None
        assert fields.trailing == ""
        assert fields.local_tail == ":52  sender@example.com  (   144)  subject"
        assert fields.reconstruct() == line

    def test_extended_line_keeps_list_tag_in_tail(self) -> None:
        """The simple layout leaves the list tag inside the local tail."""
        fields = IndexLineParser("simple").parse(EXTENDED_LINE)

        assert LIST_TAG in fields.local_tail
        assert fields.reconstruct() == EXTENDED_LINE


class TestGroupHelper:
    """Internal invariant checks."""

    def test_absent_group_raises(self) -> None:
        """An optional group that did not participate is a programming error."""
        import re

        match = re.fullmatch(r"(?P<a>x)?(?P<b>y)", "y")
        assert match is not None

        with pytest.raises(FieldMissingError) as excinfo:
            _group(match, "a")

        assert excinfo.value.group == "a"
        assert _group(match, "b") == "y"


class TestParsedFieldsDataclass:
    """Tests for the ParsedFields dataclass."""

    def test_immutable(self) -> None:
        """ParsedFields is immutable."""
        fields = IndexLineParser().parse(EXTENDED_LINE)

        with pytest.raises(AttributeError):
            fields.leading = "x"  # type: ignore[misc]

    def test_equality(self) -> None:
        """Equal lines parse to equal fields."""
        assert IndexLineParser().parse(EXTENDED_LINE) == IndexLineParser().parse(EXTENDED_LINE)
        assert isinstance(IndexLineParser().parse(EXTENDED_LINE), ParsedFields)
