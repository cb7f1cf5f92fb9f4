"""Tests for the LineAssembler component."""

from muttindex import DateDecision, IndexLineParser, LineAssembler, ListNameDecision

LINE = (
    "23666  N    [S:2015-10-26 12:55:52]  2015-10-26 12:55:52  [LIST: ads             ]  "
    "sender@example.com             (b:   1.3K; l:   144)     blah blah blah some random subject"
)


class TestLineAssembler:
    """Output assembly tests."""

    def test_parts_in_order(self) -> None:
        """Leading, dates, list field, and trailing text are joined in order."""
        fields = IndexLineParser().parse(LINE)
        dates = DateDecision(text="<dates>", suppressed=False)
        list_name = ListNameDecision(text="<list>", name="ads", width=19, suppressed=False)

        output = LineAssembler().assemble(fields, dates, list_name)

        assert output == "23666  N    <dates><list>" + fields.trailing

    def test_without_list_decision(self) -> None:
        """The list field is omitted when there is no list decision."""
        fields = IndexLineParser("simple").parse(LINE)
        dates = DateDecision(text=fields.sender_chunk + fields.local_chunk, suppressed=False)

        output = LineAssembler().assemble(fields, dates, None)

        assert output == LINE

    def test_trailing_untouched(self) -> None:
        """Trailing text is appended verbatim."""
        fields = IndexLineParser().parse(LINE)
        dates = DateDecision(text="", suppressed=True)
        list_name = ListNameDecision(text="", name="ads", width=19, suppressed=True)

        output = LineAssembler().assemble(fields, dates, list_name)

        assert output.endswith("(b:   1.3K; l:   144)     blah blah blah some random subject")
