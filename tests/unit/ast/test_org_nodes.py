#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_org_nodes.py
"""Unit tests for the document model records and the visitor base."""

from dataclasses import FrozenInstanceError

import pytest
from utils import text_cell

from orgexport.ast import (
    PART_TYPES,
    BareLink,
    FractionCookie,
    Header,
    InlineTimestamp,
    Link,
    List,
    ListItem,
    NodeVisitor,
    PercentageCookie,
    Table,
    TableRow,
    Text,
    Timestamp,
    TitleLine,
    UnrecognizedPart,
)
from orgexport.exceptions import OrgExportError, ValidationError


class RecordingVisitor(NodeVisitor):
    """Visitor that returns the name of the method it was dispatched to."""

    def visit_text(self, node):
        return "text"

    def visit_link(self, node):
        return "link"

    def visit_fraction_cookie(self, node):
        return "fraction_cookie"

    def visit_percentage_cookie(self, node):
        return "percentage_cookie"

    def visit_table(self, node):
        return "table"

    def visit_list(self, node):
        return "list"

    def visit_inline_timestamp(self, node):
        return "inline_timestamp"

    def visit_bare_link(self, node):
        return "bare_link"

    def generic_visit(self, node):
        return "generic"


@pytest.mark.unit
class TestValidation:
    """Tests for structural checks at construction time."""

    def test_nesting_level_must_be_positive(self) -> None:
        """Test that level 0 headings are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Header(nesting_level=0, title_line=TitleLine(raw_title="x"))

        assert exc_info.value.parameter_name == "nesting_level"
        assert exc_info.value.parameter_value == 0

    def test_ragged_table_rejected(self) -> None:
        """Test that rows must match the first row's column count."""
        with pytest.raises(ValidationError) as exc_info:
            Table(rows=[TableRow(cells=[text_cell("a"), text_cell("b")]), TableRow(cells=[text_cell("c")])])

        assert "expected 2" in str(exc_info.value)

    def test_column_count(self) -> None:
        """Test the column count of full and empty tables."""
        assert Table(rows=[TableRow(cells=[text_cell("a"), text_cell("b")])]).column_count == 2
        assert Table().column_count == 0

    def test_unknown_checkbox_state_rejected(self) -> None:
        """Test the closed set of checkbox states."""
        with pytest.raises(ValidationError):
            ListItem(checkbox_state="done")  # type: ignore[arg-type]

    def test_unknown_bare_link_kind_rejected(self) -> None:
        """Test the closed set of bare link kinds."""
        with pytest.raises(ValidationError):
            BareLink(kind="ftp", content="ftp://example.com")  # type: ignore[arg-type]

    def test_validation_error_is_library_error(self) -> None:
        """Test that model errors can be caught with the base class."""
        with pytest.raises(OrgExportError):
            Header(nesting_level=-1, title_line=TitleLine(raw_title="x"))


@pytest.mark.unit
class TestImmutability:
    """Tests for frozen records."""

    def test_records_are_frozen(self) -> None:
        """Test that fields cannot be reassigned."""
        text = Text(content="a")
        with pytest.raises(FrozenInstanceError):
            text.content = "b"  # type: ignore[misc]

    def test_records_compare_by_value(self) -> None:
        """Test structural equality."""
        assert Link(uri="a", title="b") == Link(uri="a", title="b")
        assert Timestamp(year="2019", month="08", day="02") != Timestamp(year="2019", month="8", day="2")

    def test_defaults(self) -> None:
        """Test default field values."""
        item = ListItem()
        assert item.checkbox_state == "unchecked"
        assert item.force_number is None
        assert List().bullet_character == "-"
        assert List().number_terminator_character == "."
        assert Timestamp(year="2019", month="08", day="02").is_active is True


@pytest.mark.unit
class TestVisitorDispatch:
    """Tests for accept() routing."""

    @pytest.mark.parametrize(
        "part,expected",
        [
            (Text(content="a"), "text"),
            (Link(uri="a"), "link"),
            (FractionCookie(), "fraction_cookie"),
            (PercentageCookie(), "percentage_cookie"),
            (Table(), "table"),
            (List(), "list"),
            (InlineTimestamp(first_timestamp=Timestamp(year="2019", month="08", day="02")), "inline_timestamp"),
            (BareLink(kind="url", content="https://a"), "bare_link"),
            (UnrecognizedPart(part_type="inline-markup"), "generic"),
        ],
    )
    def test_accept(self, part, expected: str) -> None:
        """Test that each part reaches its visit method."""
        assert part.accept(RecordingVisitor()) == expected

    def test_part_types_closed_set(self) -> None:
        """Test that the unrecognized arm is not a known part type."""
        assert len(PART_TYPES) == 8
        assert UnrecognizedPart not in PART_TYPES

    def test_incomplete_visitor_cannot_be_created(self) -> None:
        """Test that every visit method must be implemented."""

        class TextOnly(NodeVisitor):
            def visit_text(self, node):
                return node.content

        with pytest.raises(TypeError):
            TextOnly()  # type: ignore[abstract]
