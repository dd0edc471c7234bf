#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_org_api.py
"""Unit tests for the function-level API."""

import logging

import pytest
from utils import DiagnosticCollector

import orgexport
from orgexport import (
    OrgRendererOptions,
    RenderingError,
    attributed_string_to_raw_text,
    create_raw_description_text,
    export_org,
    generate_title_line,
)
from orgexport.ast import (
    ClockEntry,
    Document,
    FractionCookie,
    PlanningItem,
    PropertyListItem,
    Text,
    Timestamp,
    UnrecognizedPart,
)


@pytest.mark.unit
class TestExportOrg:
    """Tests for export_org()."""

    def test_simple_document(self, make_header) -> None:
        """Test exporting a single heading."""
        assert export_org(Document(headers=[make_header("Inbox")])) == "* Inbox\n"

    def test_option_keyword_overrides(self, make_header) -> None:
        """Test that keyword arguments override the options object."""
        header = make_header("H", property_list_items=[PropertyListItem(name="ID", value=[Text(content="1")])])
        document = Document(headers=[header])
        options = OrgRendererOptions(dont_indent=False)

        assert export_org(document, options, dont_indent=True) == "* H\n:PROPERTIES:\n:ID: 1\n:END:\n"
        assert options.dont_indent is False

    def test_unknown_keyword_skipped(self, make_header, caplog: pytest.LogCaptureFixture) -> None:
        """Test that keywords that are not options are ignored."""
        with caplog.at_level(logging.DEBUG, logger="orgexport.api"):
            assert export_org(Document(headers=[make_header("H")]), indent_width=4) == "* H\n"

        assert "indent_width" in caplog.text

    def test_fail_on_unknown_parts(self, make_header) -> None:
        """Test strict handling through the API."""
        header = make_header("H", property_list_items=[PropertyListItem(name="X", value=[UnrecognizedPart(part_type="q")])])
        with pytest.raises(RenderingError):
            export_org(Document(headers=[header]), fail_on_unknown_parts=True)

    def test_collaborators(self, make_header, clock_start: Timestamp, clock_end: Timestamp) -> None:
        """Test that every collaborator can be replaced."""
        collector = DiagnosticCollector()
        header = make_header(
            "H",
            planning_items=[PlanningItem(kind="TIMESTAMP", timestamp=clock_start)],
            property_list_items=[PropertyListItem(name="X", value=[UnrecognizedPart(part_type="q")])],
            log_book_entries=[ClockEntry(start=clock_start, end=clock_end)],
        )
        result = export_org(
            Document(headers=[header]),
            diagnostic_callback=collector,
            timestamp_formatter=lambda ts: "TS",
            duration_formatter=lambda start, end: "D",
            planning_filter=lambda item: True,
        )

        assert result == "* H\n  TIMESTAMP: TS\n  :PROPERTIES:\n  :X: \n  :END:\n  :LOGBOOK:\n  CLOCK: TS--TS => D\n  :END:\n"
        assert collector.event_types == ["unknown_part"]


@pytest.mark.unit
class TestCreateRawDescriptionText:
    """Tests for create_raw_description_text()."""

    def test_with_title(self, make_header) -> None:
        """Test rendering a heading with its title."""
        assert create_raw_description_text(make_header("H", raw_description="abc")) == "* H\nabc\n"

    @pytest.mark.parametrize("raw,expected", [("", ""), ("\n", "\n"), ("abc\n", "abc\n"), ("abc", "abc\n")])
    def test_body_only(self, make_header, raw: str, expected: str) -> None:
        """Test rendering a body without the title line."""
        assert create_raw_description_text(make_header(raw_description=raw), False, False) == expected

    def test_dont_indent(self, make_header) -> None:
        """Test the positional dont_indent flag."""
        header = make_header("H", property_list_items=[PropertyListItem(name="ID", value=[Text(content="1")])])
        assert create_raw_description_text(header, False, True) == ":PROPERTIES:\n:ID: 1\n:END:\n"


@pytest.mark.unit
class TestSmallHelpers:
    """Tests for attributed_string_to_raw_text() and generate_title_line()."""

    def test_attributed_string_to_raw_text(self) -> None:
        """Test rendering a list of parts."""
        parts = [Text(content="Tasks "), FractionCookie(numerator=1, denominator=3)]
        assert attributed_string_to_raw_text(parts) == "Tasks [1/3]"
        assert attributed_string_to_raw_text(None) == ""

    def test_generate_title_line(self, make_header) -> None:
        """Test title text with and without stars."""
        header = make_header("Plan", level=3, todo_keyword="DONE")
        assert generate_title_line(header) == "*** DONE Plan"
        assert generate_title_line(header, include_stars=False) == "DONE Plan"

    def test_package_exports(self) -> None:
        """Test the package-level names."""
        assert orgexport.__version__
        for name in orgexport.__all__:
            assert hasattr(orgexport, name)
