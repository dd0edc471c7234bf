#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_document_renderer.py
"""Unit tests for whole-file rendering."""

import pytest
from utils import DiagnosticCollector

from orgexport.ast import Document, PropertyListItem, Text, TodoKeywordSet, UnrecognizedPart
from orgexport.exceptions import InvalidOptionsError
from orgexport.options import BaseRendererOptions, OrgRendererOptions
from orgexport.renderers import DocumentRenderer, HeaderRenderer


@pytest.mark.unit
class TestPreamble:
    """Tests for the text before the first heading."""

    def test_empty_document(self) -> None:
        """Test that an empty document renders as empty text."""
        assert DocumentRenderer().render(Document()) == ""

    def test_lines_before_headings(self, make_header) -> None:
        """Test free text before the first heading."""
        document = Document(lines_before_headings=["Intro", "more"], headers=[make_header("H")])
        assert DocumentRenderer().render(document) == "Intro\nmore\n* H\n"

    def test_blank_line_before_headings(self, make_header) -> None:
        """Test a single blank line before the first heading."""
        document = Document(lines_before_headings=[""], headers=[make_header("H")])
        assert DocumentRenderer().render(document) == "* H\n"

    def test_file_config_lines(self) -> None:
        """Test that configuration lines are written first."""
        document = Document(file_config_lines=["#+TITLE: Notes", "#+STARTUP: overview"])
        assert DocumentRenderer().render(document) == "#+TITLE: Notes\n#+STARTUP: overview\n\n"

    def test_default_keyword_set_not_written(self) -> None:
        """Test that the built-in TODO/DONE set produces no output."""
        document = Document(todo_keyword_sets=[TodoKeywordSet(keywords=["TODO", "DONE"], default=True)])
        assert DocumentRenderer().render(document) == ""

    def test_custom_keyword_sets(self) -> None:
        """Test that custom keyword sequences are written back."""
        document = Document(
            todo_keyword_sets=[
                TodoKeywordSet(keywords=["TODO", "DONE"], config_line="#+TODO: TODO | DONE"),
                TodoKeywordSet(keywords=["BUG", "FIXED"], config_line="#+TYP_TODO: BUG | FIXED"),
            ]
        )
        assert DocumentRenderer().render(document) == "#+TODO: TODO | DONE\n#+TYP_TODO: BUG | FIXED\n\n"

    def test_full_preamble_order(self, make_header) -> None:
        """Test config lines, then keyword sets, then free text."""
        document = Document(
            file_config_lines=["#+TITLE: Notes"],
            todo_keyword_sets=[TodoKeywordSet(keywords=["A", "B"], config_line="#+TODO: A | B")],
            lines_before_headings=["Intro"],
            headers=[make_header("H")],
        )
        assert DocumentRenderer().render(document) == "#+TITLE: Notes\n#+TODO: A | B\nIntro\n* H\n"


@pytest.mark.unit
class TestHeadings:
    """Tests for heading output."""

    def test_headings_concatenated(self, make_header) -> None:
        """Test that headings follow each other directly."""
        document = Document(
            headers=[
                make_header("One", raw_description="first body"),
                make_header("Two", level=2),
                make_header("Three", raw_description="\n"),
            ]
        )
        assert DocumentRenderer().render(document) == "* One\nfirst body\n** Two\n* Three\n\n"

    def test_dont_indent_option(self, make_header) -> None:
        """Test that options reach the heading renderer."""
        header = make_header("H", property_list_items=[PropertyListItem(name="ID", value=[Text(content="1")])])
        renderer = DocumentRenderer(OrgRendererOptions(dont_indent=True))

        assert renderer.render(Document(headers=[header])) == "* H\n:PROPERTIES:\n:ID: 1\n:END:\n"

    def test_injected_header_renderer(self, make_header) -> None:
        """Test that a supplied heading renderer is used."""
        header_renderer = HeaderRenderer(OrgRendererOptions(dont_indent=True))
        renderer = DocumentRenderer(header_renderer=header_renderer)

        assert renderer.header_renderer is header_renderer

    def test_diagnostics_forwarded(self, make_header) -> None:
        """Test that unknown parts anywhere in the file are reported."""
        collector = DiagnosticCollector()
        header = make_header("H", property_list_items=[PropertyListItem(name="X", value=[UnrecognizedPart(part_type="q")])])

        DocumentRenderer(diagnostic_callback=collector).render(Document(headers=[header]))

        assert collector.event_types == ["unknown_part"]

    def test_wrong_options_type(self) -> None:
        """Test that a foreign options class is rejected."""
        with pytest.raises(InvalidOptionsError):
            DocumentRenderer(BaseRendererOptions())
