#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_list_renderer.py
"""Unit tests for plain list rendering.

Tests cover:
- Bullets and ordered numbering, including ``[@N]`` counters
- Checkbox glyphs
- Indentation of item contents

"""

import pytest
from utils import text_list

from orgexport.ast import List, ListItem, Text
from orgexport.renderers import AttributedTextRenderer


def render_list(node: List) -> str:
    return AttributedTextRenderer().list_renderer.render(node)


@pytest.mark.unit
class TestBullets:
    """Tests for unordered lists."""

    def test_dash_bullets(self) -> None:
        """Test the default dash bullet."""
        assert render_list(text_list("one", "two")) == "- one\n- two"

    def test_plus_bullets(self) -> None:
        """Test a plus bullet."""
        assert render_list(text_list("one", bullet_character="+")) == "+ one"

    def test_star_bullets_are_indented(self) -> None:
        """Test that star bullets get a leading space so they are not headings."""
        assert render_list(text_list("one", "two", bullet_character="*")) == " * one\n * two"

    def test_empty_list(self) -> None:
        """Test that a list without items renders as empty text."""
        assert render_list(List()) == ""

    def test_empty_title(self) -> None:
        """Test an item without title text."""
        assert render_list(List(items=[ListItem()])) == "- "


@pytest.mark.unit
class TestNumbering:
    """Tests for ordered lists."""

    def test_sequential_numbers(self) -> None:
        """Test that items are numbered from 1."""
        assert render_list(text_list("a", "b", "c", is_ordered=True)) == "1. a\n2. b\n3. c"

    def test_parenthesis_terminator(self) -> None:
        """Test the ``)`` number terminator."""
        result = render_list(text_list("a", "b", is_ordered=True, number_terminator_character=")"))
        assert result == "1) a\n2) b"

    def test_forced_number_continues_counter(self) -> None:
        """Test that a ``[@N]`` cookie resets the counter."""
        node = List(
            is_ordered=True,
            items=[
                ListItem(title_line=[Text(content="a")]),
                ListItem(title_line=[Text(content="b")], force_number=5),
                ListItem(title_line=[Text(content="c")]),
            ],
        )
        assert render_list(node) == "1. a\n5. [@5] b\n6. c"

    def test_forced_number_on_first_item(self) -> None:
        """Test a counter on the first item."""
        node = List(
            is_ordered=True,
            items=[ListItem(title_line=[Text(content="a")], force_number=3), ListItem(title_line=[Text(content="b")])],
        )
        assert render_list(node) == "3. [@3] a\n4. b"

    def test_forced_number_ignored_in_unordered_list(self) -> None:
        """Test that unordered lists never print counters."""
        node = List(items=[ListItem(title_line=[Text(content="a")], force_number=7)])
        assert render_list(node) == "- a"

    def test_counter_does_not_leak_between_renders(self) -> None:
        """Test that rendering is re-entrant."""
        renderer = AttributedTextRenderer().list_renderer
        node = text_list("a", "b", is_ordered=True)
        assert renderer.render(node) == renderer.render(node) == "1. a\n2. b"


@pytest.mark.unit
class TestCheckboxes:
    """Tests for checkbox items."""

    @pytest.mark.parametrize("state,glyph", [("checked", "[X]"), ("unchecked", "[ ]"), ("partial", "[-]")])
    def test_checkbox_glyphs(self, state: str, glyph: str) -> None:
        """Test the glyph for each checkbox state."""
        node = List(items=[ListItem(title_line=[Text(content="task")], is_checkbox=True, checkbox_state=state)])
        assert render_list(node) == f"- {glyph} task"

    def test_state_ignored_without_checkbox(self) -> None:
        """Test that checkbox_state has no effect on plain items."""
        node = List(items=[ListItem(title_line=[Text(content="task")], checkbox_state="checked")])
        assert render_list(node) == "- task"

    def test_checkbox_after_counter(self) -> None:
        """Test the order of counter and checkbox in an ordered item."""
        node = List(
            is_ordered=True,
            items=[ListItem(title_line=[Text(content="task")], force_number=5, is_checkbox=True, checkbox_state="checked")],
        )
        assert render_list(node) == "5. [@5] [X] task"


@pytest.mark.unit
class TestItemContents:
    """Tests for continuation lines below an item."""

    def test_contents_indented_two_spaces(self) -> None:
        """Test that contents are indented under the bullet."""
        node = List(items=[ListItem(title_line=[Text(content="a")], contents=[Text(content="line 1\nline 2")])])
        assert render_list(node) == "- a\n  line 1\n  line 2"

    def test_blank_content_lines_become_empty(self) -> None:
        """Test that blank lines carry no indentation."""
        node = List(items=[ListItem(title_line=[Text(content="a")], contents=[Text(content="x\n   \ny")])])
        assert render_list(node) == "- a\n  x\n\n  y"

    def test_star_list_contents_indented_three_spaces(self) -> None:
        """Test the extra space for star bullets."""
        node = List(
            bullet_character="*",
            items=[ListItem(title_line=[Text(content="a")], contents=[Text(content="more")])],
        )
        assert render_list(node) == " * a\n   more"

    def test_nested_list(self) -> None:
        """Test a list inside an item's contents."""
        inner = text_list("inner 1", "inner 2")
        node = List(items=[ListItem(title_line=[Text(content="outer")], contents=[inner])])
        assert render_list(node) == "- outer\n  - inner 1\n  - inner 2"

    def test_contents_between_items(self) -> None:
        """Test that the next item follows the previous item's contents."""
        node = List(
            items=[
                ListItem(title_line=[Text(content="a")], contents=[Text(content="detail")]),
                ListItem(title_line=[Text(content="b")]),
            ]
        )
        assert render_list(node) == "- a\n  detail\n- b"
