"""Tests for fundamentals/outline.py"""

from __future__ import annotations

from fundamentals.outline import Block, BlockKind, classify_line, parse_explanation

EXPLANATION = """What are B-Trees and B+ Trees?

B-Trees are self-balancing tree data structures.

Why Use These Structures?
- Minimize disk I/O operations
• Keep tree height low
   Indented paragraph.
"""


class TestParseExplanation:
    def test_blocks_in_order(self):
        blocks = parse_explanation(EXPLANATION)
        assert [b.kind for b in blocks] == [
            BlockKind.PARAGRAPH,
            BlockKind.PARAGRAPH,
            BlockKind.PARAGRAPH,
            BlockKind.LIST_ITEM,
            BlockKind.LIST_ITEM,
            BlockKind.PARAGRAPH,
        ]
        assert blocks[3].text == "Minimize disk I/O operations"
        assert blocks[5].text == "Indented paragraph."

    def test_blank_text_has_no_blocks(self):
        assert parse_explanation("\n   \n") == []

    def test_to_dict(self):
        assert Block(BlockKind.HEADING, "Key Differences:").to_dict() == {
            "kind": "heading",
            "text": "Key Differences:",
        }


class TestClassifyLine:
    def test_short_colon_line_is_heading(self):
        assert classify_line("  Key Differences:  ") == Block(BlockKind.HEADING, "Key Differences:")

    def test_long_colon_line_is_paragraph(self):
        line = "x" * 99 + ":"
        assert classify_line(line).kind == BlockKind.PARAGRAPH

    def test_question_line_is_paragraph(self):
        assert classify_line("Why Use These Structures?").kind == BlockKind.PARAGRAPH

    def test_dash_without_space_is_paragraph(self):
        assert classify_line("-not a bullet").kind == BlockKind.PARAGRAPH

    def test_blank_line_is_none(self):
        assert classify_line("   ") is None
