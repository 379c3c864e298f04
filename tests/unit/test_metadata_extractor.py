"""Unit tests for heading metadata extraction."""

import pytest

from src.core.domain import UNTITLED_DOCUMENT
from src.core.services.metadata_extractor import extract_metadata

pytestmark = pytest.mark.unit


class TestExtractMetadata:
    """Tests for extract_metadata."""

    def test_title_and_bracketed_description(self):
        meta = extract_metadata("# Doc One [A sample]\n\nBody")
        assert meta.title == "Doc One"
        assert meta.description == "A sample"

    def test_heading_without_bracket(self):
        meta = extract_metadata("# Getting Started\n\nBody")
        assert meta.title == "Getting Started"
        assert meta.description == ""

    def test_no_heading_falls_back_to_placeholder(self):
        meta = extract_metadata("Just text\nwithout any heading")
        assert meta.title == UNTITLED_DOCUMENT == "Untitled Document"
        assert meta.description == ""

    def test_empty_content(self):
        meta = extract_metadata("")
        assert meta.title == "Untitled Document"
        assert meta.description == ""

    def test_first_heading_wins(self):
        meta = extract_metadata("intro\n# First [one]\n# Second [two]")
        assert meta.title == "First"
        assert meta.description == "one"

    def test_heading_not_on_first_line(self):
        meta = extract_metadata("---\nfront: matter\n---\n# Setup Guide")
        assert meta.title == "Setup Guide"

    def test_second_level_heading_is_not_a_title(self):
        meta = extract_metadata("## Section only\nBody")
        assert meta.title == "Untitled Document"

    def test_whitespace_is_trimmed(self):
        meta = extract_metadata("#   Padded Title   [  padded description  ]")
        assert meta.title == "Padded Title"
        assert meta.description == "padded description"

    def test_empty_brackets_give_empty_description(self):
        meta = extract_metadata("# Title []")
        assert meta.title == "Title"
        assert meta.description == ""

    def test_bracket_not_at_end_stays_in_title(self):
        meta = extract_metadata("# Use [brackets] inline")
        assert meta.title == "Use [brackets] inline"
        assert meta.description == ""

    def test_crlf_heading_keeps_description(self):
        meta = extract_metadata("# Doc One [A sample]\r\n\r\nBody")
        assert meta.title == "Doc One"
        assert meta.description == "A sample"

    def test_crlf_heading_without_bracket(self):
        meta = extract_metadata("# Getting Started\r\nBody")
        assert meta.title == "Getting Started"
        assert meta.description == ""
