"""Tests for front-matter extraction."""

from __future__ import annotations

import pytest

from agentnet.core.frontmatter import FrontMatterError, extract_front_matter


class TestExtractFrontMatter:
    def test_header_and_body(self) -> None:
        doc = extract_front_matter("---\nname: x\nprimary: true\n---\n\nBody text.\n\n")
        assert doc.header == {"name": "x", "primary": True}
        assert doc.body == "Body text."

    def test_crlf_delimiters(self) -> None:
        doc = extract_front_matter("---\r\nname: x\r\n---\r\nBody\r\n")
        assert doc.header == {"name": "x"}
        assert doc.body == "Body"

    def test_empty_body(self) -> None:
        doc = extract_front_matter("---\nname: x\n---\n")
        assert doc.body == ""

    def test_body_may_contain_delimiters(self) -> None:
        doc = extract_front_matter("---\na: 1\n---\ntext\n---\nmore\n")
        assert doc.header == {"a": 1}
        assert doc.body == "text\n---\nmore"

    def test_missing_opening_delimiter(self) -> None:
        with pytest.raises(FrontMatterError) as excinfo:
            extract_front_matter("name: x\n---\nBody\n")
        assert excinfo.value.condition == "missing-delimiters"

    def test_missing_closing_delimiter(self) -> None:
        with pytest.raises(FrontMatterError):
            extract_front_matter("---\nname: x\nBody\n")

    def test_header_must_start_the_document(self) -> None:
        with pytest.raises(FrontMatterError):
            extract_front_matter("\n---\nname: x\n---\nBody\n")

    def test_closing_delimiter_needs_newline(self) -> None:
        with pytest.raises(FrontMatterError):
            extract_front_matter("---\nname: x\n---")

    def test_error_message(self) -> None:
        with pytest.raises(FrontMatterError, match="Missing front matter delimiters"):
            extract_front_matter("no header here")
