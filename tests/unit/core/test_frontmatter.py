"""Tests for skill markdown frontmatter parsing."""

from skilldocs.core.frontmatter import body_start_line, parse_markdown_frontmatter


def test_parse_valid_frontmatter() -> None:
    """Parse content with valid YAML frontmatter."""
    content = """\
---
name: kubernetes-platform
description: Use when writing Kubernetes manifests
---

Body content here.
"""
    result = parse_markdown_frontmatter(content)

    assert result.is_valid
    assert result.error is None
    assert result.metadata == {
        "name": "kubernetes-platform",
        "description": "Use when writing Kubernetes manifests",
    }
    assert result.body == "Body content here."


def test_parse_no_frontmatter() -> None:
    """Return error when content has no frontmatter."""
    content = "# Skill\n\nJust plain markdown content."

    result = parse_markdown_frontmatter(content)

    assert not result.is_valid
    assert result.error == "No frontmatter found"
    assert result.body == content


def test_parse_invalid_yaml() -> None:
    """Return error when frontmatter contains invalid YAML."""
    content = """\
---
name: [unclosed bracket
---

Body.
"""
    result = parse_markdown_frontmatter(content)

    assert not result.is_valid
    assert result.error is not None
    assert "Invalid YAML" in result.error


def test_parse_impossible_date() -> None:
    """A date-shaped value that is not a real date is reported, not raised."""
    content = """\
---
name: devops-pipelines
updated: 2024-13-45
---

Body.
"""
    result = parse_markdown_frontmatter(content)

    assert not result.is_valid
    assert result.error is not None
    assert result.error.startswith("Invalid YAML")


def test_parse_non_mapping_frontmatter() -> None:
    """Return error when frontmatter is a list instead of a mapping."""
    content = """\
---
- name
- description
---

Body.
"""
    result = parse_markdown_frontmatter(content)

    assert not result.is_valid
    assert result.error == "Frontmatter is not a valid YAML mapping"


def test_parse_empty_frontmatter_with_delimiters() -> None:
    """Empty frontmatter between delimiters is not a mapping."""
    content = "---\n---\n\nBody content.\n"

    result = parse_markdown_frontmatter(content)

    assert not result.is_valid
    assert result.error == "Frontmatter is not a valid YAML mapping"


class TestBodyStartLine:
    def test_no_frontmatter(self) -> None:
        assert body_start_line("# Title\n\ntext\n") == 0

    def test_after_closing_delimiter(self) -> None:
        content = "---\nname: x\ndescription: y\n---\n# Title\n"
        assert body_start_line(content) == 4

    def test_unclosed_frontmatter(self) -> None:
        """An opening delimiter without a closing one is not frontmatter."""
        assert body_start_line("---\nname: x\n# Title\n") == 0
