"""YAML frontmatter parsing for skill markdown files.

Only parsing lives here. Which fields a SKILL.md must declare is decided by
`skilldocs.skills.frontmatter`.
"""

import re
from dataclasses import dataclass

import frontmatter
import yaml

_OPENING_DELIMITER = re.compile(r"^---[ \t]*\r?$")
_CLOSING_DELIMITER = re.compile(r"^(---|\.\.\.)[ \t]*\r?$")


@dataclass(frozen=True)
class FrontmatterParseResult:
    """Result of parsing frontmatter from markdown content.

    Attributes:
        metadata: Parsed frontmatter mapping, or None if parsing failed.
        body: Content after the frontmatter block.
        error: Error message if parsing failed, None otherwise.
    """

    metadata: dict[str, object] | None
    body: str
    error: str | None

    @property
    def is_valid(self) -> bool:
        return self.metadata is not None


def parse_markdown_frontmatter(content: str) -> FrontmatterParseResult:
    """Parse YAML frontmatter from markdown content.

    Distinguishes between a document without frontmatter, frontmatter that is
    not valid YAML, and frontmatter that is valid YAML but not a mapping.
    """
    has_delimiters = body_start_line(content) > 0

    try:
        post = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises ValueError for date-shaped scalars that are not dates
        return FrontmatterParseResult(metadata=None, body=content, error=f"Invalid YAML: {e}")

    if not post.metadata:
        if has_delimiters:
            return FrontmatterParseResult(
                metadata=None,
                body=post.content,
                error="Frontmatter is not a valid YAML mapping",
            )
        return FrontmatterParseResult(metadata=None, body=content, error="No frontmatter found")

    return FrontmatterParseResult(metadata=dict(post.metadata), body=post.content, error=None)


def body_start_line(content: str) -> int:
    """Return the 0-based index of the first line after the frontmatter block.

    Returns 0 when the content has no (closed) frontmatter block.
    """
    lines = content.splitlines()
    if not lines or not _OPENING_DELIMITER.match(lines[0]):
        return 0
    for index in range(1, len(lines)):
        if _CLOSING_DELIMITER.match(lines[index]):
            return index + 1
    return 0
