"""Line-oriented markdown scanning.

Extracts the pieces of a markdown document the checks care about: fenced
code blocks, headings (with GitHub anchor slugs), links, and bulleted scope
sections. Links and headings inside fenced code are ignored, as are links
inside inline code spans.
"""

import re
from dataclasses import dataclass
from typing import Literal
from urllib.parse import unquote

from skilldocs.core.frontmatter import body_start_line

ScopeKind = Literal["in", "out"]

_FENCE_OPEN = re.compile(r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_HEADING = re.compile(r"^ {0,3}(?P<hashes>#{1,6})(?:[ \t]+(?P<text>.*?))?(?:[ \t]+#+)?[ \t]*$")
_INLINE_CODE = re.compile(r"(`+)(?:.+?)\1")
_INLINE_LINK = re.compile(
    r"(?P<bang>!?)\[(?P<label>(?:[^\[\]]|\[[^\]]*\])*)\]"
    r"\(\s*(?P<target><[^>]*>|[^\s)]+)(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
_REFERENCE_DEFINITION = re.compile(
    r"^ {0,3}\[(?P<label>[^\]]+)\]:\s*(?P<target><[^>]*>|\S+)(?:\s+.*)?$"
)
_URL_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_BULLET = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(?P<text>.+)$")
_BOLD_LABEL = re.compile(r"^\s*(?:\*\*|__)(?P<label>[^*]+?)(?:\*\*|__)\s*:?\s*$")
_SCOPE_TITLE = re.compile(r"^(?P<kind>in|out[\s\-]+of)[\s\-]+scope\b", re.IGNORECASE)


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.

    Attributes:
        start_line: 1-based line of the opening fence.
        end_line: 1-based line of the closing fence, or the last line of the
            document when the fence is never closed.
        language: First word of the info string, or None when absent.
        body: Text between the fences.
        closed: Whether a matching closing fence was found.
    """

    start_line: int
    end_line: int
    language: str | None
    body: str
    closed: bool


@dataclass(frozen=True)
class Heading:
    line: int
    level: int
    text: str
    slug: str


@dataclass(frozen=True)
class MarkdownLink:
    """A link found in markdown text.

    Attributes:
        line: 1-based line number.
        label: Link text (or image alt text, or reference label).
        target: Raw link destination as written.
        is_image: True for `![alt](target)`.
    """

    line: int
    label: str
    target: str
    is_image: bool

    @property
    def is_external(self) -> bool:
        return bool(_URL_SCHEME.match(self.target)) or self.target.startswith("//")

    @property
    def is_anchor_only(self) -> bool:
        return self.target.startswith("#")

    @property
    def path(self) -> str:
        """Percent-decoded path part of the target, without fragment or query."""
        path = self.target.split("#", 1)[0].split("?", 1)[0]
        return unquote(path)

    @property
    def fragment(self) -> str | None:
        if "#" not in self.target:
            return None
        return unquote(self.target.split("#", 1)[1])


@dataclass(frozen=True)
class ScopeBullet:
    line: int
    text: str


@dataclass(frozen=True)
class ScopeSection:
    kind: ScopeKind
    line: int
    title: str
    bullets: list[ScopeBullet]


@dataclass(frozen=True)
class MarkdownDocument:
    """Scanned view of one markdown file."""

    code_blocks: list[CodeBlock]
    headings: list[Heading]
    links: list[MarkdownLink]
    scope_sections: list[ScopeSection]

    @property
    def anchors(self) -> set[str]:
        return {heading.slug for heading in self.headings}


def parse_markdown(content: str) -> MarkdownDocument:
    """Scan markdown content. Frontmatter lines are skipped but counted."""
    lines = content.splitlines()
    first_body_line = body_start_line(content)

    code_blocks: list[CodeBlock] = []
    prose_lines: list[tuple[int, str]] = []

    index = first_body_line
    while index < len(lines):
        line = lines[index]
        match = _FENCE_OPEN.match(line)
        if match is None or (match.group("fence")[0] == "`" and "`" in match.group("info")):
            prose_lines.append((index + 1, line))
            index += 1
            continue

        block, index = _consume_fence(lines, index, match)
        code_blocks.append(block)

    headings = _collect_headings(prose_lines)
    links = _collect_links(prose_lines)
    scope_sections = _collect_scope_sections(prose_lines)
    return MarkdownDocument(
        code_blocks=code_blocks,
        headings=headings,
        links=links,
        scope_sections=scope_sections,
    )


def _consume_fence(lines: list[str], start: int, match: re.Match[str]) -> tuple[CodeBlock, int]:
    fence = match.group("fence")
    info = match.group("info").strip()
    language = info.split()[0] if info else None
    if language is not None and language.startswith("{") and language.endswith("}"):
        # Pandoc-style attributes: ```{.python}
        language = language.strip("{}").lstrip(".") or None
    indent = len(match.group("indent"))
    closing = re.compile(rf"^[ \t]*{re.escape(fence[0])}{{{len(fence)},}}\s*$")

    body: list[str] = []
    index = start + 1
    while index < len(lines):
        if closing.match(lines[index]):
            block = CodeBlock(
                start_line=start + 1,
                end_line=index + 1,
                language=language,
                body="\n".join(body),
                closed=True,
            )
            return block, index + 1
        body.append(_strip_indent(lines[index], indent))
        index += 1

    block = CodeBlock(
        start_line=start + 1,
        end_line=len(lines),
        language=language,
        body="\n".join(body),
        closed=False,
    )
    return block, len(lines)


def _strip_indent(line: str, width: int) -> str:
    """Remove up to `width` leading spaces, the indent of a fence nested in a list."""
    stripped = line.lstrip(" \t")
    removed = len(line) - len(stripped)
    return line[min(removed, width) :]


def _collect_headings(prose_lines: list[tuple[int, str]]) -> list[Heading]:
    headings: list[Heading] = []
    seen: dict[str, int] = {}
    for line_number, line in prose_lines:
        match = _HEADING.match(line)
        if match is None:
            continue
        text = (match.group("text") or "").strip()
        base = slugify(text)
        count = seen.get(base, 0)
        seen[base] = count + 1
        slug = base if count == 0 else f"{base}-{count}"
        headings.append(
            Heading(line=line_number, level=len(match.group("hashes")), text=text, slug=slug)
        )
    return headings


def _collect_links(prose_lines: list[tuple[int, str]]) -> list[MarkdownLink]:
    links: list[MarkdownLink] = []
    for line_number, line in prose_lines:
        scrubbed = _INLINE_CODE.sub(lambda m: " " * len(m.group(0)), line)

        definition = _REFERENCE_DEFINITION.match(scrubbed)
        if definition is not None:
            links.append(
                MarkdownLink(
                    line=line_number,
                    label=definition.group("label"),
                    target=definition.group("target").strip("<>"),
                    is_image=False,
                )
            )
            continue

        for match in _INLINE_LINK.finditer(scrubbed):
            target = match.group("target").strip("<>").strip()
            if not target:
                continue
            links.append(
                MarkdownLink(
                    line=line_number,
                    label=match.group("label"),
                    target=target,
                    is_image=match.group("bang") == "!",
                )
            )
    return links


def _collect_scope_sections(prose_lines: list[tuple[int, str]]) -> list[ScopeSection]:
    sections: list[ScopeSection] = []
    current: ScopeSection | None = None

    for line_number, line in prose_lines:
        heading = _HEADING.match(line)
        label = _BOLD_LABEL.match(line)

        if heading is not None:
            title = (heading.group("text") or "").strip()
        elif label is not None:
            title = label.group("label").strip()
        else:
            if current is not None:
                bullet = _BULLET.match(line)
                if bullet is not None:
                    current.bullets.append(
                        ScopeBullet(line=line_number, text=bullet.group("text").strip())
                    )
            continue

        # Any heading or bold label ends the current section
        kind = scope_kind(title)
        if kind is None:
            current = None
            continue
        current = ScopeSection(kind=kind, line=line_number, title=title, bullets=[])
        sections.append(current)

    return sections


def scope_kind(title: str) -> ScopeKind | None:
    """Classify a heading title as an In Scope or Out of Scope section."""
    cleaned = re.sub(r"^[^\w]+", "", title.strip("*_ :"))
    match = _SCOPE_TITLE.match(cleaned)
    if match is None:
        return None
    return "in" if match.group("kind").lower() == "in" else "out"


def slugify(text: str) -> str:
    """GitHub-style heading anchor slug."""
    text = re.sub(r"`([^`]*)`", r"\1", text)
    text = re.sub(r"\[([^\]]*)\]\([^)]*\)", r"\1", text)
    slug = text.strip().lower()
    slug = re.sub(r"[^\w\- ]", "", slug)
    return slug.replace(" ", "-")
