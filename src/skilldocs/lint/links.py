"""Link check: relative links in skill documents resolve.

External links (with a URL scheme) are never fetched. Fragments pointing at
markdown files are checked against the target's heading anchors.
"""

import logging
from pathlib import Path

from skilldocs.core.markdown import MarkdownLink
from skilldocs.lint.context import LintContext
from skilldocs.lint.models import Finding, Severity

logger = logging.getLogger(__name__)

CHECK = "links"


def is_valid_link_path(path: str) -> bool:
    """Whether a decoded link path can name a file (`%00` decodes to NUL)."""
    return "\x00" not in path


def resolve_link(link: MarkdownLink, source: Path, root: Path) -> Path | None:
    """Resolve a relative link target to an absolute path.

    Returns None for external and anchor-only links, and for targets that
    cannot name a file. A leading slash resolves against the repository root
    rather than the filesystem root.
    """
    if link.is_external or link.is_anchor_only or not link.path:
        return None
    if not is_valid_link_path(link.path):
        return None
    if link.path.startswith("/"):
        return (root / link.path.lstrip("/")).resolve()
    return (source.parent / link.path).resolve()


def check_links(ctx: LintContext) -> list[Finding]:
    """Check every relative link in every SKILL.md and reference file."""
    findings: list[Finding] = []
    for skill in ctx.skills:
        for document_path in skill.documents:
            findings.extend(_check_document_links(ctx, document_path))
    logger.debug("Link check produced %d finding(s)", len(findings))
    return findings


def _check_document_links(ctx: LintContext, document_path: Path) -> list[Finding]:
    loaded = ctx.document(document_path)
    if loaded.markdown is None:
        return []

    rel_path = ctx.relative(document_path)
    findings: list[Finding] = []

    for link in loaded.markdown.links:
        if link.is_external:
            continue

        if link.is_anchor_only:
            fragment = link.fragment or ""
            if fragment and fragment.lower() not in loaded.markdown.anchors:
                findings.append(
                    _finding(
                        "missing-anchor",
                        "warning",
                        rel_path,
                        link,
                        f"Anchor '#{fragment}' not found in this document",
                    )
                )
            continue

        if not is_valid_link_path(link.path):
            findings.append(
                _finding(
                    "broken-link",
                    "error",
                    rel_path,
                    link,
                    f"Link target '{link.target}' is not a valid path",
                )
            )
            continue

        target = resolve_link(link, document_path, ctx.root)
        if target is None:
            continue

        if not target.is_relative_to(ctx.root):
            findings.append(
                _finding(
                    "link-outside-root",
                    "error",
                    rel_path,
                    link,
                    f"Link '{link.target}' points outside the repository",
                )
            )
            continue

        if not target.exists():
            findings.append(
                _finding(
                    "broken-link",
                    "error",
                    rel_path,
                    link,
                    f"Link target '{link.target}' does not exist",
                )
            )
            continue

        fragment = link.fragment
        if fragment and target.is_file() and target.suffix.lower() == ".md":
            target_doc = ctx.document(target)
            anchors = target_doc.markdown.anchors if target_doc.markdown is not None else None
            if anchors is not None and fragment.lower() not in anchors:
                findings.append(
                    _finding(
                        "missing-anchor",
                        "warning",
                        rel_path,
                        link,
                        f"Anchor '#{fragment}' not found in {ctx.relative(target)}",
                    )
                )

    return findings


def _finding(rule: str, severity: Severity, path: str, link: MarkdownLink, message: str) -> Finding:
    return Finding(
        check=CHECK,
        rule=rule,
        severity=severity,
        path=path,
        line=link.line,
        message=message,
    )
