"""Orphaned reference detection.

A reference file is orphaned when nothing reachable from its skill's
SKILL.md links to it.
"""

import logging
from pathlib import Path

from skilldocs.lint.context import LintContext
from skilldocs.lint.links import resolve_link
from skilldocs.lint.models import Finding
from skilldocs.skills.models import Skill

logger = logging.getLogger(__name__)

CHECK = "orphans"


def reachable_documents(ctx: LintContext, skill: Skill) -> set[Path]:
    """Markdown files reachable from SKILL.md by following relative links."""
    start = skill.entry_point.resolve()
    seen: set[Path] = {start}
    pending = [start]

    while pending:
        current = pending.pop()
        loaded = ctx.document(current)
        if loaded.markdown is None:
            continue
        for link in loaded.markdown.links:
            target = resolve_link(link, current, ctx.root)
            if target is None or target in seen:
                continue
            if target.suffix.lower() != ".md" or not target.is_file():
                continue
            if not target.is_relative_to(skill.directory.resolve()):
                continue
            seen.add(target)
            pending.append(target)

    return seen


def check_orphans(ctx: LintContext) -> list[Finding]:
    findings: list[Finding] = []
    for skill in ctx.skills:
        if not skill.references:
            continue
        reachable = reachable_documents(ctx, skill)
        for reference in skill.references:
            if reference.resolve() in reachable:
                continue
            findings.append(
                Finding(
                    check=CHECK,
                    rule="orphan-reference",
                    severity="warning",
                    path=ctx.relative(reference),
                    line=None,
                    message=f"Not linked from {ctx.relative(skill.entry_point)}",
                )
            )
    logger.debug("Orphan check produced %d finding(s)", len(findings))
    return findings
