"""Run the enabled checks over every discovered skill."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from skilldocs.core.config import SkillDocsConfig
from skilldocs.core.constants import CHECK_NAMES
from skilldocs.lint.code_blocks import check_code_blocks
from skilldocs.lint.context import LintContext
from skilldocs.lint.frontmatter import check_frontmatter
from skilldocs.lint.links import check_links
from skilldocs.lint.models import Finding, LintReport
from skilldocs.lint.orphans import check_orphans
from skilldocs.lint.scope import check_scope
from skilldocs.skills.discovery import discover_skills

logger = logging.getLogger(__name__)

CheckFunction = Callable[[LintContext], list[Finding]]

CHECKS: dict[str, CheckFunction] = {
    "frontmatter": check_frontmatter,
    "links": check_links,
    "code-blocks": check_code_blocks,
    "scope": check_scope,
    "orphans": check_orphans,
}


def select_checks(config: SkillDocsConfig, only: Sequence[str]) -> list[str]:
    """Check ids to run: `only` if given, otherwise every enabled check."""
    if only:
        return [name for name in CHECK_NAMES if name in only]
    return [name for name in CHECK_NAMES if config.is_enabled(name)]


def _read_errors(ctx: LintContext) -> list[Finding]:
    findings: list[Finding] = []
    for skill in ctx.skills:
        for document_path in skill.documents:
            loaded = ctx.document(document_path)
            if loaded.error is None:
                continue
            findings.append(
                Finding(
                    check="read",
                    rule="unreadable-file",
                    severity="error",
                    path=ctx.relative(document_path),
                    line=None,
                    message=loaded.error,
                )
            )
    return findings


def run_checks(root: Path, config: SkillDocsConfig, *, only: Sequence[str] = ()) -> LintReport:
    """Discover skills under `root` and run checks against them.

    Args:
        root: Repository root.
        config: Loaded configuration.
        only: Restrict the run to these check ids. Disabled checks named
            here still run.

    Returns:
        LintReport with findings sorted by path and line.
    """
    skills = discover_skills(root, config)
    ctx = LintContext(root, config, skills)
    checks_run = select_checks(config, only)

    findings = _read_errors(ctx)
    for name in checks_run:
        logger.debug("Running check %s", name)
        findings.extend(CHECKS[name](ctx))

    findings.sort(key=lambda f: (f.path, f.line or 0, f.check, f.rule))
    return LintReport(
        skills_checked=[skill.name for skill in skills],
        documents_checked=sum(len(skill.documents) for skill in skills),
        checks_run=checks_run,
        findings=findings,
    )
