"""Frontmatter check: SKILL.md declares a valid name and description."""

import logging

from skilldocs.lint.context import LintContext
from skilldocs.lint.models import Finding
from skilldocs.skills.frontmatter import read_skill_frontmatter

logger = logging.getLogger(__name__)

CHECK = "frontmatter"


def check_frontmatter(ctx: LintContext) -> list[Finding]:
    """Validate the frontmatter of every SKILL.md and detect duplicate names."""
    findings: list[Finding] = []
    owners: dict[str, str] = {}

    for skill in ctx.skills:
        loaded = ctx.document(skill.entry_point)
        if loaded.content is None:
            # Reported by the runner as a read error
            continue

        path = ctx.relative(skill.entry_point)
        frontmatter, errors = read_skill_frontmatter(
            loaded.content,
            required_fields=ctx.config.required_fields,
            directory_name=skill.name,
        )
        for error in errors:
            findings.append(
                Finding(
                    check=CHECK,
                    rule="invalid-frontmatter",
                    severity="error",
                    path=path,
                    line=1,
                    message=error,
                )
            )
        if frontmatter is None:
            continue

        first_owner = owners.get(frontmatter.name)
        if first_owner is not None:
            findings.append(
                Finding(
                    check=CHECK,
                    rule="duplicate-name",
                    severity="error",
                    path=path,
                    line=1,
                    message=f"Skill name '{frontmatter.name}' is already used by {first_owner}",
                )
            )
        else:
            owners[frontmatter.name] = path

    logger.debug("Frontmatter check produced %d finding(s)", len(findings))
    return findings
