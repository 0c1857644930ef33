"""Scope check: In Scope / Out of Scope bullets are consistent.

A skill may not list the same item both in and out of scope. Two skills
claiming the same item in scope overlap, which is reported as a warning.
One skill deferring an item (Out of Scope) that another claims is the
intended arrangement and is not reported.
"""

import logging
import re
from dataclasses import dataclass
from difflib import SequenceMatcher

from skilldocs.core.markdown import ScopeKind
from skilldocs.lint.context import LintContext
from skilldocs.lint.models import Finding

logger = logging.getLogger(__name__)

CHECK = "scope"


@dataclass(frozen=True)
class ScopeClaim:
    """A normalised scope bullet of one skill."""

    skill: str
    path: str
    line: int
    kind: ScopeKind
    text: str
    normalized: str


def normalize_bullet(text: str) -> str:
    """Reduce a bullet to comparable words.

    Strips link and inline-code markup, emphasis, punctuation and case.
    """
    text = re.sub(r"!?\[([^\]]*)\]\([^)]*\)", r"\1", text)
    text = text.replace("`", "")
    text = re.sub(r"[*_~]", "", text)
    text = text.lower()
    text = re.sub(r"[^\w\s]", " ", text)
    return " ".join(text.split())


def bullets_match(a: str, b: str, similarity: float) -> bool:
    if not a or not b:
        return False
    if a == b:
        return True
    if similarity >= 1.0:
        return False
    return SequenceMatcher(None, a, b).ratio() >= similarity


def collect_scope_claims(ctx: LintContext) -> list[ScopeClaim]:
    """Collect scope bullets from every SKILL.md."""
    claims: list[ScopeClaim] = []
    for skill in ctx.skills:
        loaded = ctx.document(skill.entry_point)
        if loaded.markdown is None:
            continue
        path = ctx.relative(skill.entry_point)
        for section in loaded.markdown.scope_sections:
            for bullet in section.bullets:
                claims.append(
                    ScopeClaim(
                        skill=skill.name,
                        path=path,
                        line=bullet.line,
                        kind=section.kind,
                        text=bullet.text,
                        normalized=normalize_bullet(bullet.text),
                    )
                )
    return claims


def check_scope(ctx: LintContext) -> list[Finding]:
    claims = collect_scope_claims(ctx)
    similarity = ctx.config.scope_similarity
    findings: list[Finding] = []

    in_scope = [c for c in claims if c.kind == "in"]
    out_of_scope = [c for c in claims if c.kind == "out"]

    for claim in in_scope:
        for other in out_of_scope:
            if other.path != claim.path:
                continue
            if bullets_match(claim.normalized, other.normalized, similarity):
                findings.append(
                    Finding(
                        check=CHECK,
                        rule="scope-conflict",
                        severity="error",
                        path=claim.path,
                        line=claim.line,
                        message=(
                            f"'{claim.text}' is listed In Scope and Out of Scope "
                            f"(line {other.line})"
                        ),
                    )
                )

    for index, claim in enumerate(in_scope):
        for earlier in in_scope[:index]:
            if earlier.path == claim.path:
                continue
            if bullets_match(claim.normalized, earlier.normalized, similarity):
                findings.append(
                    Finding(
                        check=CHECK,
                        rule="scope-overlap",
                        severity="warning",
                        path=claim.path,
                        line=claim.line,
                        message=(
                            f"'{claim.text}' is also claimed In Scope by skill "
                            f"'{earlier.skill}' ({earlier.path}:{earlier.line})"
                        ),
                    )
                )

    logger.debug("Scope check compared %d bullet(s)", len(claims))
    return findings
