"""Code block check: fences are closed and carry a language tag matching their body."""

import logging
from dataclasses import dataclass

from skilldocs.core.languages import (
    DETECTABLE_LANGUAGES,
    canonical_language,
    detect_language,
    is_compatible,
)
from skilldocs.core.markdown import CodeBlock
from skilldocs.lint.context import LintContext
from skilldocs.lint.models import Finding, Severity

logger = logging.getLogger(__name__)

CHECK = "code-blocks"


@dataclass(frozen=True)
class BlockProblem:
    rule: str
    severity: Severity
    message: str


def check_code_block(block: CodeBlock, extra_languages: tuple[str, ...]) -> list[BlockProblem]:
    """Check a single fenced block.

    A mismatch is only reported when the declared language is one the
    detector understands and the body is confidently something else.
    """
    problems: list[BlockProblem] = []

    if not block.closed:
        problems.append(
            BlockProblem("unclosed-code-fence", "error", "Code fence is never closed")
        )

    if block.language is None:
        problems.append(
            BlockProblem("code-fence-language", "error", "Code fence has no language tag")
        )
        return problems

    declared = canonical_language(block.language, extra_languages)
    if declared is None:
        problems.append(
            BlockProblem(
                "unknown-language", "warning", f"Unknown code fence language '{block.language}'"
            )
        )
        return problems

    if declared not in DETECTABLE_LANGUAGES:
        return problems

    detected = detect_language(block.body)
    if detected is not None and not is_compatible(declared, detected):
        problems.append(
            BlockProblem(
                "code-fence-mismatch",
                "warning",
                f"Code fence is tagged '{block.language}' but looks like {detected}",
            )
        )
    return problems


def check_code_blocks(ctx: LintContext) -> list[Finding]:
    """Check every fenced block in every skill document."""
    findings: list[Finding] = []
    for skill in ctx.skills:
        for document_path in skill.documents:
            loaded = ctx.document(document_path)
            if loaded.markdown is None:
                continue
            rel_path = ctx.relative(document_path)
            for block in loaded.markdown.code_blocks:
                for problem in check_code_block(block, ctx.config.extra_languages):
                    findings.append(
                        Finding(
                            check=CHECK,
                            rule=problem.rule,
                            severity=problem.severity,
                            path=rel_path,
                            line=block.start_line,
                            message=problem.message,
                        )
                    )
    logger.debug("Code block check produced %d finding(s)", len(findings))
    return findings
