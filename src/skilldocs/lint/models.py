"""Data models for lint results."""

from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class Finding:
    """A single problem found in a skill document.

    Attributes:
        check: Check that produced the finding (e.g., "links").
        rule: Specific rule id within the check (e.g., "broken-link").
        severity: "error" fails the run, "warning" only in strict mode.
        path: File path relative to the repository root, POSIX separators.
        line: 1-based line number, or None for file-level findings.
        message: Human-readable description.
    """

    check: str
    rule: str
    severity: Severity
    path: str
    line: int | None
    message: str

    @property
    def location(self) -> str:
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"

    def to_dict(self) -> dict[str, object]:
        return {
            "check": self.check,
            "rule": self.rule,
            "severity": self.severity,
            "path": self.path,
            "line": self.line,
            "message": self.message,
        }


@dataclass(frozen=True)
class LintReport:
    """Result of running checks over a repository.

    Attributes:
        skills_checked: Names of the skills that were checked.
        documents_checked: Number of markdown files read.
        checks_run: Check ids that ran, in order.
        findings: All findings, sorted by path then line.
    """

    skills_checked: list[str]
    documents_checked: int
    checks_run: list[str]
    findings: list[Finding] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "warning")

    def passed(self, *, strict: bool) -> bool:
        if strict:
            return len(self.findings) == 0
        return self.error_count == 0

    def findings_by_path(self) -> dict[str, list[Finding]]:
        grouped: dict[str, list[Finding]] = {}
        for finding in self.findings:
            grouped.setdefault(finding.path, []).append(finding)
        return grouped

    def to_dict(self, *, strict: bool) -> dict[str, object]:
        return {
            "passed": self.passed(strict=strict),
            "skills_checked": self.skills_checked,
            "documents_checked": self.documents_checked,
            "checks_run": self.checks_run,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "findings": [f.to_dict() for f in self.findings],
        }
