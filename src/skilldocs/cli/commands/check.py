"""Check skill documentation health.

Runs the frontmatter, link, code block, scope and orphan checks over every
skill under the repository root.
"""

import json
from collections.abc import Sequence
from pathlib import Path

import click

from skilldocs.cli.context import CliContext
from skilldocs.core.config import SkillDocsConfig
from skilldocs.core.constants import CHECK_NAMES
from skilldocs.lint.models import Finding, LintReport
from skilldocs.lint.runner import run_checks


def _echo_finding(finding: Finding) -> None:
    location = f"line {finding.line}" if finding.line is not None else "file"
    color = "red" if finding.severity == "error" else "yellow"
    rule = click.style(f"[{finding.rule}]", fg=color)
    click.echo(f"    {location}: {rule} {finding.message}", err=True)


def _echo_report(report: LintReport, *, strict: bool) -> None:
    for path, findings in report.findings_by_path().items():
        has_errors = any(f.severity == "error" for f in findings)
        if has_errors:
            status = click.style("FAIL", fg="red")
        else:
            status = click.style("WARN", fg="yellow")
        click.echo(f"{status} {path}", err=True)
        for finding in findings:
            _echo_finding(finding)

    if report.findings:
        click.echo(err=True)

    click.echo(click.style("=" * 60, fg="cyan"), err=True)
    if report.passed(strict=strict):
        click.echo(click.style("Skill docs check: PASSED", fg="green", bold=True), err=True)
    else:
        click.echo(click.style("Skill docs check: FAILED", fg="red", bold=True), err=True)
    click.echo(err=True)
    click.echo(f"Skills checked: {len(report.skills_checked)}", err=True)
    click.echo(f"Files checked: {report.documents_checked}", err=True)
    click.echo(f"Checks run: {', '.join(report.checks_run) or '(none)'}", err=True)
    click.echo(f"Errors: {report.error_count}", err=True)
    click.echo(f"Warnings: {report.warning_count}", err=True)


def run_check(
    root: Path,
    config: SkillDocsConfig,
    *,
    only: Sequence[str],
    strict: bool,
    json_output: bool,
) -> None:
    """Run checks against a repository root and report.

    This is the testable core of the check command.

    Raises:
        SystemExit: With code 1 if checks fail.
    """
    report = run_checks(root, config, only=only)

    if json_output:
        click.echo(json.dumps(report.to_dict(strict=strict), indent=2))
        if not report.passed(strict=strict):
            raise SystemExit(1)
        return

    if not report.skills_checked:
        click.echo(click.style(f"No skills found under {root}", fg="cyan"), err=True)
        return

    _echo_report(report, strict=strict)
    if not report.passed(strict=strict):
        raise SystemExit(1)


@click.command("check")
@click.option(
    "--only",
    multiple=True,
    type=click.Choice(CHECK_NAMES),
    help="Run only this check (repeatable). Overrides disabled_checks.",
)
@click.option("--strict", is_flag=True, help="Treat warnings as failures")
@click.option("--json", "json_output", is_flag=True, help="Output the report as JSON")
@click.pass_obj
def check_cmd(ctx: CliContext, only: tuple[str, ...], strict: bool, json_output: bool) -> None:
    """Check skill documentation health.

    Validates SKILL.md frontmatter, relative links, code fence language tags,
    In Scope / Out of Scope consistency, and orphaned reference files.

    Exit codes:
    - 0: All checks passed
    - 1: One or more checks failed

    Examples:

    \b
      skilldocs check
      skilldocs check --only links --only code-blocks
      skilldocs check --strict --json
    """
    config = ctx.load_config()
    run_check(ctx.root, config, only=only, strict=strict, json_output=json_output)
