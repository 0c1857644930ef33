"""Tests for skilldocs show."""

from pathlib import Path

from click.testing import CliRunner

from skilldocs.cli.cli import cli
from tests.test_utils.skill_tree import SkillWriter

BODY = """\
# Testing Practices

See [Jest](references/jest.md).

## In Scope

- Unit testing with Jest

## Out of Scope

- Load testing
"""


def test_show_skill(tmp_project: Path, write_skill: SkillWriter) -> None:
    write_skill(
        "testing-practices",
        BODY,
        description="Use when writing tests",
        references={"jest.md": "# Jest\n"},
    )

    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "show", "testing-practices"])

    assert result.exit_code == 0, result.output
    assert "Description: Use when writing tests" in result.output
    assert "In Scope:" in result.output
    assert "  - Unit testing with Jest" in result.output
    assert "  - Load testing" in result.output
    assert "References (1):" in result.output
    assert "references/jest.md" in result.output
    assert "line 8: references/jest.md" in result.output


def test_show_invalid_frontmatter(tmp_project: Path, write_skill: SkillWriter) -> None:
    write_skill("broken", raw="# Broken\n")

    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "show", "broken"])

    assert result.exit_code == 0
    assert "Invalid frontmatter:" in result.output
    assert "No frontmatter found" in result.output


def test_show_unknown_skill(tmp_project: Path) -> None:
    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "show", "missing"])

    assert result.exit_code == 1
    assert "Skill 'missing' not found" in result.output


def test_show_undecodable_skill(tmp_project: Path, write_skill: SkillWriter) -> None:
    skill_dir = write_skill("ui-ux-design")
    (skill_dir / "SKILL.md").write_bytes(b"---\nname: ui-ux-design\n\xff\xfe\n---\n")

    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "show", "ui-ux-design"])

    assert result.exit_code == 1
    assert "Error: Cannot read skills/ui-ux-design/SKILL.md" in result.output
    assert "Traceback" not in result.output
