"""Tests for skilldocs list."""

import json
from pathlib import Path

from click.testing import CliRunner

from skilldocs.cli.cli import cli
from tests.test_utils.skill_tree import SkillWriter


def test_list_no_skills(tmp_project: Path) -> None:
    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "list"])

    assert result.exit_code == 0
    assert "No skills found" in result.output


def test_list_shows_skills(tmp_project: Path, write_skill: SkillWriter) -> None:
    write_skill("kubernetes-platform", description="Use for Kubernetes manifests")
    write_skill("broken", raw="# no frontmatter\n")

    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "list"])

    assert result.exit_code == 0
    assert "kubernetes-platform" in result.output
    assert "Use for Kubernetes manifests" in result.output
    assert "invalid" in result.output


def test_list_json(tmp_project: Path, write_skill: SkillWriter) -> None:
    write_skill(
        "testing-practices",
        description="Use for Jest and JUnit",
        references={"jest.md": "# Jest\n"},
    )

    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "list", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {
            "name": "testing-practices",
            "path": "skills/testing-practices/SKILL.md",
            "description": "Use for Jest and JUnit",
            "references": 1,
            "valid": True,
            "errors": [],
        }
    ]


def test_list_rejects_skills_dir_outside_root(tmp_project: Path) -> None:
    (tmp_project / ".skilldocs.toml").write_text('skills_dir = "../shared"\n', encoding="utf-8")

    result = CliRunner().invoke(cli, ["--root", str(tmp_project), "list"])

    assert result.exit_code == 1
    assert "'skills_dir' must be a relative path inside the root" in result.output
