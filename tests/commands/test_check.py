"""Tests for skilldocs check."""

import json
from pathlib import Path

from click.testing import CliRunner, Result

from skilldocs.cli.cli import cli
from tests.test_utils.skill_tree import SkillWriter


def _invoke(root: Path, *args: str) -> Result:
    runner = CliRunner()
    return runner.invoke(cli, ["--root", str(root), "check", *args])


class TestCheckCommand:
    def test_no_skills(self, tmp_project: Path) -> None:
        result = _invoke(tmp_project)

        assert result.exit_code == 0
        assert "No skills found" in result.output

    def test_passes(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("kubernetes-platform", "```yaml\nkind: Pod\nmetadata: {}\n```\n")

        result = _invoke(tmp_project)

        assert result.exit_code == 0, result.output
        assert "Skill docs check: PASSED" in result.output
        assert "Skills checked: 1" in result.output

    def test_fails_on_broken_link(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("kubernetes-platform", "[Istio](references/istio.md)\n")

        result = _invoke(tmp_project)

        assert result.exit_code == 1
        assert "FAIL skills/kubernetes-platform/SKILL.md" in result.output
        assert "[broken-link]" in result.output
        assert "Skill docs check: FAILED" in result.output

    def test_warnings_pass_unless_strict(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill(
            "ui-ux-design",
            "[Color](references/color.md)\n",
            references={"color.md": "# Color\n", "unused.md": "# Unused\n"},
        )

        relaxed = _invoke(tmp_project)
        strict = _invoke(tmp_project, "--strict")

        assert relaxed.exit_code == 0
        assert "WARN skills/ui-ux-design/references/unused.md" in relaxed.output
        assert strict.exit_code == 1

    def test_only_option(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("kubernetes-platform", "[Istio](references/istio.md)\n")

        result = _invoke(tmp_project, "--only", "code-blocks")

        assert result.exit_code == 0
        assert "Checks run: code-blocks" in result.output

    def test_only_rejects_unknown_check(self, tmp_project: Path) -> None:
        result = _invoke(tmp_project, "--only", "spelling")

        assert result.exit_code == 2

    def test_json_output(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("kubernetes-platform", "```\nkubectl get pods\n```\n")

        result = _invoke(tmp_project, "--json")

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["passed"] is False
        assert data["skills_checked"] == ["kubernetes-platform"]
        assert data["findings"][0]["rule"] == "code-fence-language"

    def test_config_error(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("kubernetes-platform")
        (tmp_project / ".skilldocs.toml").write_text("disabled_checks = 3\n", encoding="utf-8")

        result = _invoke(tmp_project)

        assert result.exit_code == 1
        assert "'disabled_checks' must be a list of strings" in result.output

    def test_disabled_checks_from_config(
        self, tmp_project: Path, write_skill: SkillWriter
    ) -> None:
        write_skill("kubernetes-platform", "[Istio](references/istio.md)\n")
        (tmp_project / ".skilldocs.toml").write_text(
            'disabled_checks = ["links"]\n', encoding="utf-8"
        )

        result = _invoke(tmp_project)

        assert result.exit_code == 0
