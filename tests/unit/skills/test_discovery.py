"""Tests for skill discovery."""

from dataclasses import replace
from pathlib import Path

import pytest

from skilldocs.core.config import default_config
from skilldocs.core.errors import UnknownSkillError
from skilldocs.skills.discovery import discover_skills, find_skill
from tests.test_utils.skill_tree import SkillWriter


class TestDiscoverSkills:
    def test_empty_root(self, tmp_project: Path) -> None:
        assert discover_skills(tmp_project, default_config()) == []

    def test_missing_skills_dir(self, tmp_project: Path) -> None:
        config = replace(default_config(), skills_dir="does-not-exist")
        assert discover_skills(tmp_project, config) == []

    def test_discovers_skills_sorted(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("ui-ux-design")
        write_skill("devops-pipelines")

        skills = discover_skills(tmp_project, default_config())

        assert [s.name for s in skills] == ["devops-pipelines", "ui-ux-design"]
        assert skills[0].entry_point == tmp_project / "skills" / "devops-pipelines" / "SKILL.md"

    def test_collects_references(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill(
            "java-development",
            references={"spring.md": "# Spring", "testing/junit.md": "# JUnit", "notes.txt": "x"},
        )

        skill = discover_skills(tmp_project, default_config())[0]

        assert [p.relative_to(skill.directory).as_posix() for p in skill.references] == [
            "references/spring.md",
            "references/testing/junit.md",
        ]
        assert skill.documents[0] == skill.entry_point
        assert len(skill.documents) == 3

    def test_directory_without_skill_md_is_ignored(self, tmp_project: Path) -> None:
        (tmp_project / "skills" / "draft").mkdir(parents=True)
        (tmp_project / "skills" / "draft" / "README.md").write_text("# Draft", encoding="utf-8")

        assert discover_skills(tmp_project, default_config()) == []

    def test_excluded_directories(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("kept")
        write_skill("vendored", parent="node_modules/pkg")

        skills = discover_skills(tmp_project, default_config())

        assert [s.name for s in skills] == ["kept"]

    def test_skills_dir_restricts_search(
        self, tmp_project: Path, write_skill: SkillWriter
    ) -> None:
        write_skill("inside", parent="skills")
        write_skill("outside", parent="other")
        config = replace(default_config(), skills_dir="skills")

        assert [s.name for s in discover_skills(tmp_project, config)] == ["inside"]


class TestFindSkill:
    def test_found(self, tmp_project: Path, write_skill: SkillWriter) -> None:
        write_skill("testing-practices")

        skill = find_skill(tmp_project, default_config(), "testing-practices")

        assert skill.name == "testing-practices"

    def test_unknown(self, tmp_project: Path) -> None:
        with pytest.raises(UnknownSkillError, match="Skill 'nope' not found"):
            find_skill(tmp_project, default_config(), "nope")
