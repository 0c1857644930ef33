"""Shared fixtures for skilldocs tests."""

from pathlib import Path

import pytest

from tests.test_utils.skill_tree import SkillWriter, skill_markdown


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Alias for tmp_path with semantic meaning as a skills repository root."""
    return tmp_path


@pytest.fixture
def write_skill(tmp_project: Path) -> SkillWriter:
    """Create a skill directory with a SKILL.md and optional reference files.

    Returns the skill directory.
    """

    def _write(
        name: str,
        body: str = "# Skill\n",
        *,
        description: str = "Use when testing",
        references: dict[str, str] | None = None,
        parent: str = "skills",
        raw: str | None = None,
    ) -> Path:
        skill_dir = tmp_project / parent / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        content = raw if raw is not None else skill_markdown(name, description, body)
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        for filename, text in (references or {}).items():
            ref_path = skill_dir / "references" / filename
            ref_path.parent.mkdir(parents=True, exist_ok=True)
            ref_path.write_text(text, encoding="utf-8")
        return skill_dir

    return _write
