"""Discover skills below a repository root."""

import logging
from pathlib import Path

from skilldocs.core.config import SkillDocsConfig
from skilldocs.core.constants import REFERENCES_DIRNAME, SKILL_FILENAME
from skilldocs.core.errors import UnknownSkillError
from skilldocs.skills.models import Skill

logger = logging.getLogger(__name__)


def _is_excluded(path: Path, search_root: Path, exclude: tuple[str, ...]) -> bool:
    relative_parts = path.relative_to(search_root).parts[:-1]
    return any(part in exclude for part in relative_parts)


def _discover_references(skill_dir: Path) -> tuple[Path, ...]:
    """Collect reference files.

    Pattern: <skill>/references/**/*.md
    """
    references_dir = skill_dir / REFERENCES_DIRNAME
    if not references_dir.is_dir():
        return ()
    return tuple(sorted(p for p in references_dir.rglob("*.md") if p.is_file()))


def discover_skills(root: Path, config: SkillDocsConfig) -> list[Skill]:
    """Scan for skills and return them sorted by path.

    Skills are identified by their SKILL.md entry point file.
    Pattern: <skills_dir>/**/<skill-name>/SKILL.md
    """
    search_root = root / config.skills_dir
    if not search_root.is_dir():
        logger.debug("Skills directory %s does not exist", search_root)
        return []

    skills: list[Skill] = []
    for skill_file in sorted(search_root.rglob(SKILL_FILENAME)):
        if not skill_file.is_file():
            continue
        if _is_excluded(skill_file, search_root, config.exclude):
            logger.debug("Skipping excluded %s", skill_file)
            continue
        skill_dir = skill_file.parent
        skills.append(
            Skill(
                name=skill_dir.resolve().name,
                directory=skill_dir,
                entry_point=skill_file,
                references=_discover_references(skill_dir),
            )
        )

    logger.debug("Discovered %d skill(s) under %s", len(skills), search_root)
    return skills


def find_skill(root: Path, config: SkillDocsConfig, name: str) -> Skill:
    """Return the skill with the given directory name.

    Raises:
        UnknownSkillError: If no such skill exists.
    """
    for skill in discover_skills(root, config):
        if skill.name == name:
            return skill
    raise UnknownSkillError(name)
