"""Generate the skills catalog from SKILL.md frontmatter.

The catalog is a single markdown file (SKILLS.md by default) listing every
skill with a valid frontmatter, so a reader can decide which skill is
relevant before opening it.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from skilldocs.core.config import SkillDocsConfig
from skilldocs.skills.discovery import discover_skills
from skilldocs.skills.frontmatter import load_skill_frontmatter
from skilldocs.skills.models import Skill, SkillFrontmatter

logger = logging.getLogger(__name__)

CATALOG_MARKER = "<!-- AUTO-GENERATED FILE - run 'skilldocs sync' to regenerate -->"

SyncStatus = Literal["created", "updated", "unchanged"]


@dataclass(frozen=True)
class CatalogEntry:
    """A skill listed in the catalog.

    Attributes:
        skill: The discovered skill.
        frontmatter: Its validated frontmatter.
    """

    skill: Skill
    frontmatter: SkillFrontmatter


@dataclass(frozen=True)
class SyncResult:
    """Result of syncing the catalog file.

    Attributes:
        index_path: Catalog path relative to the root.
        status: Whether the file was (or would be) created, updated, or left alone.
        entries: Number of skills listed.
        skipped_invalid: Number of skills skipped due to invalid frontmatter.
    """

    index_path: str
    status: SyncStatus
    entries: int
    skipped_invalid: int

    @property
    def changed(self) -> bool:
        return self.status != "unchanged"


def collect_catalog_entries(
    root: Path, config: SkillDocsConfig
) -> tuple[list[CatalogEntry], int]:
    """Collect skills with valid frontmatter.

    Returns:
        Tuple of (entries sorted by name, invalid_count).
    """
    entries: list[CatalogEntry] = []
    invalid_count = 0

    for skill in discover_skills(root, config):
        frontmatter, errors = load_skill_frontmatter(
            skill.entry_point, required_fields=config.required_fields
        )
        if frontmatter is None:
            logger.debug("Skipping %s: %s", skill.entry_point, "; ".join(errors))
            invalid_count += 1
            continue
        entries.append(CatalogEntry(skill=skill, frontmatter=frontmatter))

    return sorted(entries, key=lambda e: e.frontmatter.name), invalid_count


def _table_cell(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")


def generate_catalog(entries: list[CatalogEntry], index_dir: Path) -> str:
    """Generate catalog markdown.

    Args:
        entries: Skills to list.
        index_dir: Directory the catalog is written to; links are relative to it.
    """
    lines = ["# Skills", "", CATALOG_MARKER, ""]

    if not entries:
        lines.append("*No skills found.*")
        lines.append("")
        return "\n".join(lines)

    lines.append("| Skill | Use when... | References |")
    lines.append("|-------|-------------|------------|")
    for entry in entries:
        link = Path(os.path.relpath(entry.skill.entry_point, index_dir)).as_posix()
        description = _table_cell(entry.frontmatter.description)
        lines.append(
            f"| [{entry.frontmatter.name}]({link}) | {description} | "
            f"{len(entry.skill.references)} |"
        )
    lines.append("")
    return "\n".join(lines)


def sync_catalog(root: Path, config: SkillDocsConfig, *, dry_run: bool = False) -> SyncResult:
    """Regenerate the catalog file if its content changed.

    Args:
        root: Repository root.
        config: Loaded configuration; `index_file` names the catalog.
        dry_run: If True, don't write, just report what would change.
    """
    index_path = root / config.index_file
    entries, invalid_count = collect_catalog_entries(root, config)
    content = generate_catalog(entries, index_path.parent)

    status: SyncStatus
    if not index_path.exists():
        status = "created"
    elif index_path.read_text(encoding="utf-8") == content:
        status = "unchanged"
    else:
        status = "updated"

    if status != "unchanged" and not dry_run:
        index_path.parent.mkdir(parents=True, exist_ok=True)
        index_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", index_path)

    return SyncResult(
        index_path=config.index_file,
        status=status,
        entries=len(entries),
        skipped_invalid=invalid_count,
    )
