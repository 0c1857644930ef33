"""Data models for skills."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Skill:
    """A skill directory discovered on disk.

    Attributes:
        name: Directory name of the skill.
        directory: Absolute path of the skill directory.
        entry_point: Path to the skill's SKILL.md.
        references: Markdown files under the skill's references/ directory, sorted.
    """

    name: str
    directory: Path
    entry_point: Path
    references: tuple[Path, ...]

    @property
    def documents(self) -> tuple[Path, ...]:
        return (self.entry_point, *self.references)


@dataclass(frozen=True)
class SkillFrontmatter:
    """Validated frontmatter of a SKILL.md.

    Attributes:
        name: Declared skill name.
        description: When to use the skill.
        extra: Any other frontmatter keys, untouched.
    """

    name: str
    description: str
    extra: dict[str, object]
