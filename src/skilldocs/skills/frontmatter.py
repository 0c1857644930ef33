"""Skill frontmatter schema.

This module defines which frontmatter a SKILL.md must declare and how it is
turned into a `SkillFrontmatter`.
"""

import re
from collections.abc import Mapping
from pathlib import Path

from skilldocs.core.constants import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH
from skilldocs.core.frontmatter import parse_markdown_frontmatter
from skilldocs.skills.models import SkillFrontmatter

_SKILL_NAME = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def validate_skill_frontmatter(
    data: Mapping[str, object],
    *,
    required_fields: tuple[str, ...],
    directory_name: str,
) -> tuple[SkillFrontmatter | None, list[str]]:
    """Validate parsed frontmatter against the skill schema.

    Args:
        data: Parsed YAML mapping.
        required_fields: Fields that must be present as non-empty strings.
        directory_name: Name of the directory holding the SKILL.md.

    Returns:
        Tuple of (frontmatter, errors). If validation fails, frontmatter is None.
    """
    errors: list[str] = []

    for field_name in required_fields:
        value = data.get(field_name)
        if value is None:
            errors.append(f"Missing required field: {field_name}")
        elif not isinstance(value, str):
            errors.append(f"Field '{field_name}' must be a string")
        elif not value.strip():
            errors.append(f"Field '{field_name}' must not be empty")

    name = data.get("name")
    if isinstance(name, str) and name.strip():
        if len(name) > MAX_NAME_LENGTH:
            errors.append(f"Field 'name' must be at most {MAX_NAME_LENGTH} characters")
        if not _SKILL_NAME.match(name):
            errors.append(
                "Field 'name' must use lowercase letters, digits and single hyphens "
                f"(got '{name}')"
            )
        elif name != directory_name:
            errors.append(f"Field 'name' ('{name}') does not match directory '{directory_name}'")
    elif name is not None and "name" not in required_fields and not isinstance(name, str):
        errors.append("Field 'name' must be a string")

    description = data.get("description")
    if isinstance(description, str) and len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(
            f"Field 'description' must be at most {MAX_DESCRIPTION_LENGTH} characters "
            f"(got {len(description)})"
        )
    elif (
        description is not None
        and "description" not in required_fields
        and not isinstance(description, str)
    ):
        errors.append("Field 'description' must be a string")

    if errors:
        return None, errors

    # Validation above guarantees these are strings when present
    extra = {k: v for k, v in data.items() if k not in ("name", "description")}
    return (
        SkillFrontmatter(
            name=name if isinstance(name, str) and name else directory_name,
            description=description.strip() if isinstance(description, str) else "",
            extra=extra,
        ),
        [],
    )


def read_skill_frontmatter(
    content: str,
    *,
    required_fields: tuple[str, ...],
    directory_name: str,
) -> tuple[SkillFrontmatter | None, list[str]]:
    """Parse and validate the frontmatter of SKILL.md content."""
    parsed = parse_markdown_frontmatter(content)
    if parsed.error is not None or parsed.metadata is None:
        return None, [parsed.error or "No frontmatter found"]
    return validate_skill_frontmatter(
        parsed.metadata,
        required_fields=required_fields,
        directory_name=directory_name,
    )


def load_skill_frontmatter(
    skill_file: Path, *, required_fields: tuple[str, ...]
) -> tuple[SkillFrontmatter | None, list[str]]:
    """Read a SKILL.md from disk and validate its frontmatter."""
    try:
        content = skill_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return None, [f"Cannot read file: {e}"]
    return read_skill_frontmatter(
        content,
        required_fields=required_fields,
        directory_name=skill_file.parent.resolve().name,
    )
