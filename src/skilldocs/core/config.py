import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from skilldocs.core.constants import (
    CHECK_NAMES,
    CONFIG_FILENAME,
    DEFAULT_EXCLUDE,
    DEFAULT_INDEX_FILE,
    DEFAULT_REQUIRED_FIELDS,
    PYPROJECT_FILENAME,
)
from skilldocs.core.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillDocsConfig:
    """In-memory representation of `.skilldocs.toml` or `[tool.skilldocs]`.

    Example .skilldocs.toml:
      # Directory searched for SKILL.md files, relative to the root
      skills_dir = "skills"

      required_fields = ["name", "description"]
      disabled_checks = ["orphans"]
      extra_languages = ["rego"]
      index_file = "SKILLS.md"

      # 1.0 = exact match of normalised scope bullets
      scope_similarity = 0.9
    """

    skills_dir: str
    exclude: tuple[str, ...]
    required_fields: tuple[str, ...]
    disabled_checks: tuple[str, ...]
    extra_languages: tuple[str, ...]
    index_file: str
    scope_similarity: float

    def is_enabled(self, check: str) -> bool:
        return check not in self.disabled_checks


def default_config() -> SkillDocsConfig:
    return SkillDocsConfig(
        skills_dir=".",
        exclude=DEFAULT_EXCLUDE,
        required_fields=DEFAULT_REQUIRED_FIELDS,
        disabled_checks=(),
        extra_languages=(),
        index_file=DEFAULT_INDEX_FILE,
        scope_similarity=1.0,
    )


def load_config(root: Path) -> SkillDocsConfig:
    """Load configuration for a repository root.

    `.skilldocs.toml` wins over `[tool.skilldocs]` in pyproject.toml. When
    neither exists the defaults are returned.

    Raises:
        ConfigError: If the TOML is malformed or a value has the wrong type.
    """
    cfg_path = root / CONFIG_FILENAME
    if cfg_path.exists():
        logger.debug("Loading config from %s", cfg_path)
        return parse_config(_read_toml(cfg_path), source=CONFIG_FILENAME)

    pyproject_path = root / PYPROJECT_FILENAME
    if pyproject_path.exists():
        tool_table = _read_toml(pyproject_path).get("tool", {})
        section = tool_table.get("skilldocs") if isinstance(tool_table, dict) else None
        if section is not None:
            logger.debug("Loading config from %s [tool.skilldocs]", pyproject_path)
            if not isinstance(section, dict):
                raise ConfigError(f"{PYPROJECT_FILENAME}: [tool.skilldocs] must be a table")
            return parse_config(section, source=f"{PYPROJECT_FILENAME} [tool.skilldocs]")

    logger.debug("No configuration found under %s, using defaults", root)
    return default_config()


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path.name}: invalid TOML: {e}") from e


def parse_config(data: dict[str, object], *, source: str) -> SkillDocsConfig:
    """Build a config from a parsed TOML table, filling in defaults."""
    defaults = default_config()

    unknown_keys = sorted(set(data) - set(SkillDocsConfig.__dataclass_fields__))
    if unknown_keys:
        raise ConfigError(f"{source}: unknown key(s): {', '.join(unknown_keys)}")

    skills_dir = _get_str(data, "skills_dir", defaults.skills_dir, source)
    index_file = _get_str(data, "index_file", defaults.index_file, source)
    for key, value in (("skills_dir", skills_dir), ("index_file", index_file)):
        _check_inside_root(key, value, source)
    exclude = _get_str_list(data, "exclude", defaults.exclude, source)
    required_fields = _get_str_list(data, "required_fields", defaults.required_fields, source)
    disabled_checks = _get_str_list(data, "disabled_checks", defaults.disabled_checks, source)
    extra_languages = _get_str_list(data, "extra_languages", defaults.extra_languages, source)

    for check in disabled_checks:
        if check not in CHECK_NAMES:
            raise ConfigError(
                f"{source}: unknown check '{check}' in disabled_checks "
                f"(expected one of: {', '.join(CHECK_NAMES)})"
            )

    similarity = data.get("scope_similarity", defaults.scope_similarity)
    if isinstance(similarity, bool) or not isinstance(similarity, int | float):
        raise ConfigError(f"{source}: 'scope_similarity' must be a number")
    if not 0 < similarity <= 1:
        raise ConfigError(f"{source}: 'scope_similarity' must be in (0, 1]")

    return SkillDocsConfig(
        skills_dir=skills_dir,
        exclude=exclude,
        required_fields=required_fields,
        disabled_checks=disabled_checks,
        extra_languages=tuple(lang.lower() for lang in extra_languages),
        index_file=index_file,
        scope_similarity=float(similarity),
    )


def _get_str(data: dict[str, object], key: str, default: str, source: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{source}: '{key}' must be a non-empty string")
    return value


def _check_inside_root(key: str, value: str, source: str) -> None:
    path = Path(value)
    if path.is_absolute() or ".." in path.parts:
        raise ConfigError(f"{source}: '{key}' must be a relative path inside the root")


def _get_str_list(
    data: dict[str, object], key: str, default: tuple[str, ...], source: str
) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{source}: '{key}' must be a list of strings")
    return tuple(value)
