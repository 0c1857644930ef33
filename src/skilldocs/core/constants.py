"""Shared constants for skill discovery and checking."""

SKILL_FILENAME = "SKILL.md"
REFERENCES_DIRNAME = "references"

CONFIG_FILENAME = ".skilldocs.toml"
PYPROJECT_FILENAME = "pyproject.toml"

DEFAULT_INDEX_FILE = "SKILLS.md"
DEFAULT_REQUIRED_FIELDS = ("name", "description")
DEFAULT_EXCLUDE = (
    ".git",
    ".hg",
    ".venv",
    "venv",
    "node_modules",
    "__pycache__",
    ".tox",
    "build",
    "dist",
)

# Check ids, in the order they run
CHECK_NAMES = ("frontmatter", "links", "code-blocks", "scope", "orphans")

MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
