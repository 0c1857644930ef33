"""Exceptions raised by skilldocs."""


class SkillDocsError(Exception):
    """Base class for errors that stop a skilldocs command."""


class ConfigError(SkillDocsError):
    """Configuration is malformed.

    Raised when `.skilldocs.toml` or `[tool.skilldocs]` cannot be parsed or
    contains values of the wrong type.
    """


class UnknownSkillError(SkillDocsError):
    """No skill with the requested name exists under the repository root."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Skill '{name}' not found")
        self.name = name
