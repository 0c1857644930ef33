"""Context object shared by skilldocs commands."""

from dataclasses import dataclass
from pathlib import Path

import click

from skilldocs.core.config import SkillDocsConfig, load_config
from skilldocs.core.errors import ConfigError


@dataclass(frozen=True)
class CliContext:
    """Options given to the top-level `skilldocs` group.

    Attributes:
        root: Repository root that skills are discovered under.
    """

    root: Path

    def load_config(self) -> SkillDocsConfig:
        """Load config for the root, exiting with code 1 if it is malformed."""
        try:
            return load_config(self.root)
        except ConfigError as e:
            click.echo(click.style(f"Error: {e}", fg="red"), err=True)
            raise SystemExit(1) from e
