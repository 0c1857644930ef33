"""skilldocs CLI entry point.

This package provides a Click-based CLI for validating and cataloging
Markdown skill documents. See `skilldocs --help` for details.
"""

from skilldocs.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `skilldocs` console script."""
    cli()
