import logging
from pathlib import Path

import click

from skilldocs.cli.commands.check import check_cmd
from skilldocs.cli.commands.list_cmd import list_cmd
from skilldocs.cli.commands.show import show_cmd
from skilldocs.cli.commands.sync import sync_cmd
from skilldocs.cli.context import CliContext

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="skilldocs")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Repository root (defaults to the current directory)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, root: Path | None) -> None:
    """Validate and catalog Markdown skill documents."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = CliContext(root=(root if root is not None else Path.cwd()).resolve())


cli.add_command(check_cmd)
cli.add_command(list_cmd)
cli.add_command(show_cmd)
cli.add_command(sync_cmd)
