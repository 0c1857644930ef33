"""Regenerate the skills catalog from SKILL.md frontmatter."""

import click

from skilldocs.cli.context import CliContext
from skilldocs.skills.catalog import sync_catalog


@click.command("sync")
@click.option("--dry-run", is_flag=True, help="Show what would be done without writing files.")
@click.option(
    "--check",
    "check_only",
    is_flag=True,
    help="Exit with code 1 if the catalog is out of date. Implies --dry-run.",
)
@click.pass_obj
def sync_cmd(ctx: CliContext, dry_run: bool, check_only: bool) -> None:
    """Regenerate the skills catalog file.

    The catalog (SKILLS.md by default, see `index_file`) lists every skill
    with valid frontmatter. It is auto-generated and should not be edited.

    Exit codes:
    - 0: Sync completed (or catalog is up to date with --check)
    - 1: Catalog is out of date with --check
    """
    config = ctx.load_config()
    dry_run = dry_run or check_only
    result = sync_catalog(ctx.root, config, dry_run=dry_run)

    if dry_run:
        click.echo(click.style("Dry run - no files written", fg="cyan", bold=True), err=True)
        click.echo(err=True)

    if result.status == "created":
        action = "Would create" if dry_run else "Created"
        click.echo(f"{action} {result.index_path} ({result.entries} skill(s))", err=True)
    elif result.status == "updated":
        action = "Would update" if dry_run else "Updated"
        click.echo(f"{action} {result.index_path} ({result.entries} skill(s))", err=True)
    else:
        click.echo(click.style(f"{result.index_path} is up to date", fg="green"), err=True)

    if result.skipped_invalid > 0:
        click.echo(
            click.style(
                f"Skipped {result.skipped_invalid} skill(s) with invalid frontmatter",
                fg="yellow",
            ),
            err=True,
        )
        click.echo("  Run 'skilldocs check --only frontmatter' to see errors", err=True)

    if check_only and result.changed:
        click.echo(err=True)
        click.echo("Run 'skilldocs sync' to regenerate the catalog.", err=True)
        raise SystemExit(1)
