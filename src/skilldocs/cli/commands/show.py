"""Show details of a single skill."""

import click

from skilldocs.cli.context import CliContext
from skilldocs.core.errors import UnknownSkillError
from skilldocs.core.markdown import parse_markdown
from skilldocs.skills.discovery import find_skill
from skilldocs.skills.frontmatter import read_skill_frontmatter


@click.command("show")
@click.argument("name")
@click.pass_obj
def show_cmd(ctx: CliContext, name: str) -> None:
    """Show frontmatter, scope and references of the skill NAME.

    NAME is the skill's directory name.
    """
    config = ctx.load_config()
    try:
        skill = find_skill(ctx.root, config, name)
    except UnknownSkillError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1) from e

    path = skill.entry_point.relative_to(ctx.root).as_posix()
    try:
        content = skill.entry_point.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(click.style(f"Error: Cannot read {path}: {e}", fg="red"), err=True)
        raise SystemExit(1) from e
    frontmatter, errors = read_skill_frontmatter(
        content, required_fields=config.required_fields, directory_name=skill.name
    )
    document = parse_markdown(content)

    click.echo(click.style(skill.name, bold=True), err=True)
    click.echo(click.style(f"  Path: {path}", dim=True), err=True)
    if frontmatter is not None:
        click.echo(f"  Description: {frontmatter.description}", err=True)
        for key, value in sorted(frontmatter.extra.items()):
            click.echo(f"  {key}: {value}", err=True)
    else:
        click.echo(click.style("  Invalid frontmatter:", fg="red"), err=True)
        for error in errors:
            click.echo(f"    {error}", err=True)

    for section in document.scope_sections:
        click.echo(err=True)
        click.echo(click.style(f"{section.title}:", bold=True), err=True)
        for bullet in section.bullets:
            click.echo(f"  - {bullet.text}", err=True)

    click.echo(err=True)
    click.echo(click.style(f"References ({len(skill.references)}):", bold=True), err=True)
    for reference in skill.references:
        click.echo(f"  {reference.relative_to(skill.directory).as_posix()}", err=True)

    local_links = [link for link in document.links if not link.is_external]
    if local_links:
        click.echo(err=True)
        click.echo(click.style("Links:", bold=True), err=True)
        for link in local_links:
            click.echo(f"  line {link.line}: {link.target}", err=True)
