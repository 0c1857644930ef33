"""List skills with their descriptions."""

import json

import click
from rich.console import Console
from rich.table import Table

from skilldocs.cli.context import CliContext
from skilldocs.skills.discovery import discover_skills
from skilldocs.skills.frontmatter import load_skill_frontmatter

MAX_DESCRIPTION_WIDTH = 80


def _truncate(text: str, width: int) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


@click.command("list")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_cmd(ctx: CliContext, json_output: bool) -> None:
    """List skills found under the repository root.

    Skills whose frontmatter does not validate are shown with an
    "invalid" status; run `skilldocs check` to see why.
    """
    config = ctx.load_config()
    skills = discover_skills(ctx.root, config)

    rows: list[dict[str, object]] = []
    for skill in skills:
        frontmatter, errors = load_skill_frontmatter(
            skill.entry_point, required_fields=config.required_fields
        )
        rows.append(
            {
                "name": skill.name,
                "path": skill.entry_point.relative_to(ctx.root).as_posix(),
                "description": frontmatter.description if frontmatter else None,
                "references": len(skill.references),
                "valid": frontmatter is not None,
                "errors": errors,
            }
        )

    if json_output:
        click.echo(json.dumps(rows, indent=2))
        return

    if not rows:
        click.echo("No skills found", err=True)
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Skill", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Refs", justify="right", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    for row in rows:
        description = row["description"]
        table.add_row(
            str(row["name"]),
            _truncate(description, MAX_DESCRIPTION_WIDTH) if isinstance(description, str) else "-",
            str(row["references"]),
            "[green]ok[/green]" if row["valid"] else "[red]invalid[/red]",
        )

    # Output table to stderr (consistent with other human-readable output)
    console = Console(stderr=True, width=200)
    console.print(table)
