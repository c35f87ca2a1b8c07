"""
scaffold:
    The init command: create a new SKILL.md from a template
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from solana_skills.config import SKILL_CATEGORIES, SKILL_SUBDIRS
from solana_skills.exceptions import ConfigurationError
from solana_skills.layout import console
from solana_skills.skills import create_skill, validate_skill_name


def _validate_name(value: str) -> str:
    try:
        return validate_skill_name(value)
    except ConfigurationError as e:
        raise click.BadParameter(str(e))


@click.command(name='init')
@click.argument('name', required=False, default=None)
@click.option('-d', '--description', default=None, help='Skill description')
@click.option('-c', '--category', default=None, help='Skill category')
@click.option('-a', '--author', default=None, help='Skill author')
@click.option('-y', '--yes', is_flag=True, help='Skip prompts, use defaults')
@click.option('--with-dirs', 'subdirs', multiple=True, type=click.Choice(SKILL_SUBDIRS),
              help='Extra directory to create (repeatable)')
def init_cmd(
    name: Optional[str],
    description: Optional[str],
    category: Optional[str],
    author: Optional[str],
    yes: bool,
    subdirs: tuple[str, ...],
):
    """
    Create a new skill with a SKILL.md template.

    Creates NAME/ in the current directory, or writes SKILL.md into the
    current directory when NAME is omitted.

    \b
    Examples:
        solana-skills init my-skill
        solana-skills init my-skill -y -d "Swap tokens on Jupiter" -c DeFi
        solana-skills init my-skill --with-dirs examples --with-dirs docs
    """
    if yes and name:
        skill_name = name
        description = description or "A new Solana skill"
        category = category or "General"
        author = author or ""
    else:
        skill_name = click.prompt(
            "Skill name (lowercase, hyphens for spaces)",
            default=name,
            value_proc=_validate_name,
        )
        description = click.prompt("Description", default=description)
        category = click.prompt(
            "Category",
            type=click.Choice(SKILL_CATEGORIES),
            default=category or "General",
        )
        author = click.prompt("Author (optional)", default=author or "", show_default=False)

    skill_dir = Path.cwd() / skill_name if name else Path.cwd()

    if name and skill_dir.exists():
        if yes or not click.confirm(f"Directory '{skill_name}' already exists. Overwrite?", default=False):
            console.print("[yellow]Cancelled.[/yellow]")
            return

    if not subdirs and not yes:
        answer = click.prompt(
            f"Additional directories ({', '.join(SKILL_SUBDIRS)}; comma-separated, blank for none)",
            default="",
            show_default=False,
        )
        subdirs = tuple(d.strip() for d in answer.split(",") if d.strip())

    try:
        skill_file = create_skill(skill_dir, skill_name, description, category, author, subdirs)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print("[green]Skill created successfully![/green]")
    console.print(f"  Location: {skill_dir}")
    console.print(f"  Edit: {skill_file}")
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print("  1. Edit SKILL.md with your skill instructions")
    console.print("  2. Add example code and documentation")
    console.print("  3. Test the skill with your AI agent")
    console.print("  4. Submit a PR to sendaifun/skills!")
