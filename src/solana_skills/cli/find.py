"""
find:
    Search the default skills catalog
"""

from __future__ import annotations

from typing import Optional

import click
from rich.markup import escape

from solana_skills.exceptions import SkillsError
from solana_skills.layout import console
from solana_skills.repository import clone_repository
from solana_skills.skills import discover_skills, group_by_category, search_skills
from solana_skills.sources import default_source, get_display_name


@click.command(name='find')
@click.argument('query', required=False, default=None)
@click.option('-l', '--list', 'list_only', is_flag=True, help='List skill names only')
def find_cmd(query: Optional[str], list_only: bool):
    """
    Search for skills in the default catalog by keyword.

    QUERY is matched against skill names, descriptions, categories and tags.
    """
    ref = default_source()
    display_name = get_display_name(ref)

    try:
        with console.status(f"Fetching skills catalog from {display_name}..."):
            repo_path = clone_repository(ref)
        all_skills = discover_skills(repo_path)
    except SkillsError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if not all_skills:
        console.print("[yellow]No skills found in the repository.[/yellow]")
        return

    skills = search_skills(all_skills, query)
    if not skills:
        console.print(f"[yellow]No skills found matching \"{escape(query)}\".[/yellow]")
        console.print("[dim]Try a different search term, or run 'solana-skills find' to browse all skills.[/dim]")
        return

    if list_only:
        for skill in skills:
            console.print(escape(skill.name))
        return

    if query:
        console.print(f"[green]Found {len(skills)} skill(s) matching \"{escape(query)}\":[/green]")
    else:
        console.print(f"[green]Found {len(skills)} skill(s):[/green]")
    console.print()

    for category, members in group_by_category(skills).items():
        console.print(f"[cyan]{escape(category)}[/cyan]")
        for skill in members:
            console.print(f"   [bold]{escape(skill.name)}[/bold]")
            console.print(f"      [dim]{escape(skill.description)}[/dim]")
        console.print()

    console.print("To install a skill:")
    console.print("  solana-skills add --skill <skill-name>")
