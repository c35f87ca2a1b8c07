"""
list:
    The list command: show installed skills per agent
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.markup import escape

from solana_skills.install import list_installed_skills, list_installed_skills_at_path
from solana_skills.layout import console
from solana_skills.targets import AGENTS, select_agents


@click.command(name='list')
@click.option('-g', '--global', 'global_only', is_flag=True, help='Show only global installations')
@click.option('-a', '--agent', 'agent_ids', multiple=True, help='Show skills for specific agents')
@click.option('-p', '--path', 'custom_path', default=None, type=click.Path(),
              help='List skills at a specific path')
def list_cmd(global_only: bool, agent_ids: tuple[str, ...], custom_path: Optional[str]):
    """
    List installed skills.
    """
    if custom_path:
        target = Path(custom_path).resolve()
        skills = list_installed_skills_at_path(target)
        if not skills:
            console.print("[yellow]No skills found at specified path.[/yellow]")
            console.print(f"[dim]  Path: {target}[/dim]")
            return
        console.print(f"[cyan]Skills at {target}:[/cyan]")
        for skill in skills:
            console.print(f"  [green]✓[/green] {escape(skill)}")
        console.print()
        console.print(f"[green]Total: {len(skills)} skill(s)[/green]")
        return

    agents = select_agents(agent_ids) if agent_ids else AGENTS

    total = 0
    agents_with_skills = 0

    for agent in agents:
        global_skills = list_installed_skills(agent, True)
        project_skills = [] if global_only else list_installed_skills(agent, False)
        if not global_skills and not project_skills:
            continue

        agents_with_skills += 1
        console.print(f"[cyan]{agent.name}:[/cyan]")

        if global_skills:
            console.print(f"[dim]  Global ({agent.global_path}):[/dim]")
            for skill in global_skills:
                console.print(f"    • {escape(skill)}")
                total += 1

        if project_skills:
            console.print(f"[dim]  Project ({agent.project_path}):[/dim]")
            for skill in project_skills:
                if skill in global_skills:
                    console.print(f"    • {escape(skill)} [dim](also global)[/dim]")
                else:
                    console.print(f"    • {escape(skill)}")
                    total += 1

        console.print()

    if total == 0:
        console.print("[yellow]No skills installed yet.[/yellow]")
        console.print()
        console.print("To install skills, run:")
        console.print("  solana-skills add")
    else:
        console.print(f"[green]Total: {total} skill(s) across {agents_with_skills} agent(s)[/green]")
