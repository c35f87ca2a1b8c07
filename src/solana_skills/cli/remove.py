"""
remove:
    The remove command: uninstall a skill from agents
"""

from __future__ import annotations

import click
from rich.markup import escape

from solana_skills.install import is_installed, uninstall_skill
from solana_skills.layout import console
from solana_skills.targets import AGENTS, get_target_root, select_agents


@click.command(name='remove')
@click.argument('skill_name')
@click.option('-g', '--global', 'global_scope', is_flag=True,
              help='Remove from user directory instead of project')
@click.option('-a', '--agent', 'agent_ids', multiple=True,
              help='Remove only from specific agents (default: all)')
@click.option('-y', '--yes', is_flag=True, help='Skip confirmation')
def remove_cmd(skill_name: str, global_scope: bool, agent_ids: tuple[str, ...], yes: bool):
    """
    Uninstall a skill from AI coding agents.
    """
    agents = select_agents(agent_ids) if agent_ids else AGENTS
    installed = [a for a in agents if is_installed(skill_name, a, global_scope)]

    if not installed:
        scope = "global" if global_scope else "project"
        console.print(f"[yellow]Skill '{escape(skill_name)}' is not installed ({scope} scope)[/yellow]")
        return

    if not yes:
        console.print(f"This will remove '{escape(skill_name)}' from:")
        for agent in installed:
            console.print(f"  - {agent.name} ({get_target_root(agent, global_scope) / skill_name})")
        if not click.confirm("Continue?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    removed = 0
    for agent in installed:
        if uninstall_skill(skill_name, agent, global_scope):
            console.print(f"  [green]✓[/green] {agent.name}")
            removed += 1
        else:
            console.print(f"  [red]✗[/red] {agent.name}")

    if removed != len(installed):
        console.print(f"[red]Failed to remove '{escape(skill_name)}' from {len(installed) - removed} agent(s)[/red]")
        raise SystemExit(1)
    console.print(f"[green]Removed '{escape(skill_name)}' from {removed} agent(s)[/green]")
