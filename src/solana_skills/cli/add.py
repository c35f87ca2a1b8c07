"""
add:
    The add command: fetch a source, pick skills and agents, install
"""

from __future__ import annotations

from typing import Optional

import click
from rich.markup import escape

from solana_skills.config import DEFAULT_INSTALL_METHOD, INSTALL_METHODS
from solana_skills.exceptions import SkillsError
from solana_skills.install import install_skills_to_agents
from solana_skills.layout import console, truncate
from solana_skills.models import Agent, InstallOptions, Skill
from solana_skills.skills import discover_skills, filter_skills
from solana_skills.sources import get_display_name, parse_source
from solana_skills.targets import (
    AGENTS,
    detect_installed_agents,
    get_agent_ids,
    get_target_root,
    select_agents,
)
from solana_skills.utils import materialize_source


def _parse_selection(answer: str, choices: list, key) -> list:
    """
    Resolve a comma-separated answer against a list of choices.

    Tokens may be 1-based indexes or names (matched with key); '*' selects all.
    """
    tokens = [t.strip() for t in answer.split(",") if t.strip()]
    if "*" in tokens:
        return list(choices)

    selected = []
    for token in tokens:
        if token.isdigit():
            index = int(token) - 1
            if 0 <= index < len(choices) and choices[index] not in selected:
                selected.append(choices[index])
            continue
        for choice in choices:
            if key(choice).lower() == token.lower() and choice not in selected:
                selected.append(choice)
    return selected


def _prompt_skills(skills: list[Skill]) -> list[Skill]:
    console.print()
    console.print("[bold]Available skills:[/bold]")
    for i, skill in enumerate(skills, 1):
        console.print(
            f"  [cyan]{i:>3}[/cyan] [bold]{escape(skill.name)}[/bold] "
            f"[dim]- {escape(truncate(skill.description, 60))}[/dim]"
        )
    console.print()

    while True:
        answer = click.prompt("Skills to install (numbers or names, comma-separated, * for all)")
        selected = _parse_selection(answer, skills, lambda s: s.name)
        if selected:
            return selected
        console.print("[yellow]Please select at least one skill[/yellow]")


def _prompt_agents(agents: list[Agent], preselect_all: bool) -> list[Agent]:
    console.print()
    for i, agent in enumerate(agents, 1):
        console.print(f"  [cyan]{i:>3}[/cyan] {agent.name} [dim]({agent.id})[/dim]")
    console.print()

    while True:
        answer = click.prompt(
            "Agents to install to (numbers or ids, comma-separated, * for all)",
            default="*" if preselect_all else None,
        )
        selected = _parse_selection(answer, agents, lambda a: a.id)
        if selected:
            return selected
        console.print("[yellow]Please select at least one agent[/yellow]")


def _print_available_agents() -> None:
    for agent in AGENTS:
        console.print(f"  - {agent.id} ({agent.name})")


@click.command(name='add')
@click.argument('source', required=False, default=None)
@click.option('-g', '--global', 'global_scope', is_flag=True,
              help='Install to user directory instead of project')
@click.option('-a', '--agent', 'agent_ids', multiple=True,
              help=f"Target specific agents ({', '.join(get_agent_ids()[:5])}..., or '*')")
@click.option('-s', '--skill', 'skill_names', multiple=True,
              help="Install specific skills by name (or '*')")
@click.option('-l', '--list', 'list_only', is_flag=True,
              help='List available skills without installing')
@click.option('-y', '--yes', is_flag=True, help='Skip all confirmation prompts')
@click.option('--all', 'install_all', is_flag=True,
              help='Install all skills to all detected agents without prompts')
@click.option('-m', '--method', type=click.Choice(INSTALL_METHODS), default=None,
              help='Installation method (default: symlink)')
def add_cmd(
    source: Optional[str],
    global_scope: bool,
    agent_ids: tuple[str, ...],
    skill_names: tuple[str, ...],
    list_only: bool,
    yes: bool,
    install_all: bool,
    method: Optional[str],
):
    """
    Install skills from a repository or local folder.

    \b
    SOURCE can be:
      - nothing (the default sendaifun/skills catalog)
      - owner/repo or owner/repo@skill-name
      - https://github.com/owner/repo[/tree/branch/path]
      - https://gitlab.com/owner/repo
      - git@host:owner/repo.git
      - ./local/path
      - a skill name from the default catalog

    \b
    Examples:
        solana-skills add --all
        solana-skills add sendaifun/skills -s drift -a claude-code
        solana-skills add ./my-skills -m copy -g -y
    """
    non_interactive = yes or install_all

    ref = parse_source(source)
    display_name = get_display_name(ref)
    console.print(f"[bold]Repository:[/bold] {escape(display_name)}")

    try:
        if ref.is_local:
            repo_path = materialize_source(ref)
        else:
            with console.status(f"Fetching skills from {escape(display_name)}..."):
                repo_path = materialize_source(ref)
            console.print(f"[green]Fetched {escape(display_name)}[/green]")

        all_skills = discover_skills(repo_path, None if ref.is_local else ref.path)
    except SkillsError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    console.print(f"Found {len(all_skills)} skill(s)")

    if not all_skills:
        console.print("[yellow]No skills found in this repository.[/yellow]")
        console.print("[dim]Skills must have a SKILL.md file with name and description in frontmatter.[/dim]")
        return

    if list_only:
        console.print()
        console.print("[bold]Available skills:[/bold]")
        console.print()
        for skill in all_skills:
            console.print(f"  [bold]{escape(skill.name)}[/bold]")
            console.print(f"    [dim]{escape(skill.description)}[/dim]")
            if skill.metadata.category:
                console.print(f"    [blue]\\[{escape(skill.metadata.category)}][/blue]")
            console.print()
        return

    # Skills
    if skill_names:
        selected_skills = filter_skills(all_skills, skill_names)
        if not selected_skills:
            console.print(f"[red]No skills found matching: {escape(', '.join(skill_names))}[/red]")
            console.print()
            console.print("Available skills:")
            for skill in all_skills:
                console.print(f"  - {escape(skill.name)}")
            return
    elif non_interactive:
        selected_skills = all_skills
    else:
        selected_skills = _prompt_skills(all_skills)

    # Agents
    if agent_ids:
        selected_agents = select_agents(agent_ids)
        if not selected_agents:
            console.print("[red]No valid agents specified. Available agents:[/red]")
            _print_available_agents()
            return
    else:
        detected = detect_installed_agents()
        if detected:
            names = ", ".join(a.name for a in detected)
            console.print(f"[green]Detected {len(detected)} agent(s): {names}[/green]")
            selected_agents = detected if non_interactive else _prompt_agents(detected, True)
        elif non_interactive:
            console.print("[yellow]No agents automatically detected.[/yellow]")
            console.print("Pass --agent to choose where to install. Available agents:")
            _print_available_agents()
            return
        else:
            console.print("[yellow]No agents automatically detected.[/yellow]")
            selected_agents = _prompt_agents(AGENTS, False)

    # Method
    if method is None:
        if non_interactive:
            method = DEFAULT_INSTALL_METHOD
        else:
            method = click.prompt(
                "Installation method (symlink: single source, easy updates; copy: independent copies)",
                type=click.Choice(INSTALL_METHODS),
                default=DEFAULT_INSTALL_METHOD,
            )

    if not non_interactive:
        console.print()
        console.print("[bold]Installation summary:[/bold]")
        console.print(f"  Skills: {escape(', '.join(s.name for s in selected_skills))}")
        console.print(f"  Agents: {', '.join(a.name for a in selected_agents)}")
        console.print(f"  Scope: {'Global (user-level)' if global_scope else 'Project (local)'}")
        console.print(f"  Method: {method}")
        if not click.confirm("Proceed with installation?", default=True):
            console.print("[yellow]Installation cancelled.[/yellow]")
            return

    options = InstallOptions(
        global_scope=global_scope,
        agents=[a.id for a in selected_agents],
        skills=[s.name for s in selected_skills],
        yes=yes,
        all=install_all,
        method=method,
    )

    console.print()
    console.print("[bold]Installing skills...[/bold]")
    started: set[str] = set()

    def report(skill: Skill, agent: Agent, ok: bool) -> None:
        if agent.id not in started:
            started.add(agent.id)
            console.print(f"Installing to [cyan]{agent.name}[/cyan]...")
        if ok:
            console.print(f"  [green]✓[/green] {escape(skill.name)}")
        else:
            console.print(f"  [red]✗[/red] {escape(skill.name)}")

    result = install_skills_to_agents(selected_skills, selected_agents, options, progress=report)

    console.print()
    if result.success:
        console.print(f"[green]Installed {result.success} skill(s)[/green]")
    console.print("[bold]Target agents:[/bold]")
    for agent in selected_agents:
        location = get_target_root(agent, global_scope)
        console.print(f"  [green]✓[/green] {agent.name} [dim]→ {location}[/dim]")

    if result.failed:
        console.print()
        console.print(f"[yellow]{result.failed} skill(s) failed to install[/yellow]")
        if not non_interactive:
            console.print("[dim]Use --yes to overwrite existing skills.[/dim]")

    console.print()
    console.print("Run 'solana-skills list' to see all installed skills")
