"""
cli:
    Command-line interface for solana-skills
"""

import click

from solana_skills import __version__
from solana_skills.cli.add import add_cmd
from solana_skills.cli.cache import cache
from solana_skills.cli.find import find_cmd
from solana_skills.cli.list import list_cmd
from solana_skills.cli.remove import remove_cmd
from solana_skills.cli.scaffold import init_cmd
from solana_skills.config import DEFAULT_OWNER, DEFAULT_REPO
from solana_skills.layout import console, setup_logging


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name='solana-skills')
@click.option('-v', '--verbose', is_flag=True, help='Show debug output')
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """
    Install agent skills for AI coding agents.
    """
    setup_logging(verbose)

    if ctx.invoked_subcommand is not None:
        return

    console.print("[dim]  The CLI for Solana Agent Skills[/dim]")
    console.print(f"[dim]  Default repository: {DEFAULT_OWNER}/{DEFAULT_REPO}[/dim]")
    console.print()
    console.print("[cyan]Quick start:[/cyan]")
    console.print()
    console.print("  Install all skills:")
    console.print("    solana-skills add --all")
    console.print()
    console.print("  Install specific skills:")
    console.print("    solana-skills add --skill solana-agent-kit --skill drift")
    console.print()
    console.print("  Browse available skills:")
    console.print("    solana-skills find")
    console.print()
    console.print("  Create a new skill:")
    console.print("    solana-skills init my-skill")
    console.print()
    console.print("[dim]Run 'solana-skills --help' for all commands.[/dim]")


main.add_command(add_cmd)
main.add_command(add_cmd, name='install')
main.add_command(find_cmd)
main.add_command(find_cmd, name='search')
main.add_command(init_cmd)
main.add_command(list_cmd)
main.add_command(list_cmd, name='ls')
main.add_command(remove_cmd)
main.add_command(remove_cmd, name='rm')
main.add_command(cache)
