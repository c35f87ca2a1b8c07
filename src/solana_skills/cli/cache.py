"""
cache:
    Inspecting and clearing the repository cache
"""

import click

from solana_skills import config
from solana_skills.layout import console
from solana_skills.repository import clear_cache


@click.group(name='cache')
def cache():
    """
    Manage the repository cache.
    """
    pass


@cache.command(name='path')
def cache_path():
    """Print the cache directory."""
    console.print(str(config.CACHE_DIR))


@cache.command(name='clear')
def cache_clear():
    """Remove all cached repositories."""
    if clear_cache():
        console.print(f"[green]Cleared {config.CACHE_DIR}[/green]")
    else:
        console.print("[yellow]Cache is already empty[/yellow]")
