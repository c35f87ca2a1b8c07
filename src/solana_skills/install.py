"""
install:
    Installing skills into agent directories, plus the listing and removal
    read paths used by the list and remove commands.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Optional

from solana_skills.config import SKILL_FILE
from solana_skills.models import Agent, InstallOptions, InstallResult, Skill
from solana_skills.skills import is_safe_entry_name
from solana_skills.targets import get_target_root

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Skill, Agent, bool], None]


def _entry_exists(path: Path) -> bool:
    # A dangling symlink is still an entry
    return path.exists() or path.is_symlink()


def _entry_path(target_root: Path, name: str) -> Optional[Path]:
    """The entry for name directly under target_root, or None if name would escape it."""
    if not is_safe_entry_name(name):
        return None
    return target_root / name


def _remove_entry(path: Path) -> None:
    """Remove an installed entry without following symlinks."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    else:
        shutil.rmtree(path)


def copy_skill(source: Path, dest: Path) -> None:
    """Copy a skill directory tree to dest."""
    shutil.copytree(source, dest)


def install_skill(skill: Skill, agent: Agent, options: InstallOptions) -> bool:
    """
    Install one skill into one agent.

    An existing entry is left untouched (and the call fails) unless
    options.overwrite is set, in which case it is replaced wholesale.
    A symlink refused for lack of permission falls back to a copy.

    Returns:
        True if the skill is installed afterwards
    """
    target_root = get_target_root(agent, options.global_scope)
    dest = _entry_path(target_root, skill.name)
    if dest is None:
        logger.error("Refusing to install skill with invalid name: %r", skill.name)
        return False

    try:
        target_root.mkdir(parents=True, exist_ok=True)

        if _entry_exists(dest):
            if not options.overwrite:
                logger.warning("Skill '%s' already exists at %s", skill.name, dest)
                return False
            _remove_entry(dest)

        if options.method == "symlink":
            os.symlink(skill.path, dest, target_is_directory=True)
        else:
            copy_skill(skill.path, dest)
        return True
    except PermissionError as e:
        if options.method != "symlink":
            logger.error("Failed to install skill '%s' to %s: %s", skill.name, agent.name, e)
            return False
        logger.info("Symlink failed for '%s', falling back to copy", skill.name)
        try:
            copy_skill(skill.path, dest)
            return True
        except OSError as copy_error:
            logger.error("Failed to install skill '%s' to %s: %s", skill.name, agent.name, copy_error)
            return False
    except OSError as e:
        logger.error("Failed to install skill '%s' to %s: %s", skill.name, agent.name, e)
        return False


def install_skills_to_agents(
    skills: list[Skill],
    agents: list[Agent],
    options: InstallOptions,
    progress: Optional[ProgressCallback] = None,
) -> InstallResult:
    """
    Install every skill into every agent, agents outer and skills inner.

    Pairs run one at a time; a failing pair is counted and the loop
    continues. Non-empty options.agents and options.skills restrict the
    pairs to the listed agent ids and skill names.

    Args:
        skills: Skills to install
        agents: Agents to install into
        options: Install configuration
        progress: Called as progress(skill, agent, ok) after each pair

    Returns:
        InstallResult with success and failure counts
    """
    if options.agents:
        agents = [a for a in agents if a.id in options.agents]
    if options.skills:
        skills = [s for s in skills if s.name in options.skills]

    result = InstallResult()
    for agent in agents:
        logger.debug("Installing to %s", agent.name)
        for skill in skills:
            ok = install_skill(skill, agent, options)
            if ok:
                result.success += 1
            else:
                result.failed += 1
            if progress:
                progress(skill, agent, ok)
    return result


# =============================================================================
# Listing + removal
# =============================================================================


def list_installed_skills_at_path(target_root: Path) -> list[str]:
    """Names of entries under target_root that directly contain SKILL.md."""
    target_root = Path(target_root)
    if not target_root.is_dir():
        return []

    return sorted(
        entry.name for entry in target_root.iterdir()
        if (entry.is_dir() or entry.is_symlink()) and (entry / SKILL_FILE).exists()
    )


def list_installed_skills(agent: Agent, global_scope: bool) -> list[str]:
    return list_installed_skills_at_path(get_target_root(agent, global_scope))


def is_installed(skill_name: str, agent: Agent, global_scope: bool) -> bool:
    """True if an entry named skill_name exists in the agent's target root."""
    dest = _entry_path(get_target_root(agent, global_scope), skill_name)
    return dest is not None and _entry_exists(dest)


def uninstall_skill(skill_name: str, agent: Agent, global_scope: bool) -> bool:
    """
    Remove an installed skill from an agent.

    Returns:
        True if an entry was removed, False if none existed or removal failed
    """
    dest = _entry_path(get_target_root(agent, global_scope), skill_name)
    if dest is None or not _entry_exists(dest):
        return False

    try:
        _remove_entry(dest)
    except OSError as e:
        logger.error("Failed to uninstall %s: %s", skill_name, e)
        return False
    return True
