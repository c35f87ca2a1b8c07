"""
targets:
    Target agents that skills can be installed into.

This module provides:
- AGENTS, the fixed catalog of supported agents
- Lookup and selection helpers (get_agent_by_id, select_agents)
- Presence detection (detect_installed_agents)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from solana_skills.models import Agent

HOME = Path.home()


def _agent(
    agent_id: str,
    name: str,
    project_dir: str,
    global_dir: str,
    project_marker: Optional[str] = None,
) -> Agent:
    """
    Build an agent whose skills live in <dir>/skills.

    Presence is probed through the global directory under the home directory
    and, unless overridden, the project directory under the working directory.
    """
    return Agent(
        id=agent_id,
        name=name,
        project_path=Path(project_dir) / "skills",
        global_path=HOME / global_dir / "skills",
        global_marker=global_dir,
        project_marker=project_marker or project_dir,
    )


# =============================================================================
# Agent catalog
# =============================================================================

AGENTS: list[Agent] = [
    _agent("claude-code", "Claude Code", ".claude", ".claude"),
    _agent("cursor", "Cursor", ".cursor", ".cursor"),
    _agent("opencode", "OpenCode", ".opencode", ".config/opencode"),
    _agent("codex", "Codex", ".codex", ".codex"),
    _agent("cline", "Cline", ".cline", ".cline"),
    _agent("windsurf", "Windsurf", ".windsurf", ".codeium/windsurf"),
    _agent("github-copilot", "GitHub Copilot", ".github", ".copilot"),
    _agent("goose", "Goose", ".goose", ".config/goose"),
    _agent("continue", "Continue", ".continue", ".continue"),
    _agent("roo", "Roo Code", ".roo", ".roo"),
    _agent("amp", "Amp", ".agents", ".config/agents"),
    _agent("gemini-cli", "Gemini CLI", ".gemini", ".gemini"),
    _agent("kilo", "Kilo Code", ".kilocode", ".kilocode"),
    _agent("trae", "Trae", ".trae", ".trae"),
    _agent("zencoder", "Zencoder", ".zencoder", ".zencoder"),
]


def get_agent_by_id(agent_id: str) -> Optional[Agent]:
    """Exact-match lookup by agent id."""
    for agent in AGENTS:
        if agent.id == agent_id:
            return agent
    return None


def get_agent_ids() -> list[str]:
    return [agent.id for agent in AGENTS]


def select_agents(ids: Iterable[str]) -> list[Agent]:
    """Resolve agent ids, '*' meaning all. Unknown ids are dropped."""
    ids = list(ids)
    if "*" in ids:
        return list(AGENTS)
    agents = []
    for agent_id in ids:
        agent = get_agent_by_id(agent_id)
        if agent and agent not in agents:
            agents.append(agent)
    return agents


def detect_installed_agents(
    agents: Optional[list[Agent]] = None,
    home: Optional[Path] = None,
    cwd: Optional[Path] = None,
) -> list[Agent]:
    """Agents whose marker directory exists in the home or working directory."""
    return [
        agent for agent in (AGENTS if agents is None else agents)
        if agent.detect(home=home, cwd=cwd)
    ]


def get_target_root(agent: Agent, global_scope: bool) -> Path:
    """Directory the agent's skills are installed into for a scope."""
    return agent.global_path if global_scope else agent.project_path
