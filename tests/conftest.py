"""Shared pytest fixtures for solana-skills tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from solana_skills.models import Agent, Skill


def write_skill(
    directory: Path,
    name: str | None = None,
    description: str | None = "A test skill",
    extra: str = "",
) -> Path:
    """Create a skill directory with a SKILL.md; omit a field by passing None."""
    directory.mkdir(parents=True, exist_ok=True)
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    lines.append("")
    lines.append(f"# {name or directory.name}")
    lines.append("")
    lines.append("Instructions for the agent.")
    (directory / "SKILL.md").write_text("\n".join(lines) + "\n")
    return directory


@pytest.fixture
def make_skill():
    """Factory fixture around write_skill."""
    return write_skill


@pytest.fixture
def cli_runner():
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cache_dir(tmp_path):
    """An isolated repository cache root."""
    return tmp_path / "cache"


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """A working directory for project-scope installs."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def sample_skill(tmp_path):
    """A skill on disk with supporting files."""
    skill_dir = write_skill(tmp_path / "source" / "my-skill", name="my-skill")
    (skill_dir / "scripts").mkdir()
    (skill_dir / "scripts" / "run.sh").write_text("#!/bin/bash\necho hi\n")
    (skill_dir / "notes.txt").write_text("notes")
    return Skill(name="my-skill", description="A test skill", path=skill_dir)


@pytest.fixture
def agent_factory(tmp_path):
    """Build agents whose global path lives under a fake home in tmp_path."""
    home = tmp_path / "home"

    def factory(agent_id: str = "test-agent", name: str = "Test Agent") -> Agent:
        return Agent(
            id=agent_id,
            name=name,
            project_path=Path(f".{agent_id}") / "skills",
            global_path=home / f".{agent_id}" / "skills",
            global_marker=f".{agent_id}",
            project_marker=f".{agent_id}",
        )

    return factory


@pytest.fixture
def sample_repo(tmp_path):
    """
    A repository in the conventional layout.

    Structure:
        repo/
        ├── README.md
        └── skills/
            ├── alpha/SKILL.md
            ├── beta/SKILL.md
            └── broken/SKILL.md   # no description
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "README.md").write_text("# Skills\n")
    write_skill(repo / "skills" / "alpha", name="alpha", description="Alpha skill",
                extra="category: DeFi\ntags:\n  - swap\n  - jupiter")
    write_skill(repo / "skills" / "beta", name="beta", description="Beta skill")
    write_skill(repo / "skills" / "broken", name="broken", description=None)
    return repo
