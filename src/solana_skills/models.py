"""
models:
    Data models for source references, skills, agents and installations
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from solana_skills.config import DEFAULT_BRANCH, DEFAULT_INSTALL_METHOD, INSTALL_METHODS
from solana_skills.exceptions import ConfigurationError

SOURCE_TYPES = ("local", "github", "gitlab", "git")


@dataclass(frozen=True)
class SourceReference:
    """
    Where skills live.

    Exactly one shape is populated per type:
        local:          path
        github/gitlab:  owner, repo, branch, optional path (subpath to search)
        git:            url, plus owner/repo parsed for display and caching
    """
    type: str
    path: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    branch: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def local(cls, path: str) -> 'SourceReference':
        return cls(type="local", path=path)

    @classmethod
    def github(cls, owner: str, repo: str, branch: str = DEFAULT_BRANCH,
               path: Optional[str] = None) -> 'SourceReference':
        return cls(type="github", owner=owner, repo=repo, branch=branch, path=path)

    @classmethod
    def gitlab(cls, owner: str, repo: str, branch: str = DEFAULT_BRANCH,
               path: Optional[str] = None) -> 'SourceReference':
        return cls(type="gitlab", owner=owner, repo=repo, branch=branch, path=path)

    @classmethod
    def git(cls, url: str, owner: str, repo: str) -> 'SourceReference':
        return cls(type="git", url=url, owner=owner, repo=repo)

    @property
    def is_local(self) -> bool:
        return self.type == "local"

    @property
    def cache_key(self) -> str:
        """Directory name used for this repository inside the cache root."""
        return f"{self.owner}-{self.repo}"


@dataclass(frozen=True)
class SkillMetadata:
    """Optional frontmatter fields of a skill manifest."""
    category: Optional[str] = None
    author: Optional[str] = None
    version: Optional[str] = None
    tags: tuple[str, ...] = ()

    @classmethod
    def from_frontmatter(cls, data: dict) -> 'SkillMetadata':
        tags = data.get('tags') or ()
        if isinstance(tags, str):
            tags = (tags,)
        version = data.get('version')
        return cls(
            category=_optional_str(data.get('category')),
            author=_optional_str(data.get('author')),
            version=str(version) if version is not None else None,
            tags=tuple(str(t) for t in tags),
        )


@dataclass(frozen=True)
class Skill:
    """A discovered skill: a directory holding a valid SKILL.md."""
    name: str
    description: str
    path: Path
    metadata: SkillMetadata = field(default_factory=SkillMetadata)


@dataclass(frozen=True)
class Agent:
    """
    A target AI coding agent.

    project_path is relative to the current working directory; global_path
    is absolute. Presence is probed through two marker directories, one
    relative to the home directory and one relative to the working directory.
    """
    id: str
    name: str
    project_path: Path
    global_path: Path
    global_marker: str
    project_marker: str

    def detect(self, home: Optional[Path] = None, cwd: Optional[Path] = None) -> bool:
        """Return True if either marker directory exists."""
        home = home or Path.home()
        cwd = cwd or Path.cwd()
        return (home / self.global_marker).exists() or (cwd / self.project_marker).exists()


@dataclass
class InstallOptions:
    """Configuration for one install invocation."""
    global_scope: bool = False
    agents: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    yes: bool = False
    all: bool = False
    method: str = DEFAULT_INSTALL_METHOD

    def __post_init__(self):
        if self.method not in INSTALL_METHODS:
            raise ConfigurationError(
                f"Unknown install method: {self.method}. Supported: {list(INSTALL_METHODS)}"
            )

    @property
    def overwrite(self) -> bool:
        """Conflicts are auto-overwritten when prompts are suppressed."""
        return self.yes or self.all


@dataclass
class InstallResult:
    """Success/failure counts over all (agent, skill) pairs of one install."""
    success: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.success + self.failed


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)
