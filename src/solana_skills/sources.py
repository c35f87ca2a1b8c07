"""
sources:
    Resolution of user-supplied source strings into SourceReference values
"""

from __future__ import annotations

import re
from typing import Optional

from solana_skills.config import DEFAULT_BRANCH, DEFAULT_OWNER, DEFAULT_REPO
from solana_skills.exceptions import UnsupportedSourceKind
from solana_skills.models import SourceReference

LOCAL_PREFIXES = ("./", "/", "..")

GITHUB_URL_RE = re.compile(
    r"^https?://github\.com/([^/]+)/([^/]+)(?:/tree/([^/]+)(?:/(.+))?)?"
)
GITLAB_URL_RE = re.compile(r"^https?://gitlab\.com/([^/]+)/([^/]+)")
SSH_URL_RE = re.compile(r"^git@([^:]+):([^/]+)/(.+?)(?:\.git)?/?$")
SHORTHAND_SKILL_RE = re.compile(r"^([^/]+)/([^@]+)@(.+)$")
SHORTHAND_RE = re.compile(r"^([^/]+)/([^/]+)$")


def _strip_git_suffix(repo: str) -> str:
    return repo[:-4] if repo.endswith(".git") else repo


def default_source(path: Optional[str] = None) -> SourceReference:
    """The default skills catalog, optionally scoped to a subpath."""
    return SourceReference.github(DEFAULT_OWNER, DEFAULT_REPO, DEFAULT_BRANCH, path)


def parse_source(source: Optional[str] = None) -> SourceReference:
    """
    Parse a source specifier into a SourceReference.

    Never fails: input that matches no known pattern is treated as a skill
    name in the default catalog.

    Accepted forms, checked in this order:
      - nothing                                 -> default catalog
      - ./dir, ../dir, /abs/dir                 -> local path
      - https://github.com/o/r[/tree/b[/sub]]   -> github
      - https://gitlab.com/o/r                  -> gitlab (branch is always main)
      - git@host:o/r.git                        -> git (raw url kept)
      - o/r@skill                               -> github, scoped to skills/<skill>
      - o/r                                     -> github
      - anything else                           -> default catalog, skills/<token>
    """
    if not source:
        return default_source()

    if source.startswith(LOCAL_PREFIXES):
        return SourceReference.local(source)

    match = GITHUB_URL_RE.match(source)
    if match:
        owner, repo, branch, subpath = match.groups()
        return SourceReference.github(
            owner,
            _strip_git_suffix(repo),
            branch or DEFAULT_BRANCH,
            subpath,
        )

    match = GITLAB_URL_RE.match(source)
    if match:
        owner, repo = match.groups()
        return SourceReference.gitlab(owner, _strip_git_suffix(repo), DEFAULT_BRANCH)

    match = SSH_URL_RE.match(source)
    if match:
        _host, owner, repo = match.groups()
        return SourceReference.git(source, owner, repo)

    match = SHORTHAND_SKILL_RE.match(source)
    if match:
        owner, repo, skill = match.groups()
        return SourceReference.github(owner, repo, DEFAULT_BRANCH, f"skills/{skill}")

    match = SHORTHAND_RE.match(source)
    if match:
        owner, repo = match.groups()
        return SourceReference.github(owner, repo, DEFAULT_BRANCH)

    return default_source(f"skills/{source}")


def get_clone_url(ref: SourceReference) -> str:
    """Get the URL git should clone for a remote reference."""
    if ref.type == "local":
        raise UnsupportedSourceKind("Cannot clone a local path")
    if ref.type == "git" and ref.url:
        return ref.url
    if ref.type == "github":
        return f"https://github.com/{ref.owner}/{ref.repo}.git"
    if ref.type == "gitlab":
        return f"https://gitlab.com/{ref.owner}/{ref.repo}.git"
    raise UnsupportedSourceKind(f"Unknown source type: {ref.type}")


def get_display_name(ref: SourceReference) -> str:
    """Human-readable name: the path for local sources, owner/repo otherwise."""
    if ref.type == "local":
        return ref.path or "local"
    return f"{ref.owner}/{ref.repo}"
