"""
repository:
    Fetching remote skill repositories into the local cache.

Each remote is kept as a shallow working copy under the cache root, named
<owner>-<repo>. An existing copy is updated in place; if the update fails
for any reason the copy is discarded and cloned again.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from solana_skills import config
from solana_skills.config import DEFAULT_BRANCH
from solana_skills.exceptions import FetchError, GitError, UnsupportedSourceKind
from solana_skills.models import SourceReference
from solana_skills.sources import get_clone_url

logger = logging.getLogger(__name__)


def run_git(args: list[str], cwd: Optional[Path] = None) -> str:
    """
    Run a git command and return its stdout.

    Raises:
        GitError: If git exits non-zero, times out, or is not installed.
    """
    cmd = ["git"] + args
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=config.GIT_TIMEOUT,
        )
    except FileNotFoundError as e:
        raise GitError(cmd, "git executable not found") from e
    except subprocess.TimeoutExpired as e:
        raise GitError(cmd, f"timed out after {config.GIT_TIMEOUT}s") from e

    if result.returncode != 0:
        raise GitError(cmd, result.stderr)
    return result.stdout


def get_cache_path(ref: SourceReference, cache_dir: Optional[Path] = None) -> Path:
    """Where the working copy for a remote reference lives."""
    if ref.is_local:
        raise UnsupportedSourceKind("Local sources are not cached")
    root = cache_dir or config.CACHE_DIR
    return Path(root) / ref.cache_key


def _update(target: Path, branch: str) -> None:
    run_git(["fetch"], cwd=target)
    run_git(["checkout", branch], cwd=target)
    run_git(["pull"], cwd=target)


def clone_repository(ref: SourceReference, cache_dir: Optional[Path] = None) -> Path:
    """
    Materialize a remote reference as a local directory.

    Args:
        ref: A github, gitlab or git reference
        cache_dir: Cache root (defaults to config.CACHE_DIR)

    Returns:
        Absolute path to the working copy

    Raises:
        UnsupportedSourceKind: If ref is a local reference.
        FetchError: If the clone fails. A partially written copy may be
            left behind; the next call purges it through the update path.
    """
    target = get_cache_path(ref, cache_dir).absolute()
    target.parent.mkdir(parents=True, exist_ok=True)
    branch = ref.branch or DEFAULT_BRANCH

    if target.exists():
        try:
            _update(target, branch)
            logger.debug("Updated cached copy at %s", target)
            return target
        except GitError as e:
            logger.debug("Update of %s failed, re-cloning: %s", target, e)
            shutil.rmtree(target, ignore_errors=True)

    clone_url = get_clone_url(ref)
    try:
        run_git([
            "clone",
            "--depth", "1",
            "--single-branch",
            "--branch", branch,
            clone_url,
            str(target),
        ])
    except GitError as e:
        raise FetchError(f"Failed to clone {clone_url} (branch: {branch}): {e.stderr or e}") from e

    return target


def get_latest_commit_hash(repo_path: Path) -> str:
    """Return the HEAD commit of a working copy, or '' if it can't be read."""
    try:
        return run_git(["rev-parse", "HEAD"], cwd=repo_path).strip()
    except GitError:
        return ""


def clear_cache(cache_dir: Optional[Path] = None) -> bool:
    """Remove the whole cache root. Returns True if anything was removed."""
    root = Path(cache_dir or config.CACHE_DIR)
    if not root.exists():
        return False
    shutil.rmtree(root)
    return True
