"""
utils:
    Utility functions for solana-skills
"""

from pathlib import Path
from typing import Optional

from solana_skills.exceptions import SourceNotFoundError
from solana_skills.models import SourceReference
from solana_skills.repository import clone_repository


def resolve_local_source(ref: SourceReference) -> Path:
    """
    Resolve a local reference to an absolute, existing directory.

    Raises:
        SourceNotFoundError: If the path does not exist.
    """
    path = Path(ref.path).expanduser().resolve()
    if not path.exists():
        raise SourceNotFoundError(path)
    return path


def materialize_source(ref: SourceReference, cache_dir: Optional[Path] = None) -> Path:
    """
    Get a local directory for any source reference.

    Local references are used in place; remote ones are fetched into the cache.
    """
    if ref.is_local:
        return resolve_local_source(ref)
    return clone_repository(ref, cache_dir)
