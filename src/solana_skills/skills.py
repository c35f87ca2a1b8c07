"""
skills:
    Skill discovery, filtering and scaffolding.

Discovery runs three strategies over a repository tree:
- the repository root itself (a repo that is a single skill)
- immediate children of each conventional location in SKILL_SEARCH_PATHS
- a recursive manifest search, only when the first two found nothing

Results are deduplicated by declared name, first found wins.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional

from solana_skills import frontmatter as fm
from solana_skills.config import IGNORED_DIRS, SKILL_FILE, SKILL_SEARCH_PATHS, SKILL_SUBDIRS
from solana_skills.exceptions import ConfigurationError
from solana_skills.models import Skill, SkillMetadata

logger = logging.getLogger(__name__)

SKILL_NAME_RE = re.compile(r"^[a-z0-9-]+$")


def is_safe_entry_name(name: str) -> bool:
    """True if name is a single path component usable as a directory name."""
    if name in ("", ".", "..") or "/" in name or "\\" in name:
        return False
    return Path(name).name == name


# =============================================================================
# Manifest parsing
# =============================================================================


def parse_skill_from_directory(skill_dir: Path) -> Optional[Skill]:
    """
    Load a skill from a directory containing SKILL.md.

    Returns None when there is no manifest, or when the manifest can't be
    parsed, lacks a name or description, or declares a name that is not a
    single path component (a warning is logged for the last three).
    """
    skill_file = skill_dir / SKILL_FILE
    if not skill_file.is_file():
        return None

    try:
        data, _body = fm.parse(skill_file.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, fm.FrontmatterError) as e:
        logger.warning("Failed to parse %s: %s", skill_file, e)
        return None

    name = data.get("name")
    description = data.get("description")
    if not name or not description:
        logger.warning("%s missing required fields (name, description)", skill_file)
        return None

    if not is_safe_entry_name(str(name)):
        logger.warning("%s has an invalid name: %r", skill_file, name)
        return None

    return Skill(
        name=str(name),
        description=str(description),
        path=skill_dir.absolute(),
        metadata=SkillMetadata.from_frontmatter(data),
    )


# =============================================================================
# Discovery strategies
# =============================================================================


def _child_dirs(directory: Path) -> list[Path]:
    return sorted(
        (entry for entry in directory.iterdir() if entry.is_dir()),
        key=lambda p: p.name,
    )


def find_skills_in_directory(
    directory: Path, examined: Optional[set[Path]] = None
) -> list[Skill]:
    """
    Skills in the immediate child directories of a directory.

    Each child examined is added to examined when given.
    """
    if not directory.is_dir():
        return []

    skills = []
    for child in _child_dirs(directory):
        if examined is not None:
            examined.add(child)
        skill = parse_skill_from_directory(child)
        if skill:
            skills.append(skill)
    return skills


def iter_manifest_dirs(root: Path) -> Iterator[Path]:
    """Yield every directory under root holding a SKILL.md, in sorted walk order."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRS)
        if SKILL_FILE in filenames:
            yield Path(dirpath)


def _dedupe(skills: Iterable[Skill]) -> list[Skill]:
    unique: dict[str, Skill] = {}
    for skill in skills:
        if skill.name not in unique:
            unique[skill.name] = skill
        else:
            logger.debug("Skipping duplicate skill '%s' at %s", skill.name, skill.path)
    return list(unique.values())


def discover_skills(
    repo_root: Path,
    scope: Optional[str] = None,
    search_paths: Optional[list[str]] = None,
) -> list[Skill]:
    """
    Discover skills under a repository root.

    Args:
        repo_root: Directory to search
        scope: Subpath of repo_root holding exactly one skill. When given,
            only that directory is examined and no other strategy runs.
        search_paths: Conventional locations to scan (defaults to
            SKILL_SEARCH_PATHS)

    Returns:
        Skills in scan order, unique by name
    """
    repo_root = Path(repo_root).absolute()

    if scope:
        skill = parse_skill_from_directory(repo_root / scope)
        return [skill] if skill else []

    candidates: list[Skill] = []
    examined = {repo_root}

    root_skill = parse_skill_from_directory(repo_root)
    if root_skill:
        candidates.append(root_skill)

    for search_path in search_paths if search_paths is not None else SKILL_SEARCH_PATHS:
        candidates.extend(find_skills_in_directory(repo_root / search_path, examined))

    if not candidates:
        logger.debug("No skills in known locations, searching %s recursively", repo_root)
        for skill_dir in iter_manifest_dirs(repo_root):
            if skill_dir in examined:
                continue
            skill = parse_skill_from_directory(skill_dir)
            if skill:
                candidates.append(skill)

    return _dedupe(candidates)


# =============================================================================
# Selection helpers
# =============================================================================


def filter_skills(skills: list[Skill], names: Iterable[str]) -> list[Skill]:
    """
    Keep skills matching any requested name.

    A skill matches when its name equals or contains the requested name,
    ignoring case. '*' selects everything.
    """
    wanted = [n.lower() for n in names]
    if "*" in wanted:
        return list(skills)
    return [
        skill for skill in skills
        if any(w == skill.name.lower() or w in skill.name.lower() for w in wanted)
    ]


def search_skills(skills: list[Skill], query: Optional[str]) -> list[Skill]:
    """Case-insensitive substring search over name, description, category and tags."""
    if not query:
        return list(skills)

    q = query.lower()

    def matches(skill: Skill) -> bool:
        meta = skill.metadata
        return (
            q in skill.name.lower()
            or q in skill.description.lower()
            or (meta.category is not None and q in meta.category.lower())
            or any(q in tag.lower() for tag in meta.tags)
        )

    return [skill for skill in skills if matches(skill)]


def group_by_category(skills: list[Skill]) -> dict[str, list[Skill]]:
    """Group skills by category, in first-seen order."""
    groups: dict[str, list[Skill]] = {}
    for skill in skills:
        groups.setdefault(skill.metadata.category or "General", []).append(skill)
    return groups


# =============================================================================
# Scaffolding
# =============================================================================

SKILL_TEMPLATE = """---
name: {name}
description: {description}
category: {category}
author: {author}
---

# {title}

{summary}

## Overview

Describe what this skill helps accomplish and when it should be used.

## Instructions

1. First step the agent should follow
2. Second step
3. Third step

## Examples

### Example 1: Basic Usage

```typescript
// Example code demonstrating the skill
```

## Guidelines

- Best practice 1
- Edge cases to handle

## Resources

- [Documentation Link](https://example.com)
"""


def validate_skill_name(name: str) -> str:
    """Skill names are lowercase letters, digits and hyphens."""
    if not name or not SKILL_NAME_RE.match(name):
        raise ConfigurationError(
            f"Invalid skill name: '{name}' (use lowercase letters, digits and hyphens)"
        )
    return name


def _yaml_scalar(value: str) -> str:
    if value and (":" in value or value[0] in "'\"[{&*!|>%@`#"):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def create_skill(
    directory: Path,
    name: str,
    description: str,
    category: str = "General",
    author: str = "",
    subdirs: Iterable[str] = (),
) -> Path:
    """
    Write a templated SKILL.md into directory.

    Args:
        directory: Skill directory (created if missing)
        name: Skill name, validated with validate_skill_name
        description: One-line description
        category: Skill category
        author: Author name (may be empty)
        subdirs: Extra directories to create, each with a .gitkeep

    Returns:
        Path to the written SKILL.md
    """
    validate_skill_name(name)
    unknown = [d for d in subdirs if d not in SKILL_SUBDIRS]
    if unknown:
        raise ConfigurationError(f"Unknown skill directories: {', '.join(unknown)}")

    directory.mkdir(parents=True, exist_ok=True)
    title = " ".join(word.capitalize() for word in name.split("-"))
    content = SKILL_TEMPLATE.format(
        name=name,
        title=title,
        summary=description,
        description=_yaml_scalar(description),
        category=_yaml_scalar(category),
        author=_yaml_scalar(author),
    )
    skill_file = directory / SKILL_FILE
    skill_file.write_text(content, encoding="utf-8")

    for subdir in subdirs:
        (directory / subdir).mkdir(exist_ok=True)
        (directory / subdir / ".gitkeep").write_text("")

    return skill_file
