"""
frontmatter:
    YAML frontmatter parsing for SKILL.md files
"""

from __future__ import annotations

import yaml


class FrontmatterError(ValueError):
    """Frontmatter block is present but malformed."""


def split(content: str) -> tuple[str | None, str]:
    """
    Split a document into its raw frontmatter text and body.

    A leading byte-order mark is dropped. Returns (None, content) when the
    document has no frontmatter block.
    Raises FrontmatterError if the opening '---' is never closed.
    """
    content = content.lstrip("\ufeff")
    if not content.startswith("---"):
        return None, content

    lines = content.split("\n")
    if lines[0].strip() != "---":
        return None, content

    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            return "\n".join(lines[1:i]), "\n".join(lines[i + 1:])

    raise FrontmatterError("Unclosed YAML frontmatter (missing closing '---')")


def parse(content: str) -> tuple[dict, str]:
    """
    Parse YAML frontmatter from a markdown document.

    Returns:
        Tuple of (frontmatter dict, body). The dict is empty when the
        document has no frontmatter.

    Raises:
        FrontmatterError: If the block is unclosed, is not valid YAML,
            or is not a mapping.
    """
    raw, body = split(content)
    if raw is None:
        return {}, body

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        error_msg = str(e)
        if "mapping values are not allowed" in error_msg:
            raise FrontmatterError(
                "Invalid YAML: values containing colons must be quoted. "
                'Example: description: "Text with: colons"'
            ) from e
        raise FrontmatterError(f"Invalid YAML frontmatter: {error_msg}") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError("Frontmatter must be a mapping of keys to values")
    return data, body
