"""
config:
    Constants and environment-derived settings for solana-skills
"""

import os
import tempfile
from pathlib import Path

SKILL_FILE = "SKILL.md"

DEFAULT_OWNER = "sendaifun"
DEFAULT_REPO = "skills"
DEFAULT_BRANCH = "main"

# Repository cache: one working copy per owner-repo pair
CACHE_DIR = Path(
    os.environ.get("SOLANA_SKILLS_CACHE", Path(tempfile.gettempdir()) / "solana-skills-cache")
)

GIT_TIMEOUT = int(os.environ.get("SOLANA_SKILLS_GIT_TIMEOUT", "300"))

INSTALL_METHODS = ("symlink", "copy")
DEFAULT_INSTALL_METHOD = "symlink"

# Conventional locations scanned for skill directories, in priority order
SKILL_SEARCH_PATHS = [
    "skills",
    "skills/.curated",
    "skills/.experimental",
    "skills/.system",
    ".agents/skills",
    ".agent/skills",
    ".claude/skills",
    ".cline/skills",
    ".codex/skills",
    ".commandcode/skills",
    ".continue/skills",
    ".crush/skills",
    ".cursor/skills",
    ".factory/skills",
    ".gemini/skills",
    ".github/skills",
    ".goose/skills",
    ".kilocode/skills",
    ".kiro/skills",
    ".mcpjam/skills",
    ".opencode/skills",
    ".openhands/skills",
    ".pi/skills",
    ".qoder/skills",
    ".qwen/skills",
    ".roo/skills",
    ".trae/skills",
    ".windsurf/skills",
    ".zencoder/skills",
    ".neovate/skills",
]

# Pruned from the recursive manifest search
IGNORED_DIRS = frozenset({
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "bower_components",
    "vendor",
    "__pycache__",
    ".venv",
    "venv",
})

SKILL_CATEGORIES = [
    "DeFi",
    "NFT & Tokens",
    "Program Development",
    "Client Development",
    "Infrastructure",
    "Oracles",
    "Security",
    "Cross-Chain",
    "Trading",
    "Data & Analytics",
    "DevOps",
    "AI Agents",
    "General",
]

SKILL_SUBDIRS = ["docs", "examples", "resources", "templates"]
