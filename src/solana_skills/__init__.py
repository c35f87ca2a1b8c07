"""
solana-skills:
    Discover agent skills in git repositories or local folders and install
    them into AI coding agents.
"""

__version__ = "1.0.0"
