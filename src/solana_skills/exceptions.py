"""
exceptions:
    Error types raised by the solana-skills core
"""


class SkillsError(Exception):
    """Base class for all solana-skills errors."""


class ConfigurationError(SkillsError):
    """Invalid user-supplied configuration."""


class UnsupportedSourceKind(SkillsError):
    """Operation is not defined for this kind of source reference."""


class SourceNotFoundError(SkillsError):
    """A local source path does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Local path does not exist: {path}")


class FetchError(SkillsError):
    """A remote repository could not be materialized locally."""


class GitError(FetchError):
    """A git command failed."""

    def __init__(self, command: list[str], stderr: str = ""):
        self.command = command
        self.stderr = stderr.strip()
        message = f"Git command failed: {' '.join(command)}"
        if self.stderr:
            message += f"\n{self.stderr}"
        super().__init__(message)
