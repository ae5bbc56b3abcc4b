"""Type definitions for the daily logger."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class CommitInfo:
    """Information about a single commit."""
    hash: str
    subject: str
    author: str
    timestamp: datetime

    @property
    def short_hash(self) -> str:
        """Get short version of commit hash."""
        return self.hash[:7]

    @property
    def display_line(self) -> str:
        """One-line rendering used in the prompt."""
        return f"{self.short_hash} - {self.subject} ({self.author})"


@dataclass
class CommitCategories:
    """Commit subjects grouped by category."""
    features: List[str] = field(default_factory=list)
    refactors: List[str] = field(default_factory=list)
    fixes: List[str] = field(default_factory=list)
    other: List[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        """Total number of categorized commits."""
        return sum(len(getattr(self, name)) for name in self.__dataclass_fields__)


@dataclass
class LogReport:
    """Everything collected for one invocation."""
    kind: str
    commits: List[CommitInfo]
    diff: str
    categories: CommitCategories

    @property
    def has_commits(self) -> bool:
        return bool(self.commits)


class DailyLoggerError(Exception):
    """Base exception for daily logger operations."""
    pass


class NotAGitRepositoryError(DailyLoggerError):
    """Raised when the working directory is not inside a git repository."""
    pass


class GitOperationError(DailyLoggerError):
    """Raised when git operations fail."""
    pass


class ConfigStoreError(DailyLoggerError):
    """Raised when the config file cannot be read or written."""
    pass


class AIClientError(DailyLoggerError):
    """Raised when the summary request fails."""
    pass


class UnknownCommandError(DailyLoggerError):
    """Raised for a command the tool does not know."""
    pass
