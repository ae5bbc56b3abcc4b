"""Core functionality for the daily logger."""

from .config import DailyLoggerConfig
from .store import ConfigStore, StoredSettings
from .types import (
    CommitInfo, CommitCategories, LogReport,
    DailyLoggerError, NotAGitRepositoryError, GitOperationError,
    ConfigStoreError, AIClientError, UnknownCommandError
)
from .analyzer import CommitAnalyzer, PromptFormatter

__all__ = [
    "DailyLoggerConfig",
    "ConfigStore", "StoredSettings",
    "CommitInfo", "CommitCategories", "LogReport",
    "DailyLoggerError", "NotAGitRepositoryError", "GitOperationError",
    "ConfigStoreError", "AIClientError", "UnknownCommandError",
    "CommitAnalyzer", "PromptFormatter"
]
