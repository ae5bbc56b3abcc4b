"""
Daily Logger

Generate daily progress logs from git commits and diffs, optionally
summarized by Claude.
"""

__version__ = "1.0.0"

from .core.config import DailyLoggerConfig
from .core.store import ConfigStore, StoredSettings
from .core.types import CommitInfo, CommitCategories, LogReport
from .git.operations import GitOperations
from .ai.interface import AIClient
from .ai.claude import ClaudeClient
from .ai.mock import MockAIClient
from .tool import DailyLoggerTool

__all__ = [
    "DailyLoggerConfig",
    "ConfigStore",
    "StoredSettings",
    "CommitInfo",
    "CommitCategories",
    "LogReport",
    "GitOperations",
    "AIClient",
    "ClaudeClient",
    "MockAIClient",
    "DailyLoggerTool"
]
