"""AI clients for generating progress summaries."""

from .interface import AIClient
from .claude import ClaudeClient
from .mock import MockAIClient

__all__ = ["AIClient", "ClaudeClient", "MockAIClient"]
