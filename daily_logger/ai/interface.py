"""Abstract interface for AI clients."""

from abc import ABC, abstractmethod
from ..core.types import CommitCategories


class AIClient(ABC):
    """Abstract interface for AI providers that summarize a progress prompt."""

    @abstractmethod
    async def summarize(self, prompt: str, categories: CommitCategories) -> str:
        """Turn a formatted prompt into a progress summary.

        Args:
            prompt: Prompt text produced by PromptFormatter
            categories: Commit subjects grouped by category, for clients
                that do not read the prompt itself

        Returns:
            Summary text with Features / Refactors / Issues Resolved / Other
            sections

        Raises:
            AIClientError: when no summary could be produced
        """
        pass
