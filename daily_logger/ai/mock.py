"""Mock AI client for testing."""

import logging
from typing import List
from .interface import AIClient
from ..core.types import CommitCategories
from ..core.analyzer import CATEGORY_TITLES

logger = logging.getLogger(__name__)


class MockAIClient(AIClient):
    """Mock AI client that builds a summary straight from commit categories."""

    def __init__(self):
        self.prompts: List[str] = []

    async def summarize(self, prompt: str, categories: CommitCategories) -> str:
        """Generate mock summary based on categories."""
        logger.debug("Generating mock summary for %d commits", categories.total_count)
        self.prompts.append(prompt)

        sections = []
        for name, title in CATEGORY_TITLES:
            subjects = getattr(categories, name)
            if not subjects:
                continue
            lines = [f"**{title}:**"]
            lines.extend(f"- {self._clean_subject(subject)}" for subject in subjects)
            sections.append('\n'.join(lines))

        if not sections:
            return "**Other:**\n- No commits recorded"
        return '\n\n'.join(sections)

    @staticmethod
    def _clean_subject(subject: str) -> str:
        """Strip a conventional-commit prefix such as ``fix(api):``."""
        head, sep, rest = subject.partition(':')
        if sep and rest.strip() and ' ' not in head.strip():
            return rest.strip()
        return subject.strip()
