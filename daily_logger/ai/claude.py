"""Claude AI client implementation."""
import os
import logging
from typing import Any, Dict, Optional

from anthropic import AsyncAnthropic, APIError, APIStatusError

from .interface import AIClient
from ..core.types import AIClientError, CommitCategories
from ..core.config import DailyLoggerConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an assistant that writes short daily progress logs for software "
    "developers from their git commits and diffs. Follow the requested section "
    "layout exactly and write one line per item."
)


class ClaudeClient(AIClient):
    """Claude AI client for generating progress summaries."""

    def __init__(self, api_key: Optional[str] = None, config: Optional[DailyLoggerConfig] = None):
        self.api_key = api_key or os.environ.get('ANTHROPIC_API_KEY')
        if not self.api_key:
            raise ValueError(
                "An API key is required: pass --api-key, set ANTHROPIC_API_KEY, "
                "or store one with 'daily-logger config --api-key'")

        self.config = config or DailyLoggerConfig()
        # One request per run; failures surface to the caller instead of retrying
        self.client = AsyncAnthropic(
            api_key=self.api_key,
            max_retries=0,
            timeout=self.config.request_timeout
        )

        self._request_count = 0
        self._input_tokens = 0
        self._output_tokens = 0

    async def summarize(self, prompt: str, categories: CommitCategories) -> str:
        """Send the prompt to Claude and return the response text."""
        logger.debug("Requesting summary from %s (%d prompt chars, %d commits)",
                     self.config.model, len(prompt), categories.total_count)

        try:
            response = await self.client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}]
            )
        except APIStatusError as e:
            logger.error("Claude API returned status %s: %s", e.status_code, e.message)
            raise AIClientError(f"Claude API error ({e.status_code}): {e.message}") from e
        except APIError as e:
            logger.error("Claude API request failed: %s", e)
            raise AIClientError(f"Claude API request failed: {e}") from e

        self._request_count += 1
        usage = getattr(response, 'usage', None)
        if usage is not None:
            self._input_tokens += usage.input_tokens or 0
            self._output_tokens += usage.output_tokens or 0

        text_parts = [
            block.text for block in response.content
            if getattr(block, 'type', None) == 'text'
        ]
        summary = '\n'.join(text_parts).strip()
        if not summary:
            logger.warning("Claude returned no text (stop_reason=%s)",
                           getattr(response, 'stop_reason', None))
            raise AIClientError("Claude returned an empty response")

        logger.debug("Generated summary (%d chars)", len(summary))
        return summary

    def get_usage_stats(self) -> Dict[str, Any]:
        """Request and token counters for this client."""
        return {
            'requests': self._request_count,
            'input_tokens': self._input_tokens,
            'output_tokens': self._output_tokens,
            'total_tokens': self._input_tokens + self._output_tokens,
        }
