"""Main daily logger tool implementation."""

import logging
from typing import Optional
from .core.config import DailyLoggerConfig
from .core.types import LogReport, UnknownCommandError, DailyLoggerError
from .core.analyzer import CommitAnalyzer, PromptFormatter
from .git.operations import GitOperations
from .ai.interface import AIClient

logger = logging.getLogger(__name__)

REPORT_KINDS = ('today', 'unpushed', 'both')


class DailyLoggerTool:
    """Collects git activity and turns it into a prompt or a summary."""

    def __init__(self,
                 git_ops: GitOperations,
                 config: DailyLoggerConfig,
                 ai_client: Optional[AIClient] = None):
        self.git_ops = git_ops
        self.config = config
        self.ai_client = ai_client
        self.analyzer = CommitAnalyzer(config)
        self.formatter = PromptFormatter(config)

    def collect(self, kind: str) -> LogReport:
        """Gather commits and the filtered diff for a report kind."""
        if kind not in REPORT_KINDS:
            raise UnknownCommandError(f"Unknown command: {kind}")

        logger.info("Collecting %s commits", kind)
        if kind == 'today':
            commits = self.git_ops.get_today_commits()
        elif kind == 'unpushed':
            commits = self.git_ops.get_unpushed_commits()
        else:
            commits = self.analyzer.merge_commits(
                self.git_ops.get_today_commits(),
                self.git_ops.get_unpushed_commits()
            )

        diff = self.analyzer.filter_diff(self.git_ops.get_diff())
        categories = self.analyzer.categorize_commits(commits)
        logger.debug("Categories: %d features, %d refactors, %d fixes, %d other",
                     len(categories.features), len(categories.refactors),
                     len(categories.fixes), len(categories.other))

        return LogReport(kind=kind, commits=commits, diff=diff, categories=categories)

    def build_prompt(self, report: LogReport) -> str:
        return self.formatter.format_prompt(report)

    async def summarize(self, report: LogReport, prompt: Optional[str] = None) -> str:
        """Forward the prompt to the AI client and return its summary."""
        if self.ai_client is None:
            raise DailyLoggerError("No AI client configured for summarizing")
        if prompt is None:
            prompt = self.build_prompt(report)
        logger.info("Requesting summary for %d commits", len(report.commits))
        return await self.ai_client.summarize(prompt, report.categories)
