"""Commit classification, diff filtering and prompt rendering."""

import re
import logging
from typing import Dict, Iterable, List, Optional
from .types import CommitInfo, CommitCategories, LogReport
from .config import DailyLoggerConfig

logger = logging.getLogger(__name__)

# "feat: x", "feat(api): x", "feat!: x"
_CONVENTIONAL_RE = re.compile(r'^\s*([A-Za-z]+)(?:\([^)]*\))?!?:')

CATEGORY_PREFIXES = {
    'features': ('feat', 'feature', 'add', 'adds', 'added', 'implement', 'new', 'create'),
    'refactors': ('refactor', 'perf', 'style', 'cleanup', 'restructure', 'simplify', 'rename', 'move'),
    'fixes': ('fix', 'fixes', 'fixed', 'bugfix', 'hotfix', 'resolve', 'resolves', 'closes', 'revert'),
}

PREFIX_CATEGORIES: Dict[str, str] = {
    prefix: category
    for category, prefixes in CATEGORY_PREFIXES.items()
    for prefix in prefixes
}

CATEGORY_TITLES = (
    ('features', 'Features'),
    ('refactors', 'Refactors'),
    ('fixes', 'Issues Resolved'),
    ('other', 'Other'),
)

TRUNCATION_MARKER = "\n... (diff truncated for length)"


class CommitAnalyzer:
    """Classifies commits and cleans up diffs without external dependencies."""

    def __init__(self, config: DailyLoggerConfig):
        self.config = config

    @staticmethod
    def subject_prefix(subject: str) -> str:
        """Conventional-commit type, or the first word of the subject."""
        match = _CONVENTIONAL_RE.match(subject)
        if match:
            return match.group(1).lower()
        words = subject.strip().split()
        if not words:
            return ""
        return words[0].lower().rstrip(':,.;!')

    def categorize(self, subject: str) -> str:
        """Map a commit subject to features, refactors, fixes or other."""
        return PREFIX_CATEGORIES.get(self.subject_prefix(subject), 'other')

    def categorize_commits(self, commits: Iterable[CommitInfo]) -> CommitCategories:
        """Categorize commits based on their subjects."""
        categories = CommitCategories()
        for commit in commits:
            getattr(categories, self.categorize(commit.subject)).append(commit.subject)
        return categories

    def is_ignored(self, path: str) -> bool:
        return any(ignored in path for ignored in self.config.ignore_files)

    def filter_diff(self, diff_text: str) -> str:
        """Drop file sections whose path matches the ignore list."""
        if not diff_text:
            return diff_text

        kept: List[str] = []
        skip_file = False
        for line in diff_text.split('\n'):
            if line.startswith('diff --git'):
                # "diff --git a/x b/x": the last token is the post-image path
                path = line.split(' ')[-1]
                if path.startswith('b/'):
                    path = path[2:]
                skip_file = self.is_ignored(path)
                if skip_file:
                    logger.debug("Ignoring diff for %s", path)
            if not skip_file:
                kept.append(line)

        return '\n'.join(kept)

    @staticmethod
    def merge_commits(*commit_lists: Iterable[CommitInfo]) -> List[CommitInfo]:
        """Concatenate commit lists, keeping the first occurrence of each hash."""
        seen = set()
        merged = []
        for commits in commit_lists:
            for commit in commits:
                if commit.hash in seen:
                    continue
                seen.add(commit.hash)
                merged.append(commit)
        return merged


class PromptFormatter:
    """Renders a LogReport into the prompt text."""

    INSTRUCTIONS = """## Instructions
List only what applies:

**Features:**
- [new features added]

**Refactors:**
- [code improvements/restructuring]

**Issues Resolved:**
- [bugs fixed/issues closed]

**Other:**
- [anything else noteworthy]

One line per item. Skip sections if nothing applies."""

    def __init__(self, config: DailyLoggerConfig):
        self.config = config

    def truncate_diff(self, diff: str, limit: Optional[int] = None) -> str:
        limit = self.config.diff_char_limit if limit is None else limit
        if limit and len(diff) > limit:
            logger.info("Diff truncated from %d to %d chars", len(diff), limit)
            return diff[:limit] + TRUNCATION_MARKER
        return diff

    def format_prompt(self, report: LogReport) -> str:
        label = 'unpushed' if report.kind == 'unpushed' else 'today'

        lines = ["# Daily Progress Summary", "", f"## Commits ({label})"]
        if report.has_commits:
            lines.extend(f"- {commit.display_line}" for commit in report.commits)
        else:
            lines.append("No commits found")
        lines.append("")

        if report.has_commits:
            lines.append("## Commit Categories")
            for name, title in CATEGORY_TITLES:
                lines.append(f"- {title}: {len(getattr(report.categories, name))}")
            lines.append("")

        diff = self.truncate_diff(report.diff) if report.diff else ""
        lines.extend([
            "## Code Changes",
            "```diff",
            diff or "No changes found",
            "```",
            "",
            self.INSTRUCTIONS,
        ])
        return '\n'.join(lines)
