"""Git operations for the daily logger."""

import subprocess
import logging
from datetime import datetime
from typing import List, Optional
from ..core.types import CommitInfo, GitOperationError, NotAGitRepositoryError
from ..core.config import DailyLoggerConfig

logger = logging.getLogger(__name__)

# ASCII unit separator (0x1F) - very unlikely to appear in commit messages
FIELD_SEPARATOR = '\x1f'
LOG_FORMAT = FIELD_SEPARATOR.join(["%H", "%ct", "%s", "%an"])


class GitOperations:
    """Handles all git operations for the daily logger."""

    def __init__(self, config: Optional[DailyLoggerConfig] = None):
        self.config = config or DailyLoggerConfig()
        self._validate_git_repository()

    def _run_git_command(self, cmd: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a git command and return the result."""
        full_cmd = ["git"] + cmd
        logger.debug("Running git command: %s", " ".join(full_cmd))

        try:
            result = subprocess.run(
                full_cmd,
                capture_output=True,
                text=True,
                check=check
            )
            return result
        except subprocess.CalledProcessError as e:
            logger.debug("Git command failed: %s\nStderr: %s", " ".join(full_cmd), e.stderr)
            raise GitOperationError(f"Git command failed: {(e.stderr or '').strip()}") from e
        except FileNotFoundError as e:
            raise GitOperationError("git executable not found on PATH") from e

    def _validate_git_repository(self) -> None:
        """Validate that we're in a git repository."""
        try:
            result = self._run_git_command(["rev-parse", "--git-dir"], check=True)
            logger.debug("Git repository found at: %s", result.stdout.strip())
        except GitOperationError as e:
            raise NotAGitRepositoryError(
                "Not in a git repository. This tool only works in git repositories."
            ) from e

    def _log_args(self, *revision_args: str) -> List[str]:
        cmd = ["log", f"--pretty=format:{LOG_FORMAT}"]
        if self.config.author:
            cmd.append(f"--author={self.config.author}")
        cmd.extend(revision_args)
        return cmd

    def parse_log_output(self, output: str) -> List[CommitInfo]:
        """Parse ``git log`` output produced with LOG_FORMAT."""
        commits = []
        for line in output.strip().split('\n'):
            if not line:
                continue

            parts = line.split(FIELD_SEPARATOR, 3)
            if len(parts) != 4:
                logger.warning("Skipping malformed commit line: %s", repr(line))
                continue

            hash_id, epoch, subject, author = parts
            try:
                timestamp = datetime.fromtimestamp(int(epoch))
            except ValueError as e:
                logger.warning("Failed to parse timestamp '%s' for commit %s: %s", epoch, hash_id[:7], e)
                continue

            commits.append(CommitInfo(
                hash=hash_id,
                subject=subject,
                author=author,
                timestamp=timestamp
            ))
        return commits

    def get_today_commits(self) -> List[CommitInfo]:
        """Commits made since local midnight, newest first."""
        result = self._run_git_command(self._log_args("--since=midnight"), check=False)
        if result.returncode != 0:
            # Fresh repository without any commit yet
            logger.debug("git log failed: %s", result.stderr.strip())
            return []
        commits = self.parse_log_output(result.stdout)
        logger.info("Found %d commits since midnight", len(commits))
        return commits

    def get_current_branch(self) -> str:
        """Get the name of the current branch; empty on a detached HEAD."""
        result = self._run_git_command(["branch", "--show-current"], check=False)
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def get_unpushed_commits(self) -> List[CommitInfo]:
        """Commits on the current branch that its remote counterpart lacks."""
        branch = self.get_current_branch()
        if not branch:
            logger.info("Detached HEAD, no unpushed commits to report")
            return []

        upstream = f"{self.config.remote}/{branch}"
        result = self._run_git_command(self._log_args(f"{upstream}..HEAD"), check=False)
        if result.returncode != 0:
            logger.warning("Could not compare against %s: %s", upstream, result.stderr.strip())
            return []

        commits = self.parse_log_output(result.stdout)
        logger.info("Found %d unpushed commits on %s", len(commits), branch)
        return commits

    def get_diff(self) -> str:
        """Diff against the base branch, or the working tree when that fails."""
        base = self.config.base_branch
        result = self._run_git_command(["diff", base], check=False)
        if result.returncode == 0:
            return result.stdout

        logger.warning(
            "Could not get diff from %s branch, using working directory diff instead", base)
        result = self._run_git_command(["diff"], check=False)
        if result.returncode != 0:
            logger.warning("Working directory diff failed: %s", result.stderr.strip())
            return ""
        return result.stdout
