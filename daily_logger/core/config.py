"""Configuration management for the daily logger."""

from dataclasses import dataclass, field, fields
from typing import Optional, Tuple

DEFAULT_IGNORE_FILES = (
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lock",
    "deno.lock",
)


@dataclass
class DailyLoggerConfig:
    """Configuration for a daily logger run."""

    # Output
    output_file: str = "prompt.txt"
    summary_file: str = "summary.txt"

    # Git settings
    base_branch: str = "main"
    remote: str = "origin"
    author: Optional[str] = None

    # Diff handling
    ignore_files: Tuple[str, ...] = field(default=DEFAULT_IGNORE_FILES)
    diff_char_limit: int = 60000

    # ai settings
    model: str = "claude-3-5-haiku-latest"
    max_tokens: int = 1024
    request_timeout: float = 60.0

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if not self.output_file:
            raise ValueError("output_file must not be empty")
        if not self.summary_file:
            raise ValueError("summary_file must not be empty")

        if self.diff_char_limit < 0:
            raise ValueError(
                f"diff_char_limit cannot be negative, got {self.diff_char_limit}")
        if self.max_tokens <= 0:
            raise ValueError(
                f"max_tokens must be positive, got {self.max_tokens}")
        if self.request_timeout <= 0:
            raise ValueError(
                f"request_timeout must be positive, got {self.request_timeout}")

        # Validate branch names don't contain invalid characters
        invalid_chars = [' ', '\n', '\t', '..',
                         '~', '^', ':', '?', '*', '[', '\\']
        for name, value in (("base_branch", self.base_branch), ("remote", self.remote)):
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
            for char in invalid_chars:
                if char in value:
                    raise ValueError(
                        f"{name} contains invalid character '{char}': {value}")

        if not isinstance(self.model, str) or not self.model:
            raise ValueError(f"model must be a non-empty string, got {self.model!r}")

        self.ignore_files = tuple(self.ignore_files)

    @classmethod
    def from_cli_args(cls, args, stored=None) -> 'DailyLoggerConfig':
        """Create config from command line arguments over stored settings.

        Explicit flags win over values cached in the config store.
        """
        overrides = {}
        model = getattr(args, 'model', None) or getattr(stored, 'model', None)
        if model:
            overrides['model'] = model
        author = getattr(args, 'author', None) or getattr(stored, 'author', None)
        if author:
            overrides['author'] = author
        base_branch = getattr(args, 'base_branch', None)
        if base_branch:
            overrides['base_branch'] = base_branch
        try:
            return cls(**overrides)
        except ValueError as e:
            raise ValueError(
                f"Invalid configuration from command line arguments: {e}") from e

    def with_overrides(self, **kwargs) -> 'DailyLoggerConfig':
        """Create a new config with specific overrides."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(kwargs)
        return DailyLoggerConfig(**values)
