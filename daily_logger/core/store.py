"""JSON-backed store for settings cached between runs."""
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os
import tempfile

from .types import ConfigStoreError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DAILY_LOGGER_CONFIG"


@dataclass
class StoredSettings:
    """Values remembered across invocations."""
    api_key: Optional[str] = None
    author: Optional[str] = None
    model: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, dropping unset fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StoredSettings':
        """Create from dictionary, ignoring keys this version does not know."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def default_config_path() -> Path:
    """Resolve the config file location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "daily-logger" / "config.json"


class ConfigStore:
    """Reads and writes the cached API key, author and model.

    Writes go through a temporary file in the same directory followed by
    ``os.replace`` so a crash never leaves a half-written file behind. The
    file holds an API key, so it is created with mode 0600.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else default_config_path()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> StoredSettings:
        """Load stored settings; a missing file yields empty settings."""
        if not self.path.exists():
            logger.debug("No config file at %s", self.path)
            return StoredSettings()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigStoreError(f"Config file {self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise ConfigStoreError(f"Cannot read config file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigStoreError(
                f"Config file {self.path} must contain a JSON object, got {type(data).__name__}")

        logger.debug("Loaded config from %s", self.path)
        return StoredSettings.from_dict(data)

    def save(self, settings: StoredSettings) -> None:
        """Persist settings atomically."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_json_atomic(settings.to_dict())
        except OSError as e:
            raise ConfigStoreError(f"Cannot write config file {self.path}: {e}") from e
        logger.info("Saved config to %s", self.path)

    def update(self, **changes) -> StoredSettings:
        """Load, apply non-None changes, save and return the result."""
        current = self.load().to_dict()
        current.update({k: v for k, v in changes.items() if v is not None})
        settings = StoredSettings.from_dict(current)
        self.save(settings)
        return settings

    def clear(self) -> bool:
        """Delete the config file. Returns whether anything was removed."""
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as e:
            raise ConfigStoreError(f"Cannot remove config file {self.path}: {e}") from e
        logger.info("Removed config file %s", self.path)
        return True

    def masked_key(self, settings: Optional[StoredSettings] = None) -> str:
        """API key shortened for display."""
        settings = settings or self.load()
        key = settings.api_key
        if not key:
            return "(not set)"
        if len(key) <= 8:
            return "*" * len(key)
        return f"{key[:3]}...{key[-4:]}"

    def _write_json_atomic(self, data: Dict[str, Any]) -> None:
        temp_fd, temp_path = tempfile.mkstemp(dir=self.path.parent, suffix='.tmp')
        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(temp_path, 0o600)
            os.replace(temp_path, self.path)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
