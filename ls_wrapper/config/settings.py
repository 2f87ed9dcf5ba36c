"""
Configuration settings for the application.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from ls_wrapper.entities.translation import Backend
from ls_wrapper.exceptions import ConfigurationError

ENV_FILE_VAR = "LS_WRAPPER_ENV_FILE"

# Programs to spawn may only come from the real environment, never from a file
EXECUTABLE_KEYS = ("LS_WRAPPER_CMD", "LS_WRAPPER_POWERSHELL")

logger = logging.getLogger(__name__)


def default_env_file() -> Path:
    """Per-user settings file, e.g. C:\\Users\\me\\.config\\ls-wrapper\\.env."""
    return Path.home() / ".config" / "ls-wrapper" / ".env"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, load_env_file: bool = True, env_file: Optional[str] = None):
        """
        Load settings.

        The working directory is never searched for a .env file: the file is
        the one named by env_file, by LS_WRAPPER_ENV_FILE, or the per-user
        default. Its values are read without touching os.environ, so they
        never reach the spawned shell, and real environment variables win.

        Args:
            load_env_file: Whether to read a settings file at all
            env_file: Explicit settings file path

        Raises:
            ConfigurationError: If a setting is invalid or a named file is missing
        """
        self._file_values: dict[str, Optional[str]] = {}
        if load_env_file:
            self._file_values = self._read_env_file(env_file)

        self.default_backend: Backend = self._get_backend(
            "LS_WRAPPER_DEFAULT_BACKEND", Backend.CMD
        )
        self.log_level: int = self._get_log_level("LS_WRAPPER_LOG_LEVEL", "WARNING")
        self.cmd_executable: str = self._get_env("LS_WRAPPER_CMD", "cmd.exe")
        self.powershell_executable: str = self._get_env(
            "LS_WRAPPER_POWERSHELL", "powershell.exe"
        )

    def _read_env_file(self, env_file: Optional[str]) -> dict[str, Optional[str]]:
        explicit = env_file or os.getenv(ENV_FILE_VAR)
        path = Path(explicit) if explicit else default_env_file()
        if not path.is_file():
            if explicit:
                raise ConfigurationError(f"Settings file not found: {path}")
            return {}

        values = dict(dotenv_values(path))
        for key in EXECUTABLE_KEYS:
            if key in values:
                logger.warning(
                    f"Ignoring {key} from {path}: set it in the environment instead"
                )
                del values[key]
        return values

    def _lookup(self, key: str) -> Optional[str]:
        if key in EXECUTABLE_KEYS:
            return os.getenv(key)
        return os.getenv(key) or self._file_values.get(key)

    def _get_env(self, key: str, default: str) -> str:
        """Get a setting with a default value."""
        return self._lookup(key) or default

    def _get_backend(self, key: str, default: Backend) -> Backend:
        """Get a backend name, raise error if unknown."""
        value = self._lookup(key)
        if not value:
            return default
        try:
            return Backend(value.strip().lower())
        except ValueError:
            choices = ", ".join(b.value for b in Backend)
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected one of: {choices})"
            )

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name, raise error if unknown."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid value for {key}: {name!r}")
        return level
