"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from voice_terminal.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

WHITELIST_MODES = ("exact", "prefix")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int_env("PORT", 5000, minimum=1)
        self.reload: bool = self._get_bool_env("RELOAD", False)
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()

        self.shell: str = self._get_env("SHELL", "/bin/bash") or "/bin/bash"
        self.use_shell: bool = self._get_bool_env("VOICE_TERMINAL_USE_SHELL", False)
        self.whitelist_mode: str = self._get_choice_env(
            "VOICE_TERMINAL_WHITELIST_MODE", "exact", WHITELIST_MODES
        )
        self.max_processes: int = self._get_int_env(
            "VOICE_TERMINAL_MAX_PROCESSES", 4, minimum=1
        )
        self.max_sessions: int = self._get_int_env(
            "VOICE_TERMINAL_MAX_SESSIONS", 1000, minimum=1
        )
        timeout = self._get_int_env("VOICE_TERMINAL_TIMEOUT", 60, minimum=0)
        # 0 disables the per-process timeout
        self.timeout: Optional[int] = timeout or None
        self.start_directory: str = self._get_directory_env(
            "VOICE_TERMINAL_START_DIR", os.getcwd()
        )
        self.cors_origins: list[str] = [
            o.strip()
            for o in self._get_env("VOICE_TERMINAL_CORS_ORIGINS", "*").split(",")
            if o.strip()
        ]

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _get_int_env(self, key: str, default: int, minimum: int = 0) -> int:
        """Get an integer environment variable, raise error if malformed."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            parsed = int(value.strip())
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {value!r}"
            )
        if parsed < minimum:
            raise ConfigurationError(
                f"Environment variable {key} must be >= {minimum}, got {parsed}"
            )
        return parsed

    def _get_choice_env(self, key: str, default: str, choices: tuple[str, ...]) -> str:
        value = self._get_env(key, default).strip().lower()
        if value not in choices:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(choices)}, got {value!r}"
            )
        return value

    def _get_directory_env(self, key: str, default: str) -> str:
        """Get a directory path from the environment, raise error if it does not exist."""
        value = os.path.abspath(os.path.expanduser(self._get_env(key, default)))
        if not os.path.isdir(value):
            raise ConfigurationError(
                f"Environment variable {key} is not an existing directory: {value}"
            )
        return value


# Global settings instance
settings = Settings()
