"""RECOV assistant configuration.

Includes:
- AssistantConfig: Settings with environment variable and YAML support
- BackendCredential: Shared, mutable API key for the conversational backend

Environment Variables:
    RECOV_API_KEY: API key for the conversational backend
    RECOV_LOW_CONFIDENCE_THRESHOLD: Weight below which a recognised command
        gets a "need more detail" fallback
    RECOV_MAX_INPUT_LENGTH: Messages longer than this are truncated
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, PrivateAttr, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = ".recov"
CONFIG_FILE = "config.yaml"


class BackendCredential:
    """API key holder shared by reference between config and backends.

    The holder is created by whoever owns the configuration and handed to
    the backend; every request reads the current value. update() takes
    effect for requests issued after it returns.
    """

    def __init__(self, api_key: str | None = None) -> None:
        self._api_key = api_key or None

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def is_set(self) -> bool:
        return self._api_key is not None

    def update(self, api_key: str | None) -> None:
        """Replace the key. An empty string clears it."""
        self._api_key = api_key or None

    def __repr__(self) -> str:
        state = "set" if self.is_set else "unset"
        return f"BackendCredential({state})"


class AssistantConfig(BaseSettings):
    """Assistant configuration with environment variable support.

    Configuration is loaded from environment variables with RECOV_ prefix.
    For example, RECOV_API_KEY sets api_key.

    Precedence (highest to lowest):
        1. Explicit keyword arguments
        2. Environment variables (RECOV_*)
        3. Config file (.recov/config.yaml)
        4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RECOV_",
        extra="ignore",
    )

    project_path: Path = Field(default_factory=Path.cwd)
    api_key: Optional[SecretStr] = None
    low_confidence_threshold: int = Field(default=80, ge=0, le=100)
    max_input_length: int = Field(default=10_000, gt=0)

    _credential: Optional[BackendCredential] = PrivateAttr(default=None)

    def credential(self) -> BackendCredential:
        """Shared credential built from api_key (same object on every call)."""
        if self._credential is None:
            key = self.api_key.get_secret_value() if self.api_key else None
            self._credential = BackendCredential(key)
        return self._credential

    @property
    def config_file(self) -> Path:
        return self.project_path / CONFIG_DIR / CONFIG_FILE

    @classmethod
    def load(cls, path: Path) -> "AssistantConfig":
        """Load configuration from .recov/config.yaml if it exists.

        Environment variables still override values from the file.

        Args:
            path: Project path to load configuration for

        Returns:
            AssistantConfig with file values applied (or defaults)
        """
        from ruamel.yaml import YAML

        config = cls(project_path=path)
        config_file = config.config_file

        if config_file.exists():
            yaml = YAML()
            with config_file.open() as f:
                data = yaml.load(f)

            section = (data or {}).get("assistant") or {}
            # Values already coming from the environment win over the file
            overrides = {
                key: value
                for key, value in section.items()
                if key in ("low_confidence_threshold", "max_input_length")
                and key not in config.model_fields_set
            }
            if overrides:
                config = cls(project_path=path, **overrides)

        return config

    def save(self) -> None:
        """Save configuration to .recov/config.yaml in the project path.

        The API key is never written to disk.
        """
        from ruamel.yaml import YAML

        config_file = self.config_file
        config_file.parent.mkdir(parents=True, exist_ok=True)

        yaml = YAML()
        yaml.default_flow_style = False

        data = {
            "assistant": {
                "low_confidence_threshold": self.low_confidence_threshold,
                "max_input_length": self.max_input_length,
            }
        }

        with config_file.open("w") as f:
            yaml.dump(data, f)


__all__ = ["AssistantConfig", "BackendCredential"]
