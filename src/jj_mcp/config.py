"""
Configuration management for jj-mcp.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

log = logging.getLogger(__name__)

ENV_JJ_COMMAND = "JJ_MCP_JJ_COMMAND"
ENV_LOG_LEVEL = "JJ_MCP_LOG_LEVEL"
ENV_TIMEOUT = "JJ_MCP_TIMEOUT"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Validated jj-mcp settings."""

    jj_command: str = Field(default="jj", min_length=1)
    log_level: str = "INFO"
    command_timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


class Config:
    """
    Manages configuration for the jj-mcp server.

    Values come from, in increasing order of precedence: built-in defaults,
    the YAML config file, and JJ_MCP_* environment variables. Command-line
    flags are applied on top by the caller through ``override``.
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_dir = Path.home() / ".config" / "jj-mcp"
        self.config_file = Path(config_file) if config_file else self.config_dir / "config.yaml"
        self.settings = Settings()

        values = self._load_config()
        values.update(self._load_env())
        self.settings = self._validate(values)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        if not self.config_file.exists():
            log.debug(f"No config file at {self.config_file}, using defaults")
            return {}
        try:
            with open(self.config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            log.error(f"Error parsing YAML config file {self.config_file}: {e}")
            return {}
        except OSError as e:
            log.error(f"Error reading config file {self.config_file}: {e}")
            return {}

        if not isinstance(data, dict):
            log.error(f"Config file {self.config_file} must contain a mapping, ignoring it")
            return {}
        return data

    def _load_env(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables."""
        values = {}
        if os.environ.get(ENV_JJ_COMMAND):
            values["jj_command"] = os.environ[ENV_JJ_COMMAND]
        if os.environ.get(ENV_LOG_LEVEL):
            values["log_level"] = os.environ[ENV_LOG_LEVEL]
        if os.environ.get(ENV_TIMEOUT):
            values["command_timeout"] = os.environ[ENV_TIMEOUT]
        return values

    def _validate(self, values: Dict[str, Any]) -> Settings:
        known = {key: value for key, value in values.items() if key in Settings.model_fields}
        unknown = sorted(set(values) - set(known))
        if unknown:
            log.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        try:
            return Settings(**known)
        except ValidationError as e:
            log.error(f"Invalid configuration in {self.config_file} or environment, using defaults: {e}")
            return Settings()

    def override(self, **values: Any) -> None:
        """Apply explicit overrides (e.g. command-line flags); None values are ignored."""
        updates = {key: value for key, value in values.items() if value is not None}
        if not updates:
            return
        merged = self.settings.model_dump()
        merged.update(updates)
        self.settings = Settings(**merged)

    @property
    def jj_command(self) -> str:
        return self.settings.jj_command

    @property
    def log_level(self) -> str:
        return self.settings.log_level

    @property
    def command_timeout(self) -> Optional[float]:
        return self.settings.command_timeout
