import logging
import os
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv
from .exceptions import ConfigError

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


class Config(BaseModel):
    log_level: str = Field(default="WARNING", description="Log level for the doomsday logger")
    strict_days: bool = Field(
        default=False,
        description="Reject days outside the month instead of wrapping them",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def load(cls, path: str = "doomsday.yaml") -> "Config":
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            raw = yaml.safe_load(p.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML: {e}", original_error=e)

        if not isinstance(raw, dict):
            raise ConfigError("Config root must be a mapping", context={"path": path})

        # Environment variable overrides
        if level := os.getenv("DOOMSDAY_LOG_LEVEL"):
            raw["log_level"] = level
        if strict := os.getenv("DOOMSDAY_STRICT_DAYS"):
            raw["strict_days"] = strict.lower() in _TRUTHY

        try:
            return cls(**raw)
        except Exception as e:
            raise ConfigError(f"Invalid configuration: {e}")
