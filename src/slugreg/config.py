"""Application configuration: settings schema and slugreg.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


CONFIG_FILE = "slugreg.yaml"
ENV_PREFIX = "SLUGREG_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    app_name:       str = "slugreg"
    content_dir:    str = Field(default="content",       description="Directory scanned for content documents")
    registry_path:  str = Field(default="taxonomy.yaml", description="YAML file holding the name -> slug registry")
    extensions:     list[str] = Field(default=[".md", ".mdx"], description="Content file suffixes")
    issue_labels:   list[str] = Field(default=["taxonomy", "bug"], description="Labels for filed issues")
    github_api_url: str = Field(default="https://api.github.com", description="GitHub API base URL")
    http_timeout:   float = Field(default=30.0, gt=0, description="Issue request timeout in seconds")
    log_level:      str = Field(default="WARNING", description="Logging threshold")

    @field_validator("extensions", "issue_labels", mode="before")
    @classmethod
    def split_csv(cls, v: Any) -> Any:
        """Accept comma-separated strings (env vars) as lists."""
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return v

    @field_validator("extensions")
    @classmethod
    def dotted(cls, v: list[str]) -> list[str]:
        return [e if e.startswith(".") else f".{e}" for e in v]

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from slugreg.yaml, then SLUGREG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
