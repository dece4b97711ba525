"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from mdprose.core.models import GoalThresholds, GoalType


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "mdprose"
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    max_nesting:   int = Field(default=6, ge=1, le=6, description="Deepest heading level that opens a section")
    bibliography_titles: list[str] = Field(
        default=["Bibliography", "References"], description="Heading titles that start the bibliography")
    exclude_bibliography: bool = Field(default=False, description="Leave bibliography words out of prose counts and goals")
    goal:      Optional[int] = Field(default=None, gt=0, description="Document word goal; None disables")
    goal_type: GoalType      = Field(default=GoalType.approx, description="min, max, or approx")
    min_warning_percent:   float = Field(default=80,  ge=0)
    max_warning_percent:   float = Field(default=105, ge=100)
    approx_green_percent:  float = Field(default=5,   ge=0)
    approx_orange_percent: float = Field(default=8,   ge=0)
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("bibliography_titles", mode="before")
    @classmethod
    def _split_titles(cls, v):
        """Accept a comma-separated string (env vars) as well as a list."""
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @property
    def thresholds(self) -> GoalThresholds:
        return GoalThresholds(
            min_warning_percent=self.min_warning_percent,
            max_warning_percent=self.max_warning_percent,
            approx_green_percent=self.approx_green_percent,
            approx_orange_percent=self.approx_orange_percent,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPROSE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPROSE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
