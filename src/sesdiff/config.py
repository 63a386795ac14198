"""Application configuration: settings schema and sesdiff.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from sesdiff.core.models import DiffOptions


CONFIG_FILE = "sesdiff.yaml"


class Settings(BaseModel):
    context:   int            = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    gutter:    bool           = Field(default=False, description="Line numbers and visible whitespace")
    color:     Optional[bool] = Field(default=None, description="ANSI colors; None = auto-detect from the terminal")
    log_level: str            = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    def diff_options(self, color: bool) -> DiffOptions:
        """Formatting options for the renderer, with color already resolved."""
        return DiffOptions(context=self.context, gutter=self.gutter, color=color)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from sesdiff.yaml, then SESDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"SESDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
