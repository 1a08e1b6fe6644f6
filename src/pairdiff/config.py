"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "PAIRDIFF_"


class Settings(BaseModel):
    left_label:      str  = Field(default="original", description="Label on the '---' header line")
    right_label:     str  = Field(default="modified", description="Label on the '+++' header line")
    output_format:   str  = Field(default="unified", pattern="^(unified|side|json)$", description="unified, side or json")
    max_input_lines: int  = Field(default=0,  ge=0,  description="Max lines per input; 0 = unlimited")
    side_width:      int  = Field(default=60, ge=10, description="Column width of each side in side-by-side output")
    color:           bool = Field(default=True, description="ANSI highlighting in side-by-side output")
    log_level:       str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def _read_yaml(path: Path) -> dict[str, Any]:
    """Return the mapping in a YAML config file, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values(prefix: str = ENV_PREFIX) -> dict[str, str]:
    """Collect non-empty <prefix><FIELD> environment variables keyed by field name."""
    return {
        name: os.environ[f"{prefix}{name.upper()}"]
        for name in Settings.model_fields
        if os.environ.get(f"{prefix}{name.upper()}")
    }


def load_config(overrides: dict[str, Any] = None, path: str = CONFIG_FILE) -> Settings:
    """Merge config file < PAIRDIFF_* env vars < non-None overrides into Settings.

    Fields that any layer names end up in Settings.model_fields_set; callers
    use that to tell explicit values from schema defaults.
    """
    data = {**_read_yaml(Path(path)), **_env_values()}
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
