"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    app_name:        str = "mdblocks"
    parser_config:   str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    output_dir:      str = Field(default="dist", description="Directory for converted JSON files")
    max_file_size:   int = Field(default=10 * 1024 * 1024, ge=1, description="Max source file size in bytes")
    validate_output: bool = Field(default=True, description="Reject documents whose blocks fail validation")
    json_indent:     int = Field(default=2, ge=0, description="JSON indent; 0 writes compact output")
    log_level:       str = Field(default="WARNING", pattern=f"^({'|'.join(LOG_LEVELS)})$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOCKS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOCKS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
