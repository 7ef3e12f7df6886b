"""
User settings for nestpath, stored as YAML in the settings directory.
"""
import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from nestpath.utils.parse import as_bool, as_int

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.yaml"

class Settings(BaseModel):
    """Defaults the CLI applies when printing documents and sampling."""
    output_format: Literal["json", "yaml"] = Field("json", description="Format used to print results")
    indent: int = Field(2, ge=0, description="Indentation of printed documents")
    sort_keys: bool = Field(False, description="Sort mapping keys when printing")
    seed: int | None = Field(None, description="Default seed for shuffle and sample (None for fresh randomness)")
    verbose: bool = Field(False, description="Debug logging")

    @field_validator('output_format', mode='before')
    @classmethod
    def normalize_format(cls, value):
        """Accept 'YAML', ' yml ' and friends."""
        if isinstance(value, str):
            value = value.strip().lower()
            return "yaml" if value == "yml" else value
        return value

    @field_validator('sort_keys', 'verbose', mode='before')
    @classmethod
    def parse_flag(cls, value):
        return as_bool(value)

    @field_validator('indent', 'seed', mode='before')
    @classmethod
    def parse_whole_number(cls, value):
        return as_int(value)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Settings':
        """Hydrate Settings from a dictionary, ignoring unknown keys."""
        filtered_data = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls.model_validate(filtered_data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize Settings to a dictionary."""
        return self.model_dump()

# --- Persistence functions ---

def load_settings(settings_dir: Path) -> Settings:
    """Load settings from the settings directory, falling back to defaults."""
    path = settings_dir / SETTINGS_FILE
    if not path.exists():
        return Settings()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        return Settings.from_dict(data)
    except (yaml.YAMLError, TypeError, ValidationError) as e:
        # corrupted or invalid file
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return Settings()

def save_settings(settings_dir: Path, settings: Settings) -> Path:
    """Save settings as YAML in the settings directory."""
    settings_dir.mkdir(parents=True, exist_ok=True)
    path = settings_dir / SETTINGS_FILE
    path.write_text(yaml.safe_dump(settings.to_dict(), sort_keys=False), encoding="utf-8")
    return path
