"""Reader configuration: pydantic schema and YAML loading."""

import yaml
from pathlib import Path
from typing import Literal, Union
from pydantic import BaseModel, Field

from .segmenters.sentence import SentenceSegmenter, BOUNDARY_MARKERS, BASIC_MARKERS

class ConfigLoadError(Exception):
    """Exception raised when configuration loading or validation fails."""
    pass

class ReaderConfig(BaseModel):
    """Settings for reading guides from a text directory."""
    text_dir: str = Field(default="text", description="Directory holding list.json and guide files")
    catalog_name: str = Field(default="list.json", min_length=1,
                              description="Catalog file name inside text_dir")
    markers: Literal["full", "basic"] = Field(default="full",
                                              description="full adds … and — to 。！？.!?")
    encoding: str = Field(default="utf-8-sig", description="Encoding of guide files")

    class Config:
        extra = "forbid"  # Strict validation

    @property
    def catalog_format(self) -> str:
        return "yaml" if self.catalog_name.lower().endswith((".yaml", ".yml")) else "json"

def build_segmenter(config: ReaderConfig) -> SentenceSegmenter:
    """Create the segmenter selected by the configuration."""
    return SentenceSegmenter(BOUNDARY_MARKERS if config.markers == "full" else BASIC_MARKERS)

def load_config(path: Union[str, Path]) -> ReaderConfig:
    """
    Load and validate reader configuration from a YAML file.

    Raises:
        ConfigLoadError: If file cannot be read or configuration is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except Exception as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config file must contain a YAML mapping, got {type(data)}")

    try:
        return ReaderConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Config validation failed: {e}")
