"""Configuration models and loader for org-outline.

Configuration is read from ~/.config/org-outline/config.yaml (optional) and
can be overridden with ORG_OUTLINE_* environment variables:

- ORG_OUTLINE_FILE: Override file_path
- ORG_OUTLINE_STATUS_LABELS: Override parser.status_labels (comma separated)
- ORG_OUTLINE_MAX_ENTRIES: Override parser.max_entries
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from org_outline.parser import DEFAULT_MAX_ENTRIES
from org_outline.status_labels import DEFAULT_STATUS_LABELS, LABEL_SEPARATOR, validate_label
from org_outline.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "org-outline" / "config.yaml"


class ParserConfig(BaseModel):
    """Settings passed to the outline parser."""

    status_labels: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STATUS_LABELS),
        description="Status keywords recognized at the start of a headline, in precedence order"
    )

    max_entries: int = Field(
        default=DEFAULT_MAX_ENTRIES,
        ge=1,
        description="Maximum content blocks and child headlines under a single headline"
    )

    @field_validator("status_labels")
    @classmethod
    def validate_status_labels(cls, v: list[str]) -> list[str]:
        """Validate every label is a non-empty alphanumeric word."""
        return [validate_label(label) for label in v]

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for org-outline."""

    file_path: Optional[str] = Field(
        default=None,
        description="Org file to parse when none is given on the command line"
    )

    parser: ParserConfig = Field(default_factory=ParserConfig, description="Parser settings")

    @field_validator("file_path")
    @classmethod
    def expand_file_path(cls, v: Optional[str]) -> Optional[str]:
        """Expand ~ in the file path."""
        if v is None:
            return None
        return str(Path(v).expanduser())

    model_config = {"frozen": True}


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    A missing config file is not an error: defaults and environment
    variables are used instead.

    Args:
        config_path: Path to config file. If None, uses ~/.config/org-outline/config.yaml

    Returns:
        Validated Config object

    Raises:
        ValueError: If the config file or an override is invalid
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        logger.debug("config_loading", path=str(config_path))
        data = _read_yaml(config_path)
    else:
        data = {}

    data = _apply_env_overrides(data)

    config = Config(**data)
    logger.info("config_loaded", path=str(config_path), file_path=config.file_path)
    return config


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read the config file as a mapping.

    Raises:
        ValueError: If the file is not valid YAML or is not a mapping
    """
    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply ORG_OUTLINE_* environment variable overrides to config data."""
    data = dict(data)
    parser = dict(data.get("parser") or {})

    if file_path := os.environ.get("ORG_OUTLINE_FILE"):
        data["file_path"] = file_path

    if labels := os.environ.get("ORG_OUTLINE_STATUS_LABELS"):
        parser["status_labels"] = [label.strip() for label in labels.split(LABEL_SEPARATOR)]

    if max_entries := os.environ.get("ORG_OUTLINE_MAX_ENTRIES"):
        try:
            parser["max_entries"] = int(max_entries)
        except ValueError as e:
            raise ValueError(
                f"ORG_OUTLINE_MAX_ENTRIES must be an integer, got: {max_entries}"
            ) from e

    if parser:
        data["parser"] = parser

    return data
