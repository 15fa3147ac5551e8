"""Configuration file support for image-audit."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from image_audit.utils.errors import ConfigurationError


class CatalogConfig(BaseModel):
    """Image catalog configuration."""

    cloud: str | None = Field(default=None, description="Cloud name in clouds.yaml")
    endpoint: str | None = Field(default=None, description="Glance endpoint URL (bypasses clouds.yaml)")
    token: str | None = Field(default=None, description="Keystone token for the Glance endpoint")
    visibility: str = Field(default="public", description="Image visibility to list")
    timeout: float = Field(default=60.0, description="Listing timeout in seconds")
    max_retries: int = Field(default=3, description="Transport retry attempts")


class ValidationConfig(BaseModel):
    """Schema selection configuration."""

    version: str = Field(default="v2", description="Schema version to validate against")
    prefix: str = Field(default="unikorn:", description="Namespace prefix that makes an image eligible")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: Literal["terminal", "json", "jsonl"] = Field(default="terminal", description="Default output format")
    color: bool = Field(default=True, description="Enable color output")
    summary: bool = Field(default=False, description="Print a summary after the report")


class AuditConfig(BaseModel):
    """Main configuration for image-audit."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    paths.append(Path.cwd() / ".image-audit.yaml")
    paths.append(Path.cwd() / ".image-audit.yml")

    home = Path.home()
    paths.append(home / ".image-audit.yaml")
    paths.append(home / ".config" / "image-audit" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "image-audit" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> AuditConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If an explicit file is missing or any file is invalid
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise ConfigurationError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return AuditConfig()


def _load_config_file(path: Path) -> AuditConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return AuditConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    try:
        return AuditConfig.model_validate(data)
    except ValidationError as e:
        key = ".".join(str(p) for p in e.errors()[0]["loc"])
        raise ConfigurationError(f"Invalid config file {path}: {e}", config_key=key) from e


def save_config(config: AuditConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/image-audit/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "image-audit" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    return config_path
