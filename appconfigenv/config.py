"""Configuration management for the AppConfig environment stacks.

This module provides a centralized configuration loader that:
1. Checks environment variables first
2. Falls back to YAML configuration files
3. Provides type-safe configuration objects
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_DIR = Path(__file__).parent.parent / "config"


class AWSConfig(BaseModel):
    """AWS account and region."""
    account: Optional[str] = None
    region: str = "us-west-2"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"


class MonitorConfig(BaseModel):
    """CloudWatch alarm watched during deployments."""
    alarm_arn: str
    alarm_role_arn: Optional[str] = None


class EnvironmentConfig(BaseModel):
    """One AppConfig environment to declare."""
    id: str
    name: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    monitors: List[MonitorConfig] = Field(default_factory=list)


class ApplicationConfig(BaseModel):
    """Parent application. Set application_id to reuse an existing one."""
    name: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    application_id: Optional[str] = None


class Config(BaseModel):
    """Main configuration object."""
    stage: str = "dev"
    app_name: str = "appconfig-environments"
    aws: AWSConfig = Field(default_factory=AWSConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    application: ApplicationConfig = Field(default_factory=ApplicationConfig)
    environments: List[EnvironmentConfig] = Field(default_factory=list)


def load_config(stage: Optional[str] = None, config_dir: Optional[str] = None) -> Config:
    """Load configuration from environment variables and YAML files.

    Args:
        stage: Stage name (dev/prod). If None, uses the STAGE env var.
        config_dir: Directory holding ``<stage>.yml``. Defaults to ./config
            at the repository root.

    Returns:
        Loaded configuration object.

    Raises:
        FileNotFoundError: If configuration file doesn't exist.
        pydantic.ValidationError: If configuration is invalid.
    """
    stage = stage or os.getenv("STAGE", "dev")

    config_file = Path(config_dir or DEFAULT_CONFIG_DIR) / f"{stage}.yml"
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, 'r') as f:
        config_data = yaml.safe_load(f) or {}

    config_data.setdefault("stage", stage)
    config_data = _apply_env_overrides(config_data)

    return Config(**config_data)


def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data."""
    if os.getenv("AWS_REGION"):
        config_data.setdefault("aws", {})["region"] = os.getenv("AWS_REGION")
    if os.getenv("CDK_DEFAULT_ACCOUNT"):
        config_data.setdefault("aws", {})["account"] = os.getenv("CDK_DEFAULT_ACCOUNT")

    if os.getenv("APPCONFIG_APPLICATION_ID"):
        config_data.setdefault("application", {})["application_id"] = os.getenv("APPCONFIG_APPLICATION_ID")
    if os.getenv("APPCONFIG_APPLICATION_NAME"):
        config_data.setdefault("application", {})["name"] = os.getenv("APPCONFIG_APPLICATION_NAME")

    if os.getenv("LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL").upper()

    return config_data


def configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def is_aws_deploy_allowed() -> bool:
    """Check if AWS deployments are allowed (safety flag)."""
    return os.getenv("ALLOW_AWS_DEPLOY", "").lower() in ("1", "true", "yes")
