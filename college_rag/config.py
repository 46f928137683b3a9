"""Configuration loader for the College RAG client."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "College RAG"
    version: str = "1.0.0"


class ApiConfig(BaseModel):
    """Backend service endpoints."""

    auth_url: str = "http://localhost:8000"
    core_url: str = "http://localhost:8081"
    request_timeout_seconds: float = 30.0


class ChatConfig(BaseModel):
    """Ask request behaviour."""

    timeout_seconds: float = 7.0
    max_retries: int = 5


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    api: ApiConfig = Field(default_factory=ApiConfig)
    chat: ChatConfig = Field(default_factory=ChatConfig)

    # Session token loaded from environment
    access_token: str | None = None


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment wins over the file for endpoints
    auth_url = os.getenv("COLLEGE_RAG_AUTH_URL")
    if auth_url:
        config.api.auth_url = auth_url
    core_url = os.getenv("COLLEGE_RAG_CORE_URL")
    if core_url:
        config.api.core_url = core_url

    config.access_token = os.getenv("COLLEGE_RAG_ACCESS_TOKEN")

    return config
