"""Configuration management for the Freckle KPI CLI."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_dir

from .exceptions import ConfigurationError

APP_NAME = "freckle-tools"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

FRECKLE_TOKEN_VAR = "FRECKLE_APP_TOKEN"
FRECKLE_API_URL_VAR = "FRECKLE_API_URL"
LIBRATO_ACCOUNT_VAR = "LIBRATO_ACCOUNT"
LIBRATO_TOKEN_VAR = "LIBRATO_TOKEN"

DEFAULT_API_URL = "https://api.letsfreckle.com/v2"
DEFAULT_PERIOD = "year"


@dataclass
class Settings:
    """Defaults read from the optional settings file."""

    period: str = DEFAULT_PERIOD
    projects: list[str] = field(default_factory=list)


@dataclass
class Config:
    """Application configuration."""

    app_token: str
    api_url: str = DEFAULT_API_URL
    librato_account: Optional[str] = None
    librato_token: Optional[str] = None
    settings: Settings = field(default_factory=Settings)

    @property
    def librato_configured(self) -> bool:
        """Both Librato credentials are present and non-empty."""
        return bool(self.librato_account) and bool(self.librato_token)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load report defaults from YAML.

    The file is optional and looks like:
    ```yaml
    period: month
    projects:
      - "Alpha"
      - "Beta (phase 2)"
    ```
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        return Settings()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        period = str(data.get("period") or DEFAULT_PERIOD)
        if period not in ("month", "year"):
            period = DEFAULT_PERIOD

        projects = data.get("projects") or []
        if isinstance(projects, str):
            projects = [projects]
        if not isinstance(projects, list):
            return Settings(period=period)

        return Settings(period=period, projects=[str(name) for name in projects])
    except (yaml.YAMLError, AttributeError, TypeError):
        return Settings()


def load_config() -> Config:
    """Load credentials from the environment (or .env) and defaults from the settings file."""
    load_dotenv()

    app_token = os.getenv(FRECKLE_TOKEN_VAR)
    if not app_token:
        raise ConfigurationError(f"{FRECKLE_TOKEN_VAR} environment variable is not set")

    return Config(
        app_token=app_token,
        api_url=os.getenv(FRECKLE_API_URL_VAR) or DEFAULT_API_URL,
        librato_account=os.getenv(LIBRATO_ACCOUNT_VAR) or None,
        librato_token=os.getenv(LIBRATO_TOKEN_VAR) or None,
        settings=load_settings(),
    )
