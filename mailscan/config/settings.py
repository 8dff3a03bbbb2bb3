"""
settings.py

Application configuration management for mailscan.

Features:
- Centralized application configuration using Pydantic settings
- Defaults for the nested token replacer used by the CLI
- Optional per-user env file located with appdirs

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final
from appdirs import user_config_dir
from pydantic_settings import BaseSettings, SettingsConfigDict

# Per-user configuration directory and optional env file
CONFIG_DIR: Final[Path] = Path(user_config_dir("mailscan", ""))
ENV_FILE: Final[Path] = CONFIG_DIR / "mailscan.env"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with the MSC_
    prefix, or through the env file in the user configuration directory.

    Attributes:
        beQuiet: Suppress detailed logging output
        detailedOutput: Print entry numbers and depth details in CLI output
        open_marker: Default open marker for nested token replacement
        close_marker: Default close marker for nested token replacement
        token_pattern: Default target pattern for nested token replacement
        token_format: Default `{}` format applied to replaced tokens
    """

    beQuiet: bool = False
    detailedOutput: bool = False

    open_marker: str = "{"
    close_marker: str = "}"
    token_pattern: str = r"\w+"
    token_format: str = "{}"

    model_config = SettingsConfigDict(
        env_prefix="MSC_",
        env_file=ENV_FILE,
        case_sensitive=False,
        extra="ignore",
    )


# Create the application settings instance
appsettings: Final[App] = App()
