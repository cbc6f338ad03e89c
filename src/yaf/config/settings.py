"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use YAF_ prefix (e.g., YAF_SHELL=/bin/bash).

Settings can also be loaded from a .env file in the working directory.
"""

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def configPath_default() -> str:
    """
    Default template location: $XDG_CONFIG_HOME/yaf.conf

    Falls back to ~/.config/yaf.conf when XDG_CONFIG_HOME is unset.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return str(Path(config_home) / "yaf.conf")


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use YAF_ prefix.

    Examples:
        YAF_CONFIG_PATH=/etc/yaf.conf
        YAF_SHELL=/bin/bash
        YAF_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="YAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Template configuration
    config_path: str = Field(
        default_factory=configPath_default,
        description="Template file read when no path is given on the command line",
    )

    # Rendering configuration
    shell: str = Field(
        default="/bin/sh",
        description="Shell used to run {command} directives as `<shell> -c <command>`",
    )

    not_available: str = Field(
        default="N/A",
        description="Text shown for built-in fields that cannot be determined",
    )

    reset_on_exit: bool = Field(
        default=True,
        description="Write the ANSI reset sequence after output and on errors",
    )

    # Output configuration
    highlight_dump: bool = Field(
        default=True,
        description="Syntax highlight --dump-config output when stdout is a terminal",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Minimum level of log messages written to stderr",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def logLevel_normalize(cls, value: Any) -> Any:
        """Accept level names in any case, e.g. YAF_LOG_LEVEL=debug"""
        return value.upper() if isinstance(value, str) else value


# Singleton instance - import this in your code
appsettings = AppSettings()
