"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class CliConfig(BaseSettings):
    """Interactive front-end configuration."""

    model_config = {"env_prefix": "CONVERSORXML_CLI_"}

    input_dir: str = "."
    input_pattern: str = "*.xml"
    show_banner: bool = True
    pause_on_exit: bool = True  # "Press Enter to exit" after an interactive run


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CONVERSORXML_"}

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    cli: CliConfig = Field(default_factory=CliConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
