"""Configuration management for pipesh."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROMPT = "> "


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PIPESH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Front end
    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt written before each line is read")
    line_editor: bool = Field(default=False, description="Read lines through prompt_toolkit instead of plain stdin")

    # Execution
    command_timeout: Optional[float] = Field(
        default=None, gt=0, description="Seconds before a running command is killed; unset waits forever"
    )
    report_errors: bool = Field(default=False, description="Print swallowed command errors to stderr")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: Literal["default", "rich"] = Field(default="default", description="Log output profile")


def get_settings() -> Settings:
    """Get application settings.

    Values come from ``PIPESH_*`` environment variables and an optional ``.env``
    file in the current directory.

    Returns:
        Settings instance
    """
    return Settings()
