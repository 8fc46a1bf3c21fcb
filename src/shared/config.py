"""
Base configuration for the resolver tooling.

Uses Pydantic Settings for environment-based configuration.
Each tool extends BaseToolSettings with its own prefix.
"""

from pydantic_settings import BaseSettings


class BaseToolSettings(BaseSettings):
    """Base settings shared by every command-line tool in the project."""

    tool_name: str = "base"

    # Logging
    log_level: str = "WARNING"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
