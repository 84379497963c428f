"""
Shared configuration management for the ACL service.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AclSettings(BaseSettings):
    """Runtime settings, read from ACL_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="ACL_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")
    service_name: str = Field(default="acl")


def get_settings() -> AclSettings:
    """Get settings for the ACL service."""
    return AclSettings()
