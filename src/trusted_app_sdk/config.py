"""Configuration management for the Trusted Application SDK"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SDK settings with environment variable support"""

    # Platform entry point
    discover_url: str = "https://api.skype4business.com/platformservice/discover"
    application_endpoint_id: str | None = None

    # Transport
    request_timeout: float = 30.0
    user_agent: str = "Trusted-Application-SDK/0.1.0"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TRUSTED_APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def has_endpoint_id(self) -> bool:
        """Check if an application endpoint identity is configured"""
        return bool(self.application_endpoint_id)


# Global settings instance
settings = Settings()


def get_config() -> Settings:
    """Get the global configuration instance."""
    return settings
