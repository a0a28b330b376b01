"""
Configuration handling for the demo microservice
Loads and validates environment variables
"""
import logging
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Service identity, reported by every endpoint
SERVICE_NAME = "demo-microservice"
SERVICE_VERSION = "1.0.0"
SERVICE_DESCRIPTION = "A simple Spring Boot microservice"

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application settings
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging settings
    LOG_DIR: str = "./logs"
    LOG_LEVEL: str = "INFO"

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value"""
        allowed = ["development", "staging", "production", "test"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {', '.join(allowed)}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level against the standard logging level names"""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def docs_enabled(self) -> bool:
        return self.ENVIRONMENT == "development"

# Create global settings instance
settings = Settings()
