"""
API configuration settings.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    """API configuration settings."""

    # API Settings
    api_title: str = "Books API Documentation"
    api_version: str = "1.0.0"
    api_description: str = "Create and read books from an in-memory catalog"

    # Server Settings
    host: str = "localhost"
    port: int = 3002
    debug: bool = False

    # Documentation Settings
    docs_path: str = "/documentation"
    openapi_path: str = "/openapi.json"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: str = ""

    model_config = {
        "env_file": ".env",
        "extra": "ignore"  # Ignore extra fields from .env
    }

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        """Ensure port is a valid TCP port."""
        if v < 1 or v > 65535:
            raise ValueError('port must be between 1 and 65535')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()


# Global config instance
config = APIConfig()
