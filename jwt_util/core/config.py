"""
Configuration management for jwt-util.

Uses pydantic-settings to load configuration from environment variables
with defaults that match the behaviour of a plain ``Authorization: Bearer``
setup signed with HS256.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jwt_util.core.security import HMAC_ALGORITHMS


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Token location
    JWT_HEADER_NAME: str = ""  # Custom header checked before Authorization (empty = none)

    # Token construction
    JWT_DEFAULT_ALGORITHM: str = "HS256"  # Used when no (or an unknown) algorithm is given
    JWT_STRICT_ALGORITHM: bool = False  # Raise instead of falling back on unknown names

    # Signature verification
    JWT_LEEWAY_SECONDS: int = 0  # Clock skew tolerated on exp/nbf (seconds)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # JSON output via python-json-logger, plain text otherwise

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator("JWT_DEFAULT_ALGORITHM")
    @classmethod
    def validate_default_algorithm(cls, v: str) -> str:
        """Only HMAC algorithms can sign with a shared secret."""
        algorithm = v.strip().upper()
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(
                f"JWT_DEFAULT_ALGORITHM must be one of {', '.join(HMAC_ALGORITHMS)}"
            )
        return algorithm

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


# Global settings instance
settings = Settings()
