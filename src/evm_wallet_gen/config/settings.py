"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from evm_wallet_gen.config.constants import DEFAULT_BOX_WIDTH, DEFAULT_WALLET_FILE


class OutputConfig(BaseModel):
    """Console box and wallet file configuration."""

    wallet_file: Path = Path(DEFAULT_WALLET_FILE)
    box_width: int = Field(default=DEFAULT_BOX_WIDTH, ge=20, le=400)
    colorize: bool = True


class LoggingConfig(BaseModel):
    """Diagnostic logging configuration."""

    level: str = "WARNING"
    log_file: Optional[str] = None


class Settings(BaseSettings):
    """Main application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WALLET_GEN_",
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
