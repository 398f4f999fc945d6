"""
Configuration module - centralized settings for the transform pipeline.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import Dict, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Pipeline settings loaded from environment variables.

    Every variable is prefixed with ``DESIGN_CODEGEN_``. Complex values are
    JSON encoded:
        export DESIGN_CODEGEN_DISABLED_TRANSFORMS='["post-fixes"]'
        export DESIGN_CODEGEN_PRIORITY_OVERRIDES='{"tailwind-optimizer": 50}'
    """

    model_config = SettingsConfigDict(
        env_prefix="DESIGN_CODEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # LOGGING
    # ---------------------------------------------------------------------------
    # LOG_LEVEL: level for the design_codegen logger tree
    LOG_LEVEL: str = "INFO"

    # LOG_TIMING: append per-transform duration to pipeline summary lines
    LOG_TIMING: bool = True

    # ---------------------------------------------------------------------------
    # PIPELINE
    # ---------------------------------------------------------------------------
    # DISABLED_TRANSFORMS: transform names registered but skipped at run time
    DISABLED_TRANSFORMS: List[str] = []

    # PRIORITY_OVERRIDES: transform name -> priority, replacing the built-in value
    PRIORITY_OVERRIDES: Dict[str, int] = {}

    # ---------------------------------------------------------------------------
    # FONT DETECTION
    # ---------------------------------------------------------------------------
    # FONT_FALLBACK: generic family appended to converted fontFamily values
    FONT_FALLBACK: str = "sans-serif"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


settings = Settings()


def get_settings() -> Settings:
    """Module-level settings instance."""
    return settings
