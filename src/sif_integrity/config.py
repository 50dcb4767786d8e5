# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Configuration for sif_integrity, loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SIF_INTEGRITY_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIF_INTEGRITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Streaming
    chunk_size: int = Field(default=64 * 1024, gt=0)

    # Logging (command line only)
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
