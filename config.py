"""Application configuration.

Configuration is loaded from environment variables with the `BSTVIZ_` prefix,
e.g. `BSTVIZ_PORT=8000 BSTVIZ_LOG_LEVEL=DEBUG python main.py`.
Visual constants (spacing, colours) live beside the code that uses them in
`layout.LayoutConfig` and `ui.canvas.CanvasConfig`.
"""

from __future__ import annotations

import secrets
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Visualizer settings.  Every field is environment-configurable."""

    model_config = SettingsConfigDict(
        env_prefix="BSTVIZ_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    secret_key: str = Field(default_factory=lambda: secrets.token_hex(32))
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)
    debug: bool = Field(default=True)

    # Playback
    default_speed: Literal["slow", "medium", "fast", "turbo"] = Field(default="medium")

    # Accepted node values
    min_value: int = Field(default=-999)
    max_value: int = Field(default=999)
    # the tree lives in the cookie session; this keeps it under the 4 KB limit
    max_nodes: int = Field(default=200, ge=1)

    # Random tree builder
    random_min_nodes: int = Field(default=5, ge=1)
    random_max_nodes: int = Field(default=9, ge=1)
    random_max_value: int = Field(default=100, ge=1)

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        if self.min_value > self.max_value:
            raise ValueError("min_value must not exceed max_value")
        if self.random_min_nodes > self.random_max_nodes:
            raise ValueError("random_min_nodes must not exceed random_max_nodes")
        if self.random_max_nodes > self.random_max_value:
            raise ValueError("random_max_value must allow random_max_nodes distinct values")
        if self.random_max_nodes > self.max_nodes:
            raise ValueError("random_max_nodes must not exceed max_nodes")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""

    return Settings()
