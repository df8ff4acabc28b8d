"""Centralized application configuration.

Settings are read from environment variables prefixed with HYPERATTACK_
(or a .env.hyperattack file). They only supply defaults to the HTTP API and
the CLI; the formula functions always take their configuration as arguments.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hyperattack.constants import (
    DEFAULT_DIMENSIONS,
    DEFAULT_SIDE_LENGTH,
    DiagonalMode,
    KnightMode,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HYPERATTACK_",
        env_file=".env.hyperattack", env_file_encoding="utf-8",
    )

    # Board
    side_length: int = Field(default=DEFAULT_SIDE_LENGTH, ge=1)
    diagonal_mode: DiagonalMode = DiagonalMode.HYPER
    knight_mode: KnightMode = KnightMode.ALTERNATIVE

    # Table columns (JSON list in the environment, e.g. "[2, 3, 4]")
    dimensions: list[int] = Field(default_factory=lambda: list(DEFAULT_DIMENSIONS))

    log_level: str = "INFO"
