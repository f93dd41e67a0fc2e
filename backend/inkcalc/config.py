"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    inkcalc_env: str = "development"
    inkcalc_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Vision model
    model_vision: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 2048

    # Decoded payloads at or below this size are treated as a blank canvas
    min_image_bytes: int = 1000

    # Canvas client
    relay_url: str = "http://localhost:8000"
    canvas_width: int = 800
    canvas_height: int = 600
    jpeg_quality: int = 95

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
