"""Service configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgscene_env: str = "development"
    svgscene_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Largest SVG document accepted by the API, in bytes
    max_svg_bytes: int = 5_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
