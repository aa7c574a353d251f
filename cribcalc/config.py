from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = "Cribbage Calculator"
    evaluation_workers: int = 1
    average_decimals: int = 2
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CRIBCALC_", env_file=".env", env_file_encoding="utf-8")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


settings = Settings()
