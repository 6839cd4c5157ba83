from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    accepted_hands: list[str] = ["ROCK", "PAPER", "SCISSORS", "SPOCK", "LIZARD"]
    track_score: bool = True
    random_seed: int | None = None
    host: str = "0.0.0.0"
    port: int = 4567
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="RPSLS_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
