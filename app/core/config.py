from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    RATES_FILE, RATE_OVERRIDES). RATE_OVERRIDES is parsed as JSON, e.g.
    '{"USD_TO_EUR": 0.95}'.
    """

    # Basic app metadata
    app_name: str = "Currency Converter API"
    debug: bool = False
    version: str = "0.1.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Default rate table, resolved against the process working directory
    rates_file: Path = Path("exchangeRates.json")

    # Configured rates; take precedence over the rate file
    rate_overrides: Dict[str, Decimal] = {}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def init_post_load(self) -> None:
        """Normalize override keys and reject negative rates."""
        normalized: Dict[str, Decimal] = {}
        for key, rate in self.rate_overrides.items():
            if rate < 0:
                raise ValueError(f"Rate override for '{key}' must not be negative")
            normalized[key.strip().upper()] = rate
        self.rate_overrides = normalized


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
