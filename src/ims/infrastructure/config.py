from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage: one JSON file acting as the local key/value store
    data_file: Path = Field(default=Path("data") / "local_storage.json")
    storage_key: str = "inventory_products"

    # Inventory
    low_stock_threshold: int = Field(default=10, ge=0)
    barcode_prefix: str = Field(default="7", pattern=r"^\d$")

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="IMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
