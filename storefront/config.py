from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"
    store_name: str = "Vibe Store"

    # Product API
    api_base_url: str = "http://localhost:3000"
    products_path: str = "/api/products"
    # None leaves the request unbounded
    request_timeout_s: Optional[float] = None

    # Data source: "http" talks to the API, "file" reads a local JSON array
    product_source: Literal["http", "file"] = "http"
    products_file: str = "sample_data/products.json"

    # UI settings
    theme: Literal["decorated", "plain"] = "decorated"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
