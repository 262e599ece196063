# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment (.env if present)
load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./restaurant.db"
    database_echo: bool = False

    # Ceiling for every single store call, in seconds
    store_timeout_seconds: float = 100.0

    default_page_size: int = 10
    default_page: int = 1

    secret_key: str = "restaurant-dev-secret-key"  # 🔐 Override in production
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "restaurant:auth"
    access_token_lifetime_seconds: int = 24 * 60 * 60
    refresh_token_lifetime_seconds: int = 7 * 24 * 60 * 60

    invoice_due_days: int = 1

    log_level: str = "INFO"


settings = Settings()
