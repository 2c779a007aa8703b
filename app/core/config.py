from functools import lru_cache
from typing import Literal, Optional
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ShopAI"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Mongo
    MONGO_URI: str
    MONGO_DB: str = "shopai"
    MONGO_TLS: bool = False              # Atlas needs True, local mongod does not

    # Redis (session carts)
    REDIS_URL: Optional[str] = None

    # Store
    STORE_TIMEZONE: str = "Asia/Kolkata"  # seasons are resolved on the store's calendar
    CATALOG_SEED_FILE: Optional[str] = None

    # Cart / listings
    cart_ttl: int = 30 * 24 * 3600        # 30 days
    recommend_limit: int = 6
    sale_limit: int = 6

    # CORS (CSV)
    ALLOWED_ORIGINS: str = "http://localhost:3001"

    # API
    api_prefix: str = "/api"

    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
