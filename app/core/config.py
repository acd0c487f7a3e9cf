from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "Backend API"
    DEBUG: bool = False
    LOG_LEVEL: str | None = None               # overrides DEBUG when set, e.g. "WARNING"
    LOG_ACCESS: bool = True                    # uvicorn per-request lines
    PORT: int = 5000

    # Mongo
    MONGO_URI: str = "mongodb://localhost:27017/ecommerce"
    MONGO_DB: str = "ecommerce"
    MONGO_TLS: bool = False                    # Atlas / managed clusters

    # Redis
    REDIS_URL: str = "redis://localhost:6379"

    # Product list cache
    product_list_cache_key: str = "products"
    product_list_cache_ttl: int = 300          # 5 minutes

    # Bootstrap
    SEED_ON_STARTUP: bool = False

    # API
    api_prefix: str = "/api"
    ALLOWED_ORIGINS: str = "*"                 # CSV

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

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
