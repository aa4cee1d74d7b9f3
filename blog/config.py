"""
Application settings, read from the environment and an optional ``.env`` file.

Every field can be overridden by an environment variable of the same name
(case-insensitive), e.g. ``DATABASE_URL`` or ``ACCESS_TOKEN_EXPIRE_MINUTES``.
"""

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Multilingual Blog API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    api_prefix: str = "/api"

    # SQLite for local runs; use postgresql+asyncpg://... in deployments
    database_url: str = "sqlite+aiosqlite:///./blog.db"

    # JWT signing
    secret_key: str = "change-me"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    allowed_origins: list[str] = ["http://localhost:3000"]

    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
