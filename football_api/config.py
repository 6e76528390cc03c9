"""Application configuration."""
from typing import List, Optional
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = Field(default="development")

    # Database
    DATABASE_URL: Optional[str] = Field(default=None)
    DB_PATH: str = Field(default="./sports.db")  # used when DATABASE_URL is not set
    DATABASE_ECHO: bool = Field(default=False)
    DATABASE_POOL_SIZE: int = Field(default=10)
    DATABASE_MAX_OVERFLOW: int = Field(default=20)

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)
    RELOAD: bool = Field(default=False)  # uvicorn auto-reload, for local development only

    # Application
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(default=["*"])

    # Re-check stat invariants (completions <= attempts, ...) against the merged
    # record on update. False only checks pairs supplied in the same patch.
    STATS_REVALIDATE_MERGED: bool = Field(default=True)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def _default_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = f"sqlite:///{self.DB_PATH}"
        return self


@lru_cache()
def get_settings() -> Settings:
    return Settings()
