# bizcards/core/config.py

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- JWT Config ---
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    # tokens never expire unless this is set
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None

    # --- Database Config ---
    STORAGE_BACKEND: Literal["postgres", "memory"] = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "bizcards"
    DB_USER: str = "postgres"
    DB_PASS: str = ""
    DB_POOL_MIN: int = 5
    DB_POOL_MAX: int = 20

    # --- Runtime ---
    ENV: Literal["development", "production"] = "production"
    SEED_ON_STARTUP: bool = False
    ALLOW_ADMIN_SIGNUP: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://"
            f"{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def asyncpg_url(self) -> str:
        return (
            f"postgresql://"
            f"{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_development(self) -> bool:
        return self.ENV == "development"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
