# studium/adapters/configuration/config.py

import json
from typing import Annotated, Optional, List, Union
from logging import getLevelName
from pydantic import Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    APP_VERSION: str = "1.0.0"

    # Database
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = 5432
    SQLITE_PATH: str = "./studium.db"
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = True

    DEBUG: bool = False

    # Auth
    SECRET_KEY: str = "troque-esta-chave-em-producao"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    BCRYPT_ROUNDS: int = 12
    PASSWORD_MIN_LENGTH: int = 6

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        if data.get("POSTGRES_HOST") and data.get("POSTGRES_USER"):
            password = data.get("POSTGRES_PASSWORD") or ""
            return (
                f"postgresql+{data.get('DB_DRIVER', 'asyncpg')}://"
                f"{data['POSTGRES_USER']}:{password}@{data['POSTGRES_HOST']}:"
                f"{data.get('POSTGRES_PORT', 5432)}/{data.get('POSTGRES_DB') or 'studium'}"
            )
        return f"sqlite+aiosqlite:///{data.get('SQLITE_PATH', './studium.db')}"

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Se vier como string CSV (ex: 'a,b,c'), transforma em lista.
        Se vier já como lista ou JSON, retorna como está.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, str):
            return json.loads(v)
        if isinstance(v, list):
            return v
        raise ValueError(f"CORS_ORIGINS inválido: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"LOG_LEVEL inválido: {v!r}")
        return lvl

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
