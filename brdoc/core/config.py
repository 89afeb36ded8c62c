# brdoc/core/config.py
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # --- Logging ---
    log_level: LogLevel = Field("INFO", description="Nível do logger 'brdoc' (DEBUG, INFO, WARNING...)")
    log_format: str = Field(DEFAULT_LOG_FORMAT, description="Formato das mensagens de log")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Aceita o nível em minúsculas ou com espaços ("debug", " info ")"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    class Config:
        env_prefix = "BRDOC_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
