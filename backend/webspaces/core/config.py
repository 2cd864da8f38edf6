import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore',
    )

    WEBSPACE_CONFIG_PATH: str = 'config/webspaces'
    AVAILABLE_TEMPLATES: str = 'default,homepage'
    WEBSPACE_ENVIRONMENT: str = 'prod'
    LOG_LEVEL: str = 'INFO'

    @field_validator('WEBSPACE_ENVIRONMENT')
    @classmethod
    def validate_environment(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('WEBSPACE_ENVIRONMENT must not be empty')
        return value

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown LOG_LEVEL {value!r}')
        return level

    @property
    def available_templates(self) -> list[str]:
        return [item.strip() for item in self.AVAILABLE_TEMPLATES.split(',') if item.strip()]

    @property
    def config_path(self) -> Path:
        return Path(self.WEBSPACE_CONFIG_PATH)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
