"""
Настройки, загружаемые из переменных окружения.

Все переменные имеют префикс BIGINT_ (например, BIGINT_LOG_LEVEL).
Параметры представления (BASE, WIDTH) сюда не входят и не настраиваются.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

ENV_PREFIX: Final[str] = "BIGINT_"

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
)


class Settings(BaseModel):
    """Типизированная конфигурация времени выполнения."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT
    SCHEMA_DIR: Optional[str] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}")
        return level


def load_settings(*, load_env: bool = True) -> Settings:
    """
    Загрузка и валидация настроек из `.env` и окружения процесса.

    Raises:
        RuntimeError: Если значение переменной невалидно
    """
    if load_env:
        load_dotenv()

    values = {
        key[len(ENV_PREFIX):]: value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX) and value
    }

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Кэшированный доступ к настройкам."""
    return load_settings()
