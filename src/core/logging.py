"""
Настройка логирования процесса.

Модули библиотеки только создают логгеры через logging.getLogger(__name__);
обработчики настраивает приложение вызовом configure_logging().
"""

from __future__ import annotations

import logging
from typing import Optional

from src.core.settings import Settings, get_settings

_LOGGING_CONFIGURED = False


def configure_logging(settings: Optional[Settings] = None, *, force: bool = False) -> None:
    """
    Настройка root-логгера по Settings (идемпотентно).

    Args:
        settings: Настройки (по умолчанию get_settings())
        force: Перенастроить, даже если логирование уже настроено
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=force)
    _LOGGING_CONFIGURED = True
