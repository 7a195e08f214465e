"""
Тесты для настроек и логирования

Проверяет:
1. Значения по умолчанию и переменные окружения с префиксом BIGINT_
2. Ошибку конфигурации при невалидном значении
3. Идемпотентную настройку логирования
"""

import logging

import pytest
from pydantic import ValidationError

import src.core.logging as logging_config
from src.core.settings import DEFAULT_LOG_FORMAT, Settings, load_settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Окружение без переменных BIGINT_"""
    for key in ("BIGINT_LOG_LEVEL", "BIGINT_LOG_FORMAT", "BIGINT_SCHEMA_DIR"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Сохранение и восстановление состояния root-логгера"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestSettings:
    """Тесты для load_settings"""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = load_settings(load_env=False)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == DEFAULT_LOG_FORMAT
        assert settings.SCHEMA_DIR is None

    def test_prefixed_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BIGINT_LOG_LEVEL", "debug")
        clean_env.setenv("BIGINT_SCHEMA_DIR", "/tmp/schemas")
        clean_env.setenv("LOG_LEVEL", "ERROR")  # без префикса игнорируется

        settings = load_settings(load_env=False)
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.SCHEMA_DIR == "/tmp/schemas"

    def test_invalid_level(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BIGINT_LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError, match="Invalid environment configuration"):
            load_settings(load_env=False)

    def test_settings_immutable(self) -> None:
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.LOG_LEVEL = "DEBUG"  # type: ignore[misc]


class TestConfigureLogging:
    """Тесты для configure_logging"""

    def test_applies_level(
        self, monkeypatch: pytest.MonkeyPatch, restore_root_logger: logging.Logger
    ) -> None:
        monkeypatch.setattr(logging_config, "_LOGGING_CONFIGURED", False)
        logging_config.configure_logging(Settings(LOG_LEVEL="DEBUG"), force=True)
        assert restore_root_logger.level == logging.DEBUG

    def test_idempotent(
        self, monkeypatch: pytest.MonkeyPatch, restore_root_logger: logging.Logger
    ) -> None:
        monkeypatch.setattr(logging_config, "_LOGGING_CONFIGURED", False)
        logging_config.configure_logging(Settings(LOG_LEVEL="WARNING"), force=True)
        logging_config.configure_logging(Settings(LOG_LEVEL="DEBUG"))
        assert restore_root_logger.level == logging.WARNING
