"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления BigInteger согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema для проверки
структуры; правила канонической формы, которые схема выразить не может
(старший limb ненулевой), проверяет сама Pydantic модель.

Схемы:
- big_integer.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.big_integer import BigInteger
from src.core.settings import get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем;
    каталог можно переопределить через BIGINT_SCHEMA_DIR.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        if schema_dir is None:
            configured = get_settings().SCHEMA_DIR
            schema_dir = Path(configured) if configured else Path(__file__).parent / "schema"

        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика, создаётся при первом использовании
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Глобальный загрузчик схем (настройки читаются при первом вызове)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (по умолчанию глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class BigIntegerValidator(ContractValidator):
    """Валидатор для big_integer контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("big_integer", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления BigInteger.

    Args:
        data: {"sign": bool, "limbs": [int, ...]}

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntegerValidator().validate(data)


def dump_big_integer(value: BigInteger) -> Dict[str, Any]:
    """JSON-совместимое представление BigInteger, соответствующее контракту."""
    return value.model_dump(mode="json")


def load_big_integer(data: Dict[str, Any]) -> BigInteger:
    """
    Создание BigInteger из JSON-представления.

    Сначала проверяется структура по контракту, затем каноническая форма
    моделью.

    Raises:
        ValidationError (jsonschema): Нарушение структуры контракта
        pydantic.ValidationError: Нарушение канонической формы (старший ноль)
    """
    validate_big_integer(data)
    return BigInteger.model_validate(data)
