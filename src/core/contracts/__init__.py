"""
Contract Validation Module

Модуль для валидации JSON-представления BigInteger.
"""

from .validators import (
    BigIntegerValidator,
    ContractValidator,
    SchemaLoader,
    dump_big_integer,
    get_schema_loader,
    load_big_integer,
    validate_big_integer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    # Functions
    "get_schema_loader",
    "validate_big_integer",
    "dump_big_integer",
    "load_big_integer",
]
