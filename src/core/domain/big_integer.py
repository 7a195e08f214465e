"""
BigInteger — Знаковое целое произвольной точности

Immutable Pydantic модель: знак + магнитуда в limbs по основанию 10^8
(младший limb первым). Инварианты канонической формы проверяются
валидаторами при создании любого экземпляра, поэтому нарушающее их
значение не может быть получено ни через конструкторы, ни через арифметику.

Операции:
- BigInteger.from_int / BigInteger.parse / BigInteger.from_digits
- a + b, a * b (всегда новый экземпляр)
- str(a) — каноническая десятичная запись
"""

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator, model_validator

from src.core.math.decimal_codec import (
    digits_to_limbs,
    int_to_limbs,
    limbs_to_decimal,
    normalize_sign,
    parse_decimal,
)
from src.core.math.limb_arithmetic import (
    BASE,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
)


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): каждая операция создаёт новый экземпляр.
    BigInteger() без аргументов — ноль.
    """

    sign: StrictBool = Field(
        default=True, description="True для неотрицательных, False для отрицательных"
    )
    limbs: tuple[StrictInt, ...] = Field(
        default=(0,),
        min_length=1,
        description="Магнитуда по основанию 10^8, младший limb первым",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_limb_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждый limb в [0, BASE)."""
        for i, limb in enumerate(v):
            if not 0 <= limb < BASE:
                raise ValueError(f"limb[{i}]={limb} outside [0, {BASE})")
        return v

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "BigInteger":
        """
        Каноническая форма.

        - старший limb ненулевой, кроме значения ноль (ровно (0,))
        - ноль всегда с sign=True
        """
        if len(self.limbs) > 1 and self.limbs[-1] == 0:
            raise ValueError(f"leading zero limb in {self.limbs}")
        if not self.sign and is_zero_magnitude(self.limbs):
            raise ValueError("negative zero is not a canonical value")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Создание из нативного int.

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
        """
        sign, limbs = int_to_limbs(value)
        return cls(sign=sign, limbs=tuple(limbs))

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """
        Создание из десятичной строки с необязательным ведущим '-'.

        Ведущие нули допустимы и отбрасываются; "-0" даёт канонический ноль.

        Raises:
            InvalidFormat: Если строка пустая или содержит посторонние символы
        """
        sign, limbs = parse_decimal(text)
        return cls(sign=sign, limbs=tuple(limbs))

    @classmethod
    def from_digits(cls, sign: bool, digits: str) -> "BigInteger":
        """
        Создание из строки цифр и явно заданного знака.

        Args:
            sign: True для неотрицательного значения
            digits: Только десятичные цифры, без знака

        Raises:
            TypeError: Если sign не bool или digits не str
            InvalidFormat: Если digits пуста или содержит нецифровой символ
        """
        if not isinstance(sign, bool):
            raise TypeError(f"sign must be bool, got {type(sign).__name__}")

        limbs = digits_to_limbs(digits)
        return cls._from_parts(sign, limbs)

    @classmethod
    def _from_parts(cls, sign: bool, limbs: list[int]) -> "BigInteger":
        return cls(sign=normalize_sign(sign, limbs), limbs=tuple(limbs))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented

        if self.sign == other.sign:
            return BigInteger._from_parts(self.sign, add_magnitudes(self.limbs, other.limbs))

        # Разные знаки: из большей магнитуды вычитается меньшая
        order = compare_magnitudes(self.limbs, other.limbs)
        if order == 0:
            return BigInteger()
        if order < 0:
            return BigInteger._from_parts(
                other.sign, subtract_magnitudes(other.limbs, self.limbs)
            )
        return BigInteger._from_parts(self.sign, subtract_magnitudes(self.limbs, other.limbs))

    def __mul__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented

        return BigInteger._from_parts(
            self.sign == other.sign, multiply_magnitudes(self.limbs, other.limbs)
        )

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Проверка на ноль."""
        return is_zero_magnitude(self.limbs)

    def __str__(self) -> str:
        return limbs_to_decimal(self.sign, self.limbs)
