"""
Decimal Codec — разбор и форматирование десятичной записи

Преобразования между десятичным текстом / нативным int и парой
(sign, limbs) в канонической форме.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный ввод → InvalidFormat, никакого усечения или частичного разбора
2. Ноль всегда (True, [0]): отрицательного нуля не существует
3. format(parse(s)) == s без лишних ведущих нулей
"""

import logging
import re
from typing import Final, Sequence

from src.core.math.limb_arithmetic import BASE, WIDTH, is_zero_magnitude

logger = logging.getLogger(__name__)

# Только ASCII 0-9
_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

NEGATIVE_SIGN: Final[str] = "-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Ввод конструктора не является десятичным целым.

    Причины:
    - пустая строка (или только знак)
    - символ, не являющийся ведущим '-' или десятичной цифрой
    - любой нецифровой символ в конструкторе с явным знаком
    """

    pass


# =============================================================================
# РАЗБОР
# =============================================================================


def digits_to_limbs(digits: str) -> list[int]:
    """
    Разбор строки из одних цифр в магнитуду.

    Ведущие нули пропускаются, остаток режется на группы по WIDTH цифр
    с младшего конца; каждая группа — один limb.

    Args:
        digits: Строка десятичных цифр без знака

    Returns:
        Магнитуда в канонической форме (младший limb первым)

    Raises:
        TypeError: Если digits не str
        InvalidFormat: Если строка пуста или содержит нецифровые символы

    Examples:
        >>> digits_to_limbs("00042")
        [42]
        >>> digits_to_limbs("123456789")
        [23456789, 1]
        >>> digits_to_limbs("000")
        [0]
    """
    if not isinstance(digits, str):
        raise TypeError(f"digits must be str, got {type(digits).__name__}")

    if not _DIGITS_PATTERN.fullmatch(digits):
        logger.debug("Rejected decimal digits: %r", digits)
        raise InvalidFormat(f"Expected decimal digits only, got {digits!r}")

    significant = digits.lstrip("0")
    if not significant:
        return [0]

    limbs: list[int] = []
    end = len(significant)
    while end > 0:
        start = max(0, end - WIDTH)
        limbs.append(int(significant[start:end]))
        end -= WIDTH

    return limbs


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки со знаком, заданным самой строкой.

    Допускается один ведущий '-'; '+' и пробелы не допускаются.

    Args:
        text: Десятичная запись, например "-00123"

    Returns:
        (sign, limbs): sign=True для неотрицательных, ноль всегда с True

    Raises:
        TypeError: Если text не str
        InvalidFormat: Если запись пустая или содержит посторонние символы

    Examples:
        >>> parse_decimal("-5")
        (False, [5])
        >>> parse_decimal("-000")
        (True, [0])
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    if not text:
        logger.debug("Rejected empty decimal input")
        raise InvalidFormat("Decimal input is empty")

    negative = text.startswith(NEGATIVE_SIGN)
    digits = text[1:] if negative else text

    try:
        limbs = digits_to_limbs(digits)
    except InvalidFormat as exc:
        raise InvalidFormat(f"Malformed decimal integer: {text!r}") from exc

    return normalize_sign(not negative, limbs), limbs


def int_to_limbs(value: int) -> tuple[bool, list[int]]:
    """
    Разложение нативного int в (sign, limbs).

    Python int не ограничен разрядностью, поэтому abs() никогда не
    переполняется: принимается любое значение, включая -2^63 и меньше.

    Args:
        value: Целое число (bool не принимается)

    Returns:
        (sign, limbs) в канонической форме

    Raises:
        TypeError: Если value не int или является bool

    Examples:
        >>> int_to_limbs(-123456789)
        (False, [23456789, 1])
        >>> int_to_limbs(0)
        (True, [0])
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")

    sign = value >= 0
    magnitude = abs(value)

    if magnitude == 0:
        return True, [0]

    limbs: list[int] = []
    while magnitude:
        limbs.append(magnitude % BASE)
        magnitude //= BASE

    return sign, limbs


def normalize_sign(sign: bool, limbs: Sequence[int]) -> bool:
    """Знак с учётом того, что ноль всегда неотрицателен."""
    return True if is_zero_magnitude(limbs) else sign


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def limbs_to_decimal(sign: bool, limbs: Sequence[int]) -> str:
    """
    Каноническая десятичная запись.

    Ноль → "0". Иначе '-' при sign=False, старший limb без дополнения,
    остальные limbs дополнены нулями ровно до WIDTH цифр.

    Args:
        sign: Знак (True = неотрицательное)
        limbs: Магнитуда в канонической форме

    Returns:
        Десятичная строка без ведущих нулей

    Examples:
        >>> limbs_to_decimal(False, [5, 1])
        '-100000005'
        >>> limbs_to_decimal(True, [0])
        '0'
    """
    if is_zero_magnitude(limbs):
        return "0"

    parts = [] if sign else [NEGATIVE_SIGN]
    parts.append(str(limbs[-1]))
    parts.extend(f"{limb:0{WIDTH}d}" for limb in reversed(limbs[:-1]))
    return "".join(parts)
