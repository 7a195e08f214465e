"""
Limb Arithmetic — ядро длинной арифметики

Модуль оперирует магнитудами (модулями чисел), записанными как
последовательности limbs по основанию BASE = 10^8, от младшего limb к старшему.
Знак здесь не рассматривается: знаковая логика живёт в BigInteger.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb результата лежит в [0, BASE)
2. Результат непустой и не содержит старших нулевых limbs (кроме [0])
3. Операнды никогда не модифицируются, результат — новый список
4. Произведение двух limbs < 10^16 помещается в знаковый 64-битный аккумулятор
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одном limb
WIDTH: Final[int] = 8

# Основание системы счисления limbs
BASE: Final[int] = 10**WIDTH

# Максимальное произведение пары limbs: (10^8 - 1)^2 < 2^63 - 1
LIMB_PRODUCT_MAX: Final[int] = (BASE - 1) * (BASE - 1)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_leading_zeros(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in-place), минимум один limb остаётся.

    Args:
        limbs: Список limbs, младший первым

    Returns:
        Тот же список без старших нулей

    Examples:
        >>> trim_leading_zeros([5, 0, 0])
        [5]
        >>> trim_leading_zeros([0, 0])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    """Проверка, что магнитуда в канонической форме равна нулю."""
    return len(limbs) == 1 and limbs[0] == 0


# =============================================================================
# СРАВНЕНИЕ МАГНИТУД
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух магнитуд в канонической форме.

    Сначала по длине (старшие нули запрещены инвариантом, поэтому более
    длинная последовательность больше), затем limb за limb от старшего.

    Args:
        a: Первая магнитуда
        b: Вторая магнитуда

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare_magnitudes([1], [0, 1])
        -1
        >>> compare_magnitudes([7, 3], [9, 2])
        1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ МАГНИТУД
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение магнитуд с распространением переноса.

    Отсутствующие limbs более короткого операнда считаются нулями.
    Цикл продолжается, пока остаются limbs или ненулевой перенос.

    Args:
        a: Первая магнитуда
        b: Вторая магнитуда

    Returns:
        Магнитуда суммы

    Examples:
        >>> add_magnitudes([99999999, 99999999], [1])
        [0, 0, 1]
    """
    result: list[int] = []
    carry = 0
    i = 0

    while i < len(a) or i < len(b) or carry:
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        total = x + y + carry
        result.append(total % BASE)
        carry = total // BASE
        i += 1

    return result


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Вычитание магнитуд с заёмом: larger - smaller.

    Предусловие: compare_magnitudes(larger, smaller) >= 0.
    Вызывающий код (сложение разных знаков) гарантирует его через сравнение.

    Args:
        larger: Уменьшаемое (не меньше вычитаемого)
        smaller: Вычитаемое

    Returns:
        Магнитуда разности без старших нулевых limbs

    Raises:
        ValueError: Если larger < smaller (заём остался после старшего limb)

    Examples:
        >>> subtract_magnitudes([0, 1], [1])
        [99999999]
    """
    if len(smaller) > len(larger):
        raise ValueError("subtract_magnitudes requires larger >= smaller")

    result: list[int] = []
    borrow = 0

    for i in range(len(larger)):
        y = smaller[i] if i < len(smaller) else 0
        diff = larger[i] - y - borrow
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    if borrow:
        raise ValueError("subtract_magnitudes requires larger >= smaller")

    return trim_leading_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ МАГНИТУД
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение магнитуд столбиком (schoolbook), O(len(a) * len(b)).

    Аккумулятор длины len(a) + len(b) заполнен нулями. Для каждой пары
    позиций (i, j) произведение a[i] * b[j] добавляется в позицию i + j,
    после чего перенос распространяется вверх, пока он не обнулится.
    Итоговый результат не превышает BASE^(len(a) + len(b)), поэтому перенос
    не выходит за пределы аккумулятора.

    Args:
        a: Первая магнитуда
        b: Вторая магнитуда

    Returns:
        Магнитуда произведения без старших нулевых limbs

    Examples:
        >>> multiply_magnitudes([23456789, 1], [87654321, 9])
        [12635269, 19326311, 12]
    """
    acc = [0] * (len(a) + len(b))

    for i, x in enumerate(a):
        for j, y in enumerate(b):
            k = i + j
            acc[k] += x * y
            carry = acc[k] // BASE
            acc[k] %= BASE
            while carry:
                k += 1
                acc[k] += carry
                carry = acc[k] // BASE
                acc[k] %= BASE

    return trim_leading_zeros(acc)
