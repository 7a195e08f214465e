"""
Тесты для модуля Decimal Codec

Проверяет:
1. Разбор строк цифр в limbs (группы по WIDTH с младшего конца)
2. Разбор знака и канонический ноль
3. Разложение нативного int, включая значения за пределами int64
4. Форматирование с дополнением нулями
5. Отклонение некорректного ввода через InvalidFormat
"""

import logging
import random

import pytest

from src.core.math.decimal_codec import (
    InvalidFormat,
    digits_to_limbs,
    int_to_limbs,
    limbs_to_decimal,
    normalize_sign,
    parse_decimal,
)


# =============================================================================
# ТЕСТЫ digits_to_limbs
# =============================================================================


class TestDigitsToLimbs:
    """Тесты для digits_to_limbs"""

    def test_short_number(self) -> None:
        assert digits_to_limbs("42") == [42]

    def test_exact_width(self) -> None:
        assert digits_to_limbs("12345678") == [12345678]

    def test_grouping_from_least_significant_end(self) -> None:
        """Группы режутся с младшего конца"""
        assert digits_to_limbs("123456789") == [23456789, 1]
        assert digits_to_limbs("123456789012345678") == [12345678, 34567890, 12]

    def test_inner_zero_groups(self) -> None:
        assert digits_to_limbs("100000000") == [0, 1]
        assert digits_to_limbs("10000000000000005") == [5, 0, 1]

    def test_leading_zeros_skipped(self) -> None:
        """Ведущие нули не образуют лишних limbs"""
        assert digits_to_limbs("00042") == [42]
        assert digits_to_limbs("0000000000000000123") == [123]

    def test_all_zeros(self) -> None:
        """Строка из нулей → канонический ноль"""
        assert digits_to_limbs("0") == [0]
        assert digits_to_limbs("000000000000") == [0]

    def test_rejects_empty(self) -> None:
        with pytest.raises(InvalidFormat):
            digits_to_limbs("")

    def test_rejects_sign(self) -> None:
        """Знак недопустим в строке цифр"""
        with pytest.raises(InvalidFormat):
            digits_to_limbs("-5")

    def test_rejects_non_ascii_digits(self) -> None:
        """Не-ASCII цифры отклоняются"""
        with pytest.raises(InvalidFormat):
            digits_to_limbs("٣")  # ARABIC-INDIC DIGIT THREE

    def test_rejects_non_str(self) -> None:
        with pytest.raises(TypeError):
            digits_to_limbs(123)  # type: ignore[arg-type]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отклонённый ввод логируется на уровне DEBUG"""
        caplog.set_level(logging.DEBUG, logger="src.core.math.decimal_codec")
        with pytest.raises(InvalidFormat):
            digits_to_limbs("12a")
        assert "Rejected decimal digits" in caplog.text


# =============================================================================
# ТЕСТЫ parse_decimal
# =============================================================================


class TestParseDecimal:
    """Тесты для parse_decimal"""

    def test_positive(self) -> None:
        assert parse_decimal("5") == (True, [5])

    def test_negative(self) -> None:
        assert parse_decimal("-5") == (False, [5])
        assert parse_decimal("-123456789") == (False, [23456789, 1])

    def test_negative_zero_is_canonical_zero(self) -> None:
        """'-0' и '-000' дают ноль со знаком True"""
        assert parse_decimal("-0") == (True, [0])
        assert parse_decimal("-000") == (True, [0])

    def test_invalid_format_is_value_error(self) -> None:
        assert issubclass(InvalidFormat, ValueError)

    def test_malformed_input_rejected(self) -> None:
        """Любой посторонний символ → InvalidFormat"""
        malformed = ["", "-", "+5", " 5", "5 ", "--5", "5-", "12a3", "1_000", "1.0", "0x10", "-٣"]
        for text in malformed:
            with pytest.raises(InvalidFormat):
                parse_decimal(text)

    def test_rejects_non_str(self) -> None:
        with pytest.raises(TypeError):
            parse_decimal(None)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            parse_decimal(b"42")  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ int_to_limbs
# =============================================================================


class TestIntToLimbs:
    """Тесты для int_to_limbs"""

    def test_zero(self) -> None:
        assert int_to_limbs(0) == (True, [0])

    def test_small(self) -> None:
        assert int_to_limbs(7) == (True, [7])
        assert int_to_limbs(-1) == (False, [1])

    def test_limb_boundary(self) -> None:
        assert int_to_limbs(10**8) == (True, [0, 1])
        assert int_to_limbs(10**8 - 1) == (True, [99999999])

    def test_int64_minimum(self) -> None:
        """Минимальное значение int64 не переполняется при взятии модуля"""
        sign, limbs = int_to_limbs(-(2**63))
        assert sign is False
        assert limbs_to_decimal(sign, limbs) == "-9223372036854775808"

    def test_beyond_int64(self) -> None:
        value = -(10**40) - 7
        sign, limbs = int_to_limbs(value)
        assert limbs_to_decimal(sign, limbs) == str(value)

    def test_rejects_bool(self) -> None:
        """bool — подкласс int, но не принимается"""
        with pytest.raises(TypeError):
            int_to_limbs(True)

    def test_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            int_to_limbs(1.0)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            int_to_limbs("1")  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestLimbsToDecimal:
    """Тесты для limbs_to_decimal"""

    def test_zero(self) -> None:
        assert limbs_to_decimal(True, [0]) == "0"

    def test_zero_never_negative(self) -> None:
        """Ноль без минуса даже при sign=False"""
        assert limbs_to_decimal(False, [0]) == "0"

    def test_most_significant_limb_unpadded(self) -> None:
        assert limbs_to_decimal(True, [42]) == "42"
        assert limbs_to_decimal(True, [23456789, 1]) == "123456789"

    def test_inner_limbs_padded_to_width(self) -> None:
        """Младшие limbs дополняются нулями до 8 цифр"""
        assert limbs_to_decimal(True, [5, 0, 7]) == "70000000000000005"
        assert limbs_to_decimal(True, [0, 1]) == "100000000"

    def test_negative(self) -> None:
        assert limbs_to_decimal(False, [5, 1]) == "-100000005"

    def test_accepts_tuple(self) -> None:
        assert limbs_to_decimal(True, (1, 2)) == "200000001"

    def test_normalize_sign(self) -> None:
        assert normalize_sign(False, [0]) is True
        assert normalize_sign(False, [1]) is False
        assert normalize_sign(True, [1]) is True


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """format(parse(s)) == s без лишних ведущих нулей"""

    def test_random_decimal_strings(self) -> None:
        rng = random.Random(20261019)
        for _ in range(300):
            body = "".join(rng.choice("0123456789") for _ in range(rng.randint(1, 60)))
            text = "0" * rng.randint(0, 12) + body
            if rng.random() < 0.5:
                text = "-" + text

            sign, limbs = parse_decimal(text)
            assert limbs_to_decimal(sign, limbs) == str(int(text))

    def test_native_ints(self) -> None:
        rng = random.Random(7)
        for _ in range(300):
            value = rng.randint(-(10**50), 10**50)
            sign, limbs = int_to_limbs(value)
            assert limbs_to_decimal(sign, limbs) == str(value)
