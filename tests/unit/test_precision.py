"""
Тесты для Precision Context

Проверяет:
1. Валидацию точности
2. Число значащих цифр для вывода
3. Независимость контекстов с разной точностью
4. Создание комплексных значений из int/float/str
"""

import pytest

from src.core.math.precision import (
    MIN_PRECISION_BITS,
    PrecisionContext,
    significant_digits,
    validate_precision,
)


class TestValidatePrecision:
    """Тесты validate_precision"""

    def test_positive_precision_accepted(self) -> None:
        """Положительная точность проходит без изменений"""
        assert validate_precision(1) == 1
        assert validate_precision(100) == 100

    def test_zero_and_negative_rejected(self) -> None:
        """Ноль и отрицательные значения отклоняются"""
        with pytest.raises(ValueError, match="precision must be >="):
            validate_precision(0)
        with pytest.raises(ValueError, match="precision must be >="):
            validate_precision(-8)

    def test_non_integer_rejected(self) -> None:
        """Не целые значения отклоняются"""
        with pytest.raises(ValueError, match="integer"):
            validate_precision(10.5)
        with pytest.raises(ValueError, match="integer"):
            validate_precision(True)

    def test_minimum_constant(self) -> None:
        assert MIN_PRECISION_BITS == 1


class TestSignificantDigits:
    """Тесты significant_digits"""

    def test_known_values(self) -> None:
        """1 + ceil(P·log10 2)"""
        assert significant_digits(100) == 32
        assert significant_digits(53) == 17
        assert significant_digits(24) == 9
        assert significant_digits(1) == 2

    def test_monotonic(self) -> None:
        """Больше бит → не меньше цифр"""
        previous = 0
        for bits in range(1, 400):
            digits = significant_digits(bits)
            assert digits >= previous
            previous = digits


class TestPrecisionContext:
    """Тесты PrecisionContext"""

    def test_context_sets_mpmath_precision(self) -> None:
        ctx = PrecisionContext(100)
        assert ctx.bits == 100
        assert ctx.mp.prec == 100
        assert ctx.digits == 32

    def test_invalid_precision_raises(self) -> None:
        with pytest.raises(ValueError):
            PrecisionContext(0)

    def test_contexts_are_independent(self) -> None:
        """Две точности не влияют друг на друга"""
        low = PrecisionContext(20)
        high = PrecisionContext(200)

        third_low = low.one / 3
        third_high = high.one / 3

        assert abs(third_low - third_high) > 1e-12
        assert abs(third_high * 3 - 1) < 1e-55
        assert low.mp.prec == 20

    def test_equality_by_bits(self) -> None:
        assert PrecisionContext(64) == PrecisionContext(64)
        assert PrecisionContext(64) != PrecisionContext(65)

    def test_complex_from_numbers_and_strings(self) -> None:
        ctx = PrecisionContext(100)
        assert ctx.complex(1, 2) == ctx.complex("1", "2")
        assert ctx.complex(0.5, -0.25).real == 0.5
        assert ctx.complex(0.5, -0.25).imag == -0.25

    def test_decimal_string_uses_full_precision(self) -> None:
        """Строка '0.1' точнее, чем float 0.1, при P = 200"""
        ctx = PrecisionContext(200)
        from_string = ctx.complex("0.1", 0)
        from_float = ctx.complex(0.1, 0)
        assert from_string != from_float
        assert abs(from_string * 10 - 1) < 1e-55

    def test_constants(self) -> None:
        ctx = PrecisionContext(64)
        assert ctx.zero == 0
        assert ctx.one == 1
        assert ctx.i * ctx.i == -1
