"""
Precision Context — Контекст двоичной точности вычислений

Единая точность P (бит мантиссы) фиксируется один раз на запуск и явно
передаётся во все операции. Вместо глобального mpmath.mp каждый контекст
владеет собственным mpmath.MPContext, поэтому два контекста с разной
точностью не влияют друг на друга.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точность неизменяема после создания контекста
2. Все комплексные значения запуска создаются через один контекст
3. Округление — round-to-nearest (режим mpmath по умолчанию)
"""

import math
from dataclasses import dataclass, field
from typing import Final, Union

from mpmath.ctx_mp import MPContext

# =============================================================================
# КОНСТАНТЫ ТОЧНОСТИ
# =============================================================================

# Минимальная допустимая точность (бит)
MIN_PRECISION_BITS: Final[int] = 1

# log10(2) для перевода бит в десятичные цифры
LOG10_2: Final[float] = math.log10(2)

# Тип входного значения для вещественной/мнимой части:
# int/float конвертируются точно, str парсится в полной точности контекста
RealInput = Union[int, float, str]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_precision(bits: int) -> int:
    """
    Проверка точности в битах.

    Args:
        bits: Число бит мантиссы

    Returns:
        bits если значение допустимо

    Raises:
        ValueError: если bits не целое или bits < MIN_PRECISION_BITS
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise ValueError(f"precision must be an integer number of bits, got {bits!r}")
    if bits < MIN_PRECISION_BITS:
        raise ValueError(f"precision must be >= {MIN_PRECISION_BITS} bits, got {bits}")
    return bits


def significant_digits(bits: int) -> int:
    """
    Число значащих десятичных цифр для вывода при точности bits.

    Формула 1 + ceil(P · log10 2) гарантирует, что десятичная запись
    однозначно восстанавливает двоичное значение (для P = 100 → 32 цифры).

    Examples:
        >>> significant_digits(100)
        32
        >>> significant_digits(53)
        17
    """
    validate_precision(bits)
    return 1 + math.ceil(bits * LOG10_2)


# =============================================================================
# PRECISION CONTEXT
# =============================================================================


@dataclass(frozen=True)
class PrecisionContext:
    """
    Контекст точности запуска.

    Immutable (frozen=True). Приватный MPContext создаётся в __post_init__
    и не участвует в сравнении: два контекста равны, если равна точность.
    """

    bits: int
    _mp: MPContext = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_precision(self.bits)
        ctx = MPContext()
        ctx.prec = self.bits
        object.__setattr__(self, "_mp", ctx)

    @property
    def mp(self) -> MPContext:
        """mpmath контекст, в котором живут все значения запуска."""
        return self._mp

    @property
    def digits(self) -> int:
        """Значащие десятичные цифры для форматирования."""
        return significant_digits(self.bits)

    def complex(self, re: RealInput = 0, im: RealInput = 0):
        """
        Комплексное значение в точности контекста.

        Args:
            re: Вещественная часть (int, float или десятичная строка)
            im: Мнимая часть

        Returns:
            mpc, округлённый до self.bits бит

        Raises:
            ValueError: если строку нельзя разобрать как число
        """
        return self._mp.mpc(re, im)

    @property
    def zero(self):
        return self._mp.mpc(0, 0)

    @property
    def one(self):
        return self._mp.mpc(1, 0)

    @property
    def i(self):
        return self._mp.mpc(0, 1)

    def sqrt(self, value):
        """Главная ветвь квадратного корня."""
        return self._mp.sqrt(value)
