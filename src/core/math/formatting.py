"""
Formatting — Текстовое представление значений произвольной точности

Формат вывода:
- Вещественное: 1 + ceil(P · log10 2) значащих цифр, округление half-even
  от точного двоичного значения
- Позиционная запись при десятичном порядке 0 <= e < digits, иначе
  научная: d.ddd…e<e>
- Комплексное: "(re im)"
- Матрица: две строки, элементы строки через пробел
- След: "trace = (re im)"

Пример (P = 100):
    10.554325208519245131314861609014
    9.3708473002148348677819571766909e-1
"""

from fractions import Fraction

from src.core.math.matrix2 import Matrix2
from src.core.math.precision import significant_digits


# =============================================================================
# ДЕСЯТИЧНЫЕ ЦИФРЫ
# =============================================================================


def decimal_digits(value, digits: int) -> tuple[bool, str, int]:
    """
    Ровно digits значащих цифр конечного ненулевого mpf.

    Вычисление ведётся в рациональных числах, поэтому округление
    корректно (half-even) независимо от величины порядка.

    Args:
        value: Конечный ненулевой mpf
        digits: Число значащих цифр (>= 1)

    Returns:
        (negative, digit_string, exponent), где
        |value| ≈ d.ddd × 10^exponent

    Raises:
        ValueError: если digits < 1 или value равно нулю / не конечно
    """
    if digits < 1:
        raise ValueError(f"digits must be >= 1, got {digits}")

    sign, man, exp, bc = value._mpf_
    if man == 0:
        raise ValueError("decimal_digits requires a finite non-zero value")

    exact = Fraction(man) * (Fraction(2) ** exp)

    # Оценка порядка по числу бит, затем точная подгонка
    exponent = int((exp + bc - 1) * 0.30102999566398120)
    while exact >= Fraction(10) ** (exponent + 1):
        exponent += 1
    while exact < Fraction(10) ** exponent:
        exponent -= 1

    scaled = exact * Fraction(10) ** (digits - 1 - exponent)
    mantissa = round(scaled)
    if mantissa == 10 ** digits:
        # Перенос при округлении 9.99… → 10.0…
        mantissa //= 10
        exponent += 1

    return bool(sign), str(mantissa), exponent


def format_real(value, digits: int) -> str:
    """
    Вещественное значение в фиксированном числе значащих цифр.

    Examples:
        0.9370847300…  → "9.3708473002148348677819571766909e-1"
        -10.5000…0202  → "-10.500000000000000000000000000202"
        0              → "0"
    """
    ctx = value.context
    if ctx.isnan(value):
        return "NaN"
    if ctx.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "0"

    negative, digit_string, exponent = decimal_digits(value, digits)
    prefix = "-" if negative else ""

    if 0 <= exponent < digits:
        integer_part = digit_string[: exponent + 1]
        fraction_part = digit_string[exponent + 1:]
        if fraction_part:
            return f"{prefix}{integer_part}.{fraction_part}"
        return f"{prefix}{integer_part}"

    head, tail = digit_string[0], digit_string[1:]
    body = f"{head}.{tail}" if tail else head
    return f"{prefix}{body}e{exponent}"


def format_complex(value, digits: int) -> str:
    """Комплексное значение как "(re im)"."""
    return f"({format_real(value.real, digits)} {format_real(value.imag, digits)})"


# =============================================================================
# МАТРИЦЫ И ОТЧЁТ
# =============================================================================


def format_matrix(matrix: Matrix2, digits: int) -> str:
    """Две строки, элементы строки через пробел."""
    return "\n".join(
        " ".join(format_complex(entry, digits) for entry in row)
        for row in matrix.rows()
    )


def format_trace(trace, digits: int) -> str:
    return f"trace = {format_complex(trace, digits)}"


def format_evaluation(matrix: Matrix2, trace, bits: int) -> str:
    """
    Полный текстовый вывод: матрица и строка следа.

    Args:
        matrix: Результирующая матрица
        trace: След матрицы
        bits: Точность запуска (определяет число цифр)
    """
    digits = significant_digits(bits)
    return f"{format_matrix(matrix, digits)}\n{format_trace(trace, digits)}"
