"""
Numerical Safeguards — Сравнения значений произвольной точности

Модуль задаёт единые правила сравнения комплексных значений и матриц,
вычисленных с округлением:
- Толерантности, выведенные из точности контекста (а не из машинного epsilon)
- Сравнение комплексных значений (относительная + абсолютная толерантность)
- Расстояние между матрицами (максимум модулей разностей элементов)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное равенство mpc никогда не используется для результатов свёрток
2. Толерантность растёт вместе с точностью: 2^(guard − P)
3. Все операции детерминированы и воспроизводимы

АЛГОРИТМ СРАВНЕНИЯ:
    |x − y| <= max(rel_tol · max(|x|, |y|), abs_tol)
"""

from typing import Final

from src.core.math.precision import PrecisionContext

# =============================================================================
# ПАРАМЕТРЫ ТОЛЕРАНТНОСТИ
# =============================================================================

# Запас бит на накопленную ошибку округления в длинных произведениях
GUARD_BITS_DEFAULT: Final[int] = 16

# Абсолютная толерантность по умолчанию для сравнения с нулём
ABS_TOL_DEFAULT: Final[float] = 0.0


# =============================================================================
# ТОЛЕРАНТНОСТИ ОТ ТОЧНОСТИ
# =============================================================================


def precision_tolerance(ctx: PrecisionContext, guard_bits: int = GUARD_BITS_DEFAULT):
    """
    Относительная толерантность 2^(guard_bits − P) в виде mpf.

    Возвращается mpf, а не float: при P > 1074 float ушёл бы в ноль.

    Args:
        ctx: Контекст точности
        guard_bits: Запас бит на накопленное округление

    Returns:
        mpf толерантность (не больше 1)

    Raises:
        ValueError: если guard_bits < 0
    """
    if guard_bits < 0:
        raise ValueError(f"guard_bits must be non-negative, got {guard_bits}")
    exponent = min(0, guard_bits - ctx.bits)
    return ctx.mp.ldexp(ctx.mp.mpf(1), exponent)


# =============================================================================
# КОМПЛЕКСНЫЕ СРАВНЕНИЯ
# =============================================================================


def complex_distance(x, y):
    """|x − y| (mpf)."""
    return abs(x - y)


def is_close_complex(x, y, rel_tol=0.0, abs_tol=ABS_TOL_DEFAULT) -> bool:
    """
    Сравнение комплексных значений с учётом толерантности.

    Аналог math.isclose для mpc.

    Args:
        x: Первое значение
        y: Второе значение
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если |x − y| <= max(rel_tol · max(|x|, |y|), abs_tol)

    Raises:
        ValueError: если толерантность отрицательна
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel={rel_tol}, abs={abs_tol}")
    scale = max(abs(x), abs(y))
    return complex_distance(x, y) <= max(rel_tol * scale, abs_tol)


# =============================================================================
# МАТРИЧНЫЕ СРАВНЕНИЯ
# =============================================================================


def matrix_distance(m, n):
    """
    max |m_ij − n_ij| по всем четырём элементам.

    Args:
        m: Matrix2
        n: Matrix2

    Returns:
        mpf расстояние
    """
    return max(complex_distance(x, y) for x, y in zip(m.entries(), n.entries()))


def matrix_scale(m):
    """max |m_ij| — масштаб для относительной толерантности."""
    return max(abs(x) for x in m.entries())


def matrices_close(m, n, rel_tol=0.0, abs_tol=ABS_TOL_DEFAULT) -> bool:
    """
    Сравнение матриц: matrix_distance <= max(rel_tol · масштаб, abs_tol).

    Масштаб — наибольший модуль элемента из обеих матриц.
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel={rel_tol}, abs={abs_tol}")
    scale = max(matrix_scale(m), matrix_scale(n))
    return matrix_distance(m, n) <= max(rel_tol * scale, abs_tol)
