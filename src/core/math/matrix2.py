"""
Matrix2 — Комплексные матрицы 2×2

Алгебра матриц над mpc значениями одного PrecisionContext:
- Произведение (некоммутативное, порядок множителей значим)
- Определитель, след
- Обращение через присоединённую матрицу: inv(M) = (1/det M) · adj(M),
  для SL(2, C) также det · adj(M)
- Доминирующая собственная пара и проверка собственного вектора

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Матрица неизменяема: все операции возвращают новый экземпляр
2. det(M) == 0 при обращении → DegenerateMatrix (без подмены на 0/inf)
3. Каждая операция округляется в точности контекста значений

ФОРМУЛЫ:
    (M·N)ij = Mi0·N0j + Mi1·N1j
    det(M) = m00·m11 − m01·m10
    adj(M) = [[m11, −m01], [−m10, m00]]
    λ± = (tr ± sqrt(tr² − 4·det)) / 2
"""

from dataclasses import dataclass
from typing import Final, Iterable

from src.core.errors import DegenerateMatrix
from src.core.math.numerical_safeguards import is_close_complex
from src.core.math.precision import PrecisionContext

# Толерантность проверки собственного вектора (абсолютная)
EIGENVECTOR_TOLERANCE: Final[float] = 1e-6


# =============================================================================
# MATRIX2
# =============================================================================


@dataclass(frozen=True)
class Matrix2:
    """
    Матрица 2×2, хранение row-major: (0,0) (0,1) / (1,0) (1,1).
    """

    m00: object
    m01: object
    m10: object
    m11: object

    @classmethod
    def identity(cls, ctx: PrecisionContext) -> "Matrix2":
        one = ctx.one
        zero = ctx.zero
        return cls(one, zero, zero, one)

    def entries(self) -> tuple:
        """Элементы в порядке row-major."""
        return (self.m00, self.m01, self.m10, self.m11)

    def rows(self) -> tuple:
        return ((self.m00, self.m01), (self.m10, self.m11))

    def multiply(self, other: "Matrix2") -> "Matrix2":
        """
        Произведение self · other.

        8 комплексных умножений и 4 сложения. self стоит слева.
        """
        return Matrix2(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
        )

    def scale(self, k) -> "Matrix2":
        """Умножение всех элементов на скаляр k."""
        return Matrix2(k * self.m00, k * self.m01, k * self.m10, k * self.m11)

    def determinant(self):
        return self.m00 * self.m11 - self.m01 * self.m10

    def trace(self):
        return self.m00 + self.m11

    def adjugate(self) -> "Matrix2":
        return Matrix2(self.m11, -self.m01, -self.m10, self.m00)

    def _invertible_determinant(self):
        det = self.determinant()
        if det == 0:
            raise DegenerateMatrix(
                "Matrix is not invertible: determinant is exactly zero"
            )
        return det

    def inverse(self) -> "Matrix2":
        """
        Обратная матрица (1/det) · adj.

        Returns:
            Новая Matrix2, M · inverse(M) ≈ I с точностью округления

        Raises:
            DegenerateMatrix: если det(M) ровно 0
        """
        return self.adjugate().scale(1 / self._invertible_determinant())

    def unimodular_inverse(self) -> "Matrix2":
        """
        Обратная для матрицы из SL(2, C): det · adj.

        При det = 1 совпадает с inverse() математически; умножение на
        вычисленный det вместо деления округляется иначе в последних разрядах.

        Raises:
            DegenerateMatrix: если det(M) ровно 0
        """
        return self.adjugate().scale(self._invertible_determinant())

    def apply(self, vector: tuple) -> tuple:
        """Действие на столбец (x, y)."""
        x, y = vector
        return (self.m00 * x + self.m01 * y, self.m10 * x + self.m11 * y)

    # -------------------------------------------------------------------------
    # Спектральные величины
    # -------------------------------------------------------------------------

    def dominant_eigenpair(self, ctx: PrecisionContext) -> tuple:
        """
        Собственное значение наибольшего модуля и собственный вектор.

        λ− = (tr − s)/2, λ+ = (tr + s)/2, s = sqrt(tr² − 4·det).
        При |λ−| ≥ |λ+| выбирается λ− (в т.ч. при равенстве модулей).

        Вектор:
            λ− → (λ − m11, m10)
            λ+ → (m01, λ − m00)

        Для параболических матриц (tr² = 4·det) вектор может оказаться
        нулевым; is_eigenvector это отловит.

        Returns:
            (λ, (vx, vy))
        """
        tr = self.trace()
        s = ctx.sqrt(tr * tr - 4 * self.determinant())
        lambda_minus = (tr - s) / 2
        lambda_plus = (tr + s) / 2

        if abs(lambda_minus) >= abs(lambda_plus):
            return lambda_minus, (lambda_minus - self.m11, self.m10)
        return lambda_plus, (self.m01, lambda_plus - self.m00)

    def is_eigenvector(self, vector: tuple, tolerance: float = EIGENVECTOR_TOLERANCE) -> bool:
        """
        Проверка, что vector — собственный вектор с точностью tolerance.

        Алгоритм:
            u = M·v, k = u_x / v_x, |k·v_y − u_y| <= tolerance
        При v_x == 0 роли компонент меняются. Нулевой вектор —
        не собственный.
        """
        x, y = vector
        ux, uy = self.apply(vector)

        if x != 0:
            return is_close_complex(ux / x * y, uy, abs_tol=tolerance)
        if y != 0:
            return is_close_complex(uy / y * x, ux, abs_tol=tolerance)
        return False


# =============================================================================
# СВЁРТКИ
# =============================================================================


def matrix_product(matrices: Iterable[Matrix2], ctx: PrecisionContext) -> Matrix2:
    """
    Левая свёртка произведением: ((I·M1)·M2)·…·Mn.

    Пустая последовательность → единичная матрица.
    """
    result = Matrix2.identity(ctx)
    for m in matrices:
        result = result.multiply(m)
    return result
