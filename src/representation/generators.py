"""
Generator Representation — Образы генераторов в SL(2, C)

Представление ρ: F(a, b) → GL(2, C) задаётся образами двух базовых
генераторов, зависящими от комплексного параметра z и точности P.
Образы обратных букв вычисляются один раз:
    ρ(A) = ρ(a)^-1,  ρ(B) = ρ(b)^-1
Способ обращения задаёт семейство (inverse_image). Для SL(2, C) это
det · adj.

Семейство представлений — подключаемая стратегия (Representation).
Вычислитель слов и дерево Штерна–Броко от конкретного семейства не зависят.

СЕМЕЙСТВО sqrt-pair (по умолчанию):
    c = 1 / sqrt(z² − 1)
    ρ(a) = [[c·z, c], [c, c·z]]
    y = −z / sqrt(z² − 1),  d = 1 / sqrt(y² − 1)
    ρ(b) = [[d·y, d·i], [−d·i, d·y]]
    det ρ(a) = det ρ(b) = 1
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Final

from src.core.domain.word import Letter
from src.core.errors import DegenerateMatrix
from src.core.math.matrix2 import Matrix2
from src.core.math.precision import PrecisionContext

logger = logging.getLogger(__name__)


# =============================================================================
# ОБРАЗЫ ГЕНЕРАТОРОВ
# =============================================================================


@dataclass(frozen=True)
class GeneratorImages:
    """
    Четыре фиксированные матрицы запуска: a, b, A, B (и их контекст точности).

    Каждая буква слова переиспользует одну из них.
    """

    ctx: PrecisionContext
    a: Matrix2
    b: Matrix2
    a_inv: Matrix2
    b_inv: Matrix2

    @classmethod
    def from_generators(
        cls,
        ctx: PrecisionContext,
        a: Matrix2,
        b: Matrix2,
        invert: Callable[[Matrix2], Matrix2] = Matrix2.inverse,
    ) -> "GeneratorImages":
        """
        Построение с мемоизацией обратных.

        Args:
            invert: Обращение образа генератора (по умолчанию adj / det)

        Raises:
            DegenerateMatrix: если образ генератора необратим
        """
        return cls(ctx=ctx, a=a, b=b, a_inv=invert(a), b_inv=invert(b))

    def image(self, letter: Letter | str) -> Matrix2:
        """Матрица буквы."""
        letter = Letter(letter)
        if letter is Letter.a:
            return self.a
        if letter is Letter.b:
            return self.b
        if letter is Letter.A:
            return self.a_inv
        return self.b_inv


# =============================================================================
# СТРАТЕГИИ
# =============================================================================


class Representation(ABC):
    """
    Семейство представлений: (контекст, z) → (ρ(a), ρ(b)).

    Любая реализация, возвращающая две обратимые матрицы, непрерывно
    зависящие от z, допустима.
    """

    name: str = ""

    @abstractmethod
    def generators(self, ctx: PrecisionContext, z) -> tuple[Matrix2, Matrix2]:
        """Образы базовых генераторов a и b."""

    def inverse_image(self, m: Matrix2) -> Matrix2:
        """
        Образ обратной буквы.

        Семейства в SL(2, C) обращают как det · adj. Семейство с det != 1
        должно переопределить метод (например, на Matrix2.inverse).

        Raises:
            DegenerateMatrix: если det = 0
        """
        return m.unimodular_inverse()

    def images(self, ctx: PrecisionContext, z) -> GeneratorImages:
        """
        Все четыре образа для (ctx, z).

        Raises:
            DegenerateMatrix: если семейство не определено в z или
                образ генератора необратим
        """
        a, b = self.generators(ctx, z)
        logger.debug("Built generator images: representation=%s, precision=%d", self.name, ctx.bits)
        return GeneratorImages.from_generators(ctx, a, b, invert=self.inverse_image)


class SqrtPairRepresentation(Representation):
    """
    Семейство sqrt-pair: симметричная ρ(a), ρ(b) с мнимой внедиагональю.

    Не определено в точках, где sqrt(z² − 1) = 0 (z = ±1).
    """

    name = "sqrt-pair"

    def generators(self, ctx: PrecisionContext, z) -> tuple[Matrix2, Matrix2]:
        root = ctx.sqrt(z * z - 1)
        if root == 0:
            raise DegenerateMatrix(f"sqrt-pair representation is undefined at z = {z}: z^2 - 1 = 0")

        c = 1 / root
        cz = c * z
        rho_a = Matrix2(cz, c, c, cz)

        y = -z / root
        y_root = ctx.sqrt(y * y - 1)
        if y_root == 0:
            raise DegenerateMatrix(f"sqrt-pair representation is undefined at z = {z}: y^2 - 1 = 0")

        d = 1 / y_root
        dy = d * y
        di = d * ctx.i
        rho_b = Matrix2(dy, di, -di, dy)

        return rho_a, rho_b


class TrivialRepresentation(Representation):
    """Оба генератора ↦ единичная матрица. Образ любого слова — I."""

    name = "trivial"

    def generators(self, ctx: PrecisionContext, z) -> tuple[Matrix2, Matrix2]:
        identity = Matrix2.identity(ctx)
        return identity, identity


# =============================================================================
# РЕЕСТР
# =============================================================================

DEFAULT_REPRESENTATION: Final[str] = SqrtPairRepresentation.name

REPRESENTATIONS: Final[dict[str, type[Representation]]] = {
    SqrtPairRepresentation.name: SqrtPairRepresentation,
    TrivialRepresentation.name: TrivialRepresentation,
}


def get_representation(name: str = DEFAULT_REPRESENTATION) -> Representation:
    """
    Экземпляр семейства по имени.

    Raises:
        ValueError: если имя не зарегистрировано
    """
    try:
        return REPRESENTATIONS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown representation {name!r}; available: {', '.join(sorted(REPRESENTATIONS))}"
        ) from None
