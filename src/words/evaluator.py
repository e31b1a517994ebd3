"""
Word Evaluator — Образ слова под представлением

Левая свёртка по буквам слова, начиная с единичной матрицы:
    result := I
    для каждой буквы x слева направо: result := result · ρ(x)

Порядок умножения зафиксирован: левая буква остаётся слева в
накапливаемом произведении. Обратный порядок даёт для неабелевых слов
другую (в общем случае не сопряжённую) матрицу и другой след.

Свойства:
- evaluate("") == I, след 2
- evaluate(w1 + w2) == evaluate(w1) · evaluate(w2) (с точностью округления)
- Без побочных эффектов: чистая функция (слово, образы генераторов)
"""

import logging

from src.core.domain.word import letters, parse_word
from src.core.math.matrix2 import Matrix2, matrix_product
from src.core.math.precision import PrecisionContext, RealInput
from src.representation.generators import (
    GeneratorImages,
    Representation,
    SqrtPairRepresentation,
)

logger = logging.getLogger(__name__)


def evaluate(word: str, images: GeneratorImages) -> Matrix2:
    """
    Образ слова: I · ρ(w0) · ρ(w1) · … · ρ(wn−1).

    Args:
        word: Слово над {a, b, A, B} (несокращённое допустимо)
        images: Образы четырёх букв

    Returns:
        Результирующая матрица

    Raises:
        InvalidLetter: если слово содержит недопустимый символ
            (до начала вычисления)
    """
    sequence = letters(word)
    result = matrix_product(map(images.image, sequence), images.ctx)
    logger.debug("Evaluated word of length %d", len(sequence))
    return result


def evaluate_word(
    word: str,
    z: tuple[RealInput, RealInput],
    precision: int,
    representation: Representation | None = None,
) -> tuple[Matrix2, object]:
    """
    Образ слова и его след для (z, точность).

    Args:
        word: Слово над {a, b, A, B}
        z: (re, im) — int, float или десятичные строки
        precision: Точность в битах
        representation: Семейство представлений (по умолчанию sqrt-pair)

    Returns:
        (matrix, trace)

    Raises:
        InvalidLetter: недопустимый символ в слове
        DegenerateMatrix: представление не определено в z
        ValueError: недопустимая точность или z
    """
    parse_word(word)
    ctx = PrecisionContext(precision)
    value = ctx.complex(*z)
    images = (representation or SqrtPairRepresentation()).images(ctx, value)
    matrix = evaluate(word, images)
    return matrix, matrix.trace()
