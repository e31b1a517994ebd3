"""
Runner — Выполнение одного запуска

Порядок:
1. Контекст точности из RunConfig
2. Генератор случайных чисел (только если нужен): seed из конфигурации
   или из энтропии ОС (записывается в лог для воспроизведения)
3. z: явное значение или два равномерных числа из [0, 1)
4. Слово: буквально, из дроби p/q или случайное (после z)
5. Образы генераторов → свёртка слова → след
6. Опционально: доминирующая собственная пара с проверкой

Состояние между запусками не сохраняется.
"""

import logging
import random
from dataclasses import dataclass
from typing import Final

from src.core.domain.word import random_word
from src.core.math.matrix2 import Matrix2
from src.core.math.precision import PrecisionContext
from src.representation.generators import get_representation
from src.runner.config import RunConfig, WordSource
from src.words.evaluator import evaluate
from src.words.stern_brocot import derive

logger = logging.getLogger(__name__)

# Диапазон seed при розыгрыше из энтропии ОС
SEED_BITS: Final[int] = 32


@dataclass(frozen=True)
class EigenResult:
    """Доминирующая собственная пара результата."""

    eigenvalue: object
    eigenvector: tuple
    is_eigenvector: bool


@dataclass(frozen=True)
class RunResult:
    """Результат запуска."""

    config: RunConfig
    ctx: PrecisionContext
    z: object
    word: str
    seed: int | None
    matrix: Matrix2
    trace: object
    eigen: EigenResult | None = None

    @property
    def determinant(self):
        return self.matrix.determinant()


def make_rng(seed: int | None) -> tuple[random.Random, int]:
    """
    Генератор случайных чисел запуска.

    Args:
        seed: Явный seed или None (разыгрывается из энтропии ОС)

    Returns:
        (rng, фактический seed)
    """
    if seed is None:
        seed = random.SystemRandom().getrandbits(SEED_BITS)
    logger.info("Random seed: %d", seed)
    return random.Random(seed), seed


def resolve_word(config: RunConfig, rng: random.Random | None) -> str:
    """
    Слово из выбранного источника.

    Raises:
        InvalidFraction: для некорректной дроби
    """
    source = config.word_source
    if source is WordSource.WORD:
        return config.word
    if source is WordSource.FRACTION:
        word = derive(config.fraction.p, config.fraction.q)
        logger.debug("Derived word for %s: length %d", config.fraction, len(word))
        return word
    return random_word(config.random_word_length, rng)


def run(config: RunConfig) -> RunResult:
    """
    Выполнение запуска по конфигурации.

    Raises:
        DegenerateMatrix: представление не определено в z или генератор необратим
    """
    ctx = PrecisionContext(config.precision)
    representation = get_representation(config.representation)

    rng = None
    seed = None
    if config.needs_rng:
        rng, seed = make_rng(config.seed)

    if config.random_z:
        z = ctx.complex(rng.random(), rng.random())
    else:
        z = ctx.complex(*config.z.as_tuple())

    word = resolve_word(config, rng)
    logger.debug(
        "Evaluating: representation=%s, precision=%d bits, source=%s, word length=%d",
        representation.name,
        ctx.bits,
        config.word_source.value,
        len(word),
    )

    images = representation.images(ctx, z)
    matrix = evaluate(word, images)

    eigen = None
    if config.eigen:
        eigenvalue, eigenvector = matrix.dominant_eigenpair(ctx)
        ok = matrix.is_eigenvector(eigenvector)
        if not ok:
            logger.warning("Output is not very close to an eigenvector, increase precision")
        eigen = EigenResult(eigenvalue=eigenvalue, eigenvector=eigenvector, is_eigenvector=ok)

    return RunResult(
        config=config,
        ctx=ctx,
        z=z,
        word=word,
        seed=seed,
        matrix=matrix,
        trace=matrix.trace(),
        eigen=eigen,
    )
