"""
Word — Слова свободной группы F(a, b)

Алфавит из четырёх букв:
- a, b — базовые генераторы
- A, B — их формальные обратные

Слово — конечная строка над алфавитом, длина >= 0. Пустое слово задаёт
единицу группы. Редукция (сокращение пар aA, Bb, …) НЕ выполняется:
несокращённые слова допустимы и вычисляются честным умножением матриц.
"""

import random
from enum import Enum
from typing import Final

from src.core.errors import InvalidLetter


# =============================================================================
# ENUMS
# =============================================================================


class Letter(str, Enum):
    """Буква слова."""

    a = "a"
    b = "b"
    A = "A"
    B = "B"


# Алфавит в фиксированном порядке (для равномерной генерации)
ALPHABET: Final[str] = "abAB"


# =============================================================================
# РАЗБОР И ПРЕОБРАЗОВАНИЯ
# =============================================================================


def parse_word(text: str) -> str:
    """
    Проверка строки как слова над {a, b, A, B}.

    Ошибка сообщается сразу, до какого-либо вычисления.

    Args:
        text: Исходная строка

    Returns:
        Та же строка, если все символы допустимы

    Raises:
        InvalidLetter: на первом недопустимом символе (с позицией)
    """
    for position, char in enumerate(text):
        if char not in ALPHABET:
            raise InvalidLetter(char, position)
    return text


def letters(word: str) -> list[Letter]:
    """Разбор слова в список букв."""
    return [Letter(c) for c in parse_word(word)]


def letter_counts(word: str) -> dict[str, int]:
    """Число вхождений каждой буквы алфавита."""
    parse_word(word)
    return {letter: word.count(letter) for letter in ALPHABET}


# =============================================================================
# СЛУЧАЙНЫЕ СЛОВА
# =============================================================================


def random_word(length: int, rng: random.Random) -> str:
    """
    Равномерно случайное (несокращённое) слово.

    Каждая буква независимо и равновероятно выбирается из {a, b, A, B}.

    Args:
        length: Число букв (>= 0)
        rng: Источник случайности

    Returns:
        Строка ровно из length букв

    Raises:
        ValueError: если length < 0
    """
    if length < 0:
        raise ValueError(f"random word length must be non-negative, got {length}")
    return "".join(rng.choice(ALPHABET) for _ in range(length))
