"""
Stern–Brocot Deriver — Каноническое слово рационального числа

Спуск по дереву Штерна–Броко от корня 1/1 к несократимой дроби p/q
совпадает с вычитательным алгоритмом Евклида:
- p > q → шаг вправо (R), p := p − q
- q > p → шаг влево  (L), q := q − p
- p = q = 1 → остановка

Слово строится правилом медианты из граничных слов:
    0/1 ↦ "a",  1/0 ↦ "b"
    R: low  := low + high
    L: high := low + high
    результат: low + high

Свёртка обобщена на любой моноид (combine): строки с конкатенацией дают
слово, матрицы с умножением — сразу его образ за O(глубина) произведений.

ИНВАРИАНТЫ:
1. derive(3, 2) == "ababb"
2. len(derive(p, q)) == p + q
3. В derive(p, q) ровно q букв 'a' и p букв 'b'
"""

from enum import Enum
from typing import Callable, TypeVar

from src.core.domain.fraction import validate_fraction
from src.core.math.matrix2 import Matrix2
from src.representation.generators import GeneratorImages

T = TypeVar("T")


class Descent(str, Enum):
    """Шаг спуска по дереву."""

    LEFT = "L"
    RIGHT = "R"


# =============================================================================
# ПУТЬ СПУСКА
# =============================================================================


def stern_brocot_path(p: int, q: int) -> list[Descent]:
    """
    Путь от корня 1/1 до p/q.

    Длины серий одинаковых шагов — элементы непрерывной дроби p/q
    (последний уменьшен на 1).

    Args:
        p: Числитель (>= 1)
        q: Знаменатель (>= 1), gcd(p, q) = 1

    Returns:
        Список шагов; для 1/1 — пустой

    Raises:
        InvalidFraction: если (p, q) не вершина дерева

    Examples:
        >>> stern_brocot_path(3, 2)
        [<Descent.RIGHT: 'R'>, <Descent.LEFT: 'L'>]
    """
    validate_fraction(p, q)
    path = []
    while p != q:
        if p > q:
            path.append(Descent.RIGHT)
            p -= q
        else:
            path.append(Descent.LEFT)
            q -= p
    return path


def stern_brocot_fold(
    p: int,
    q: int,
    low: T,
    high: T,
    combine: Callable[[T, T], T],
) -> T:
    """
    Свёртка правила медианты вдоль пути к p/q.

    Args:
        p: Числитель
        q: Знаменатель
        low: Значение левой границы (0/1)
        high: Значение правой границы (1/0)
        combine: Ассоциативная операция моноида (левый операнд — левая граница)

    Returns:
        combine(low, high) после спуска

    Raises:
        InvalidFraction: если (p, q) не вершина дерева
    """
    for step in stern_brocot_path(p, q):
        if step is Descent.RIGHT:
            low = combine(low, high)
        else:
            high = combine(low, high)
    return combine(low, high)


# =============================================================================
# СЛОВА И ОБРАЗЫ
# =============================================================================


def derive(p: int, q: int) -> str:
    """
    Каноническое (кристоффелево) слово для p/q.

    Examples:
        >>> derive(3, 2)
        'ababb'
        >>> derive(1, 1)
        'ab'
    """
    return stern_brocot_fold(p, q, "a", "b", lambda left, right: left + right)


def derive_matrix(p: int, q: int, images: GeneratorImages) -> Matrix2:
    """
    Образ derive(p, q) без построения слова.

    Совпадает с evaluate(derive(p, q), images) с точностью округления
    (отличается только расстановка скобок в произведении).
    """
    return stern_brocot_fold(
        p,
        q,
        images.a,
        images.b,
        lambda left, right: left.multiply(right),
    )
