"""
SternBrocotFraction — Вершина дерева Штерна–Броко

Immutable Pydantic модель несократимой положительной дроби p/q.
Дерево перечисляет все положительные рациональные числа в несократимом
виде, строго между граничными дробями 0/1 и 1/0.

ИНВАРИАНТЫ:
1. p >= 1, q >= 1
2. gcd(p, q) = 1 (сократимые пары отклоняются, а не сокращаются)
"""

import math

from pydantic import BaseModel, Field, model_validator

from src.core.errors import InvalidFraction


def validate_fraction(p: int, q: int) -> tuple[int, int]:
    """
    Проверка пары (p, q) до спуска по дереву.

    Args:
        p: Числитель
        q: Знаменатель

    Returns:
        (p, q) без изменений

    Raises:
        InvalidFraction: если p или q не целые, не положительные,
            или gcd(p, q) != 1
    """
    for value in (p, q):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFraction(p, q, "numerator and denominator must be integers")
    if p < 1 or q < 1:
        raise InvalidFraction(p, q, "numerator and denominator must be positive")
    g = math.gcd(p, q)
    if g != 1:
        raise InvalidFraction(p, q, f"not in lowest terms (gcd = {g})")
    return p, q


class SternBrocotFraction(BaseModel):
    """
    Несократимая дробь p/q > 0.

    Нарушение инвариантов в конструкторе → pydantic.ValidationError
    (InvalidFraction — подкласс ValueError).
    """

    p: int = Field(..., description="Числитель (>= 1)")
    q: int = Field(..., description="Знаменатель (>= 1)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_lowest_terms(self) -> "SternBrocotFraction":
        """Положительность и несократимость."""
        validate_fraction(self.p, self.q)
        return self

    def __str__(self) -> str:
        return f"{self.p}/{self.q}"

    @property
    def word_length(self) -> int:
        """Длина канонического слова: p + q."""
        return self.p + self.q
