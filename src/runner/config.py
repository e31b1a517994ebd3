"""
RunConfig — Конфигурация одного запуска

Immutable Pydantic модель, собирающая всё, что фиксируется до начала
вычисления:
- Точность (бит)
- Параметр z: явное значение ИЛИ случайный выбор
- Источник слова: ровно один из word / fraction / random_word_length
- Семейство представлений, seed, флаги вывода

Модель не выполняет вычислений и не тянет случайность: она только
валидирует вход. Розыгрыш случайных z и слова — в runner.
"""

from enum import Enum
from typing import Union

from mpmath import mpf
from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.fraction import SternBrocotFraction
from src.core.domain.word import parse_word
from src.core.math.precision import MIN_PRECISION_BITS
from src.representation.generators import DEFAULT_REPRESENTATION, REPRESENTATIONS


# =============================================================================
# ENUMS
# =============================================================================


class WordSource(str, Enum):
    """Источник слова."""

    WORD = "word"
    FRACTION = "fraction"
    RANDOM = "random"


# =============================================================================
# NESTED MODELS
# =============================================================================


class ComplexInput(BaseModel):
    """
    Явное значение z = re + i·im.

    Строки парсятся в полной точности запуска (а не через float),
    float и int переносятся точно.
    """

    re: Union[float, str] = Field(..., description="Вещественная часть")
    im: Union[float, str] = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    @field_validator("re", "im")
    @classmethod
    def validate_number(cls, v: Union[float, str]) -> Union[float, str]:
        """Строка должна разбираться как десятичное число."""
        if isinstance(v, str):
            try:
                value = mpf(v.strip())
            except ValueError:
                raise ValueError(f"not a decimal number: {v!r}") from None
            if value != value or abs(value) == float("inf"):
                raise ValueError(f"z components must be finite, got {v!r}")
            return v.strip()
        if v != v or abs(v) == float("inf"):
            raise ValueError(f"z components must be finite, got {v!r}")
        return v

    def as_tuple(self) -> tuple[Union[float, str], Union[float, str]]:
        return (self.re, self.im)


# =============================================================================
# RUN CONFIG
# =============================================================================


class RunConfig(BaseModel):
    """
    Финализированная конфигурация запуска.

    Инварианты:
    - ровно один источник z: z или random_z
    - ровно один источник слова: word, fraction или random_word_length
    """

    precision: int = Field(..., ge=MIN_PRECISION_BITS, description="Точность (бит мантиссы)")

    # Параметр z
    z: ComplexInput | None = Field(None, description="Явное значение z")
    random_z: bool = Field(False, description="Случайный z: re, im равномерно в [0, 1)")

    # Источник слова
    word: str | None = Field(None, description="Слово над {a, b, A, B}")
    fraction: SternBrocotFraction | None = Field(
        None, description="Дробь p/q для спуска по дереву Штерна–Броко"
    )
    random_word_length: int | None = Field(
        None, ge=0, description="Длина равномерно случайного слова"
    )

    # Прочее
    representation: str = Field(DEFAULT_REPRESENTATION, description="Семейство представлений")
    seed: int | None = Field(None, description="Seed генератора случайных чисел")
    eigen: bool = Field(False, description="Вычислить доминирующую собственную пару")
    output_json: bool = Field(False, description="JSON отчёт вместо текста")

    model_config = {"frozen": True}

    @field_validator("word")
    @classmethod
    def validate_word(cls, v: str | None) -> str | None:
        """Буквы слова проверяются сразу (InvalidLetter → ValidationError)."""
        if v is None:
            return v
        return parse_word(v)

    @field_validator("representation")
    @classmethod
    def validate_representation(cls, v: str) -> str:
        if v not in REPRESENTATIONS:
            raise ValueError(
                f"unknown representation {v!r}; available: {', '.join(sorted(REPRESENTATIONS))}"
            )
        return v

    @model_validator(mode="after")
    def validate_sources(self) -> "RunConfig":
        """Ровно один источник z и ровно один источник слова."""
        if (self.z is not None) == self.random_z:
            raise ValueError("exactly one of z, random_z must be provided")

        word_sources = [
            self.word is not None,
            self.fraction is not None,
            self.random_word_length is not None,
        ]
        if sum(word_sources) != 1:
            raise ValueError(
                "exactly one of word, fraction, random_word_length must be provided"
            )
        return self

    @property
    def word_source(self) -> WordSource:
        if self.word is not None:
            return WordSource.WORD
        if self.fraction is not None:
            return WordSource.FRACTION
        return WordSource.RANDOM

    @property
    def needs_rng(self) -> bool:
        """Нужен ли генератор случайных чисел."""
        return self.random_z or self.word_source is WordSource.RANDOM
