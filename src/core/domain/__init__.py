"""
Domain models and value objects.

Contains letters and words of the free group F(a, b) and vertices of the
Stern–Brocot tree.
"""

from src.core.domain.fraction import SternBrocotFraction, validate_fraction
from src.core.domain.word import (
    ALPHABET,
    Letter,
    letter_counts,
    letters,
    parse_word,
    random_word,
)

__all__ = [
    # Word module
    "ALPHABET",
    "Letter",
    "letter_counts",
    "letters",
    "parse_word",
    "random_word",
    # Fraction model
    "SternBrocotFraction",
    "validate_fraction",
]
