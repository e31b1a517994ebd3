"""Words — каноническое слово дроби и вычисление образа слова.

- Stern–Brocot deriver: p/q → слово над {a, b}
- Word evaluator: слово → матрица 2×2 и её след
"""

from .evaluator import evaluate, evaluate_word
from .stern_brocot import (
    Descent,
    derive,
    derive_matrix,
    stern_brocot_fold,
    stern_brocot_path,
)

__all__ = [
    "Descent",
    "derive",
    "derive_matrix",
    "evaluate",
    "evaluate_word",
    "stern_brocot_fold",
    "stern_brocot_path",
]
