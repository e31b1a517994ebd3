"""
Errors — Типизированные ошибки вычислений

Все ошибки ядра наследуются от WordTraceError и пробрасываются вызывающему
коду без повторных попыток: вычисление детерминировано, повтор с тем же
входом даст тот же результат.

ТАКСОНОМИЯ:
1. InvalidLetter     — символ слова вне алфавита {a, b, A, B}
2. InvalidFraction   — (p, q) не является парой взаимно простых положительных чисел
3. DegenerateMatrix  — det = 0 при обращении матрицы или неопределённый образ генератора

PrecisionTooLow не детектируется: недостаточная точность остаётся на
ответственности вызывающего (единственный мягкий сигнал — warning при проверке
собственного вектора).
"""


class WordTraceError(Exception):
    """Базовая ошибка вычисления образа слова."""
    pass


class InvalidLetter(WordTraceError, ValueError):
    """
    Слово содержит символ вне алфавита {a, b, A, B}.

    Наследуется от ValueError, поэтому внутри pydantic валидаторов
    превращается в ValidationError.
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid letter {char!r} at position {position}: "
            f"word must contain only the letters 'a', 'b', 'A', 'B'"
        )


class InvalidFraction(WordTraceError, ValueError):
    """
    (p, q) не является вершиной дерева Штерна–Броко.

    Допустимы только p ≥ 1, q ≥ 1, gcd(p, q) = 1.
    """

    def __init__(self, p: int, q: int, reason: str):
        self.p = p
        self.q = q
        super().__init__(f"Invalid fraction {p}/{q}: {reason}")


class DegenerateMatrix(WordTraceError, ArithmeticError):
    """
    Определитель матрицы равен нулю там, где требуется обращение.

    На практике возникает только при неверно сконфигурированном
    представлении (например, z = ±1 для семейства sqrt-pair).
    Никогда не подменяется нулём или бесконечностью.
    """
    pass
