"""Runner — конфигурация, выполнение запуска, вывод и CLI."""

from .config import ComplexInput, RunConfig, WordSource
from .runner import EigenResult, RunResult, make_rng, resolve_word, run

__all__ = [
    "ComplexInput",
    "RunConfig",
    "WordSource",
    "EigenResult",
    "RunResult",
    "make_rng",
    "resolve_word",
    "run",
]
