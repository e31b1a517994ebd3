"""
Report — Текстовый и JSON вывод результата запуска

Текст:
    (m00) (m01)
    (m10) (m11)
    trace = (re im)
    [dominant_eigenvalue = (re im)]
    [dominant_eigenvector = (re im) (re im)]

JSON: словарь по контракту evaluation_report.json; все числа —
десятичные строки в тех же значащих цифрах, что и текст.
"""

from typing import Any, Dict, Final

from src.core.contracts import validate_evaluation_report
from src.core.domain.word import letter_counts
from src.core.math.formatting import format_complex, format_evaluation, format_real
from src.runner.runner import RunResult

REPORT_SCHEMA_VERSION: Final[str] = "1"


def render_text(result: RunResult) -> str:
    """Текстовый вывод запуска."""
    lines = [format_evaluation(result.matrix, result.trace, result.ctx.bits)]
    if result.eigen is not None:
        digits = result.ctx.digits
        vx, vy = result.eigen.eigenvector
        lines.append(f"dominant_eigenvalue = {format_complex(result.eigen.eigenvalue, digits)}")
        lines.append(
            f"dominant_eigenvector = {format_complex(vx, digits)} {format_complex(vy, digits)}"
        )
    return "\n".join(lines)


def _complex_json(value, digits: int) -> Dict[str, str]:
    return {"re": format_real(value.real, digits), "im": format_real(value.imag, digits)}


def build_report(result: RunResult) -> Dict[str, Any]:
    """
    JSON отчёт запуска.

    Returns:
        dict, прошедший валидацию по evaluation_report.json

    Raises:
        jsonschema.ValidationError: если отчёт нарушает контракт
    """
    digits = result.ctx.digits
    config = result.config

    report: Dict[str, Any] = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "precision": result.ctx.bits,
        "digits": digits,
        "representation": config.representation,
        "source": config.word_source.value,
        "word": result.word,
        "word_length": len(result.word),
        "letter_counts": letter_counts(result.word),
        "z": _complex_json(result.z, digits),
        "matrix": [[_complex_json(entry, digits) for entry in row] for row in result.matrix.rows()],
        "trace": _complex_json(result.trace, digits),
        "determinant": _complex_json(result.determinant, digits),
    }
    if config.fraction is not None:
        report["fraction"] = {"p": config.fraction.p, "q": config.fraction.q}
    if result.seed is not None:
        report["seed"] = result.seed
    if result.eigen is not None:
        report["dominant_eigenvalue"] = _complex_json(result.eigen.eigenvalue, digits)
        report["dominant_eigenvector"] = [_complex_json(v, digits) for v in result.eigen.eigenvector]
        report["eigenvector_ok"] = result.eigen.is_eigenvector

    validate_evaluation_report(report)
    return report
